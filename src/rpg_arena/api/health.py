"""Health endpoint - memory and disk usage against configured limits."""

import logging
from typing import Any

import psutil
from flask import Blueprint, jsonify

from ..config import Settings
from .context import get_services

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")

MEGABYTE = 1024 * 1024


def _threshold_result(used: float, limit: float, message: str) -> dict[str, Any]:
    if used > limit:
        return {"status": "down", "message": message}
    return {"status": "up"}


def check_memory_heap(limit_mb: int) -> dict[str, Any]:
    """Compare the process heap with ``limit_mb``.

    Heap is private resident memory: RSS minus shared pages where psutil
    reports them, plain RSS elsewhere.
    """
    info = psutil.Process().memory_info()
    used = info.rss - getattr(info, "shared", 0)
    return _threshold_result(used, limit_mb * MEGABYTE, "Used heap exceeded the set threshold")


def check_memory_rss(limit_mb: int) -> dict[str, Any]:
    used = psutil.Process().memory_info().rss
    return _threshold_result(used, limit_mb * MEGABYTE, "Used rss exceeded the set threshold")


def check_storage(path: str, threshold: float) -> dict[str, Any]:
    """Compare the used fraction of the disk holding ``path`` with ``threshold``."""
    try:
        usage = psutil.disk_usage(path)
    except OSError as e:
        return {"status": "down", "message": str(e)}
    return _threshold_result(usage.percent / 100, threshold, "Used disk storage exceeded the set threshold")


def run_checks(settings: Settings) -> dict[str, dict[str, Any]]:
    """Run every check, keyed by indicator name."""
    return {
        "memory_heap": check_memory_heap(settings.health_heap_limit_mb),
        "memory_rss": check_memory_rss(settings.health_rss_limit_mb),
        "storage": check_storage(settings.health_disk_path, settings.health_disk_threshold),
    }


@health_bp.get("")
def health():
    """Report each indicator; 503 if any is down."""
    details = run_checks(get_services().settings)
    info = {name: result for name, result in details.items() if result["status"] == "up"}
    error = {name: result for name, result in details.items() if result["status"] != "up"}

    if error:
        logger.warning("Health check failed: %s", ", ".join(error))
        body = {"status": "error", "info": info, "error": error, "details": details}
        return jsonify(body), 503

    return jsonify({"status": "ok", "info": info, "error": {}, "details": details})
