"""RPG Arena - character creation and turn-based battles over HTTP."""

__version__ = "0.1.0"
