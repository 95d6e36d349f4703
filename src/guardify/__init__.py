"""Campus safety companion: safe-route selection, emergency recording and chat."""

__version__ = "0.1.0"
