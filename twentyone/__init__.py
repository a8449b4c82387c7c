"""A terminal game of twenty-one for up to four players against a dealer."""

__version__ = "0.1.0"
__all__ = ["cards", "game"]