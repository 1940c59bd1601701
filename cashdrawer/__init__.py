"""Make change from a cash drawer."""

__version__ = "0.1.0"
