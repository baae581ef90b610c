"""Binary film collection reader with actor lookup and iteration helpers."""

__version__ = "0.1.0"
__all__ = ["binary", "cli", "collection", "iterutils", "zipping"]