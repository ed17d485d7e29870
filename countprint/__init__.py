"""A small printf with a fixed set of conversions that counts what it writes."""

__version__ = "0.1.0"
__all__ = ["printf", "writers"]