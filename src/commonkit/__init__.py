"""commonkit — date binding, argument validation, and type-hierarchy helpers."""

__version__ = "0.3.0"
