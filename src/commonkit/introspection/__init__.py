"""Build type descriptors from live Python classes."""

from commonkit.introspection.python_types import describe_class, load_class

__all__: list[str] = ["describe_class", "load_class"]
