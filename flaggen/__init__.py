"""flaggen — generate Java feature-flag accessors from a flag cache."""

__version__ = "0.1.0"
