"""Game design thinking tool server."""

__version__ = "0.3.0"
