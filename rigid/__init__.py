"""rigid — micro template for rapid prototyping."""

__version__ = "0.1.0"
