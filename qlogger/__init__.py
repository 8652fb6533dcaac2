"""Thread-backed logging of templated messages to the console and files."""

__version__ = "0.1.0"
__all__ = ["__version__"]