"""Document question answering over a single uploaded file."""

__version__ = "0.1.0"
