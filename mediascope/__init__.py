"""Media query extraction and responsive complexity scoring."""

__version__ = "1.0.0"
