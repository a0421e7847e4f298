"""Turn-based airline management simulation engine."""

__version__ = "1.0.0"
