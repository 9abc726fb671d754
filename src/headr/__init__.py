"""headr: print the first part of files."""

__version__ = "0.1.0"
