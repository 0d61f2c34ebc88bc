"""Character roster manager with pluggable flat-file storage."""

__version__ = "0.1.0"
