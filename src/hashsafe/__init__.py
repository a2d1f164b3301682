"""HashSafe - SHA-256 file hash calculator."""

__version__ = "0.1.0"
