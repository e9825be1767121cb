"""Build and check S5PV210 BL1 boot images with their 16-byte size and checksum header."""

__version__ = "0.1.0"
__all__ = ["image", "cli"]