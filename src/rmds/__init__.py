"""rmds: recursively remove .DS_Store and AppleDouble files."""

__version__ = "0.1.0"
