"""bblctl — BOSH bootloader CLI."""

__version__ = "0.1.0"
