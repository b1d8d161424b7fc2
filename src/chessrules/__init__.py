"""Rules engine and text host for two-player chess."""

__version__ = "0.1.0"
