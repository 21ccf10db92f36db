"""Terminal employee register with binary storage and text/CSV exports."""

__version__ = "0.1.0"