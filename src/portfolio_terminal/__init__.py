"""Interactive terminal interface for a developer portfolio."""

__version__ = "0.1.0"
