"""Command-line option model, name matching and INI configuration reading."""

__version__ = "0.1.0"
__all__ = ["config", "defaults", "errors", "names", "option"]