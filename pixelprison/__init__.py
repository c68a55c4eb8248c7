"""Animated main menu for the Pixel Prison game."""

__version__ = "0.1.0"
__all__ = ["__version__"]