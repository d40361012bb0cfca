"""A terminal zombie survival game: world generation, movement, field of view and a curses front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]