"""blockfall: a falling-block puzzle game with a pygame front end."""

__version__ = "0.1.0"
