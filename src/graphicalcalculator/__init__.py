"""Graphical calculator: a fixed-shape expression editor with a Qt front end."""
__version__ = "1.0.0"
