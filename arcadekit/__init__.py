"""2D vectors, lines, shapes, ARGB colours and a double-buffered pixel screen for arcade graphics."""

__version__ = "0.1.0"