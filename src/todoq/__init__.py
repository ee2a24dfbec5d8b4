"""todoq - a line-oriented task list interpreter."""

__version__ = "0.1.0"
