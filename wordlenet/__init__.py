"""A networked word-guessing game: records, word rotation, game rules, TCP server and terminal client."""

__version__ = "0.1.0"
__all__ = ["__version__"]