"""Kingside: chess rules engine with minimax and alpha-beta search."""

__version__ = "0.1.0"
