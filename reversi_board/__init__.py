"""Reversi played in a pygame window, against a random computer opponent or two players at one machine."""

__version__ = "0.1.0"