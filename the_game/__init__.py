"""A single-player terminal card game: play cards 2 to 99 onto two rising and two falling piles."""

__version__ = "0.1.0"