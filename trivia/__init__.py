"""A console trivia game for two to four players: questions, players, matches and tie-breaks."""

__version__ = "1.0.0"
__all__ = ["__version__"]