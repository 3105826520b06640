"""Teaching programs: a chess rules engine, crossword generation, Game of Life and console exercises."""

__version__ = "1.0.0"