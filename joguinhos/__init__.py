"""Small terminal games and exercises: pacman, hangman, number guessing, a record registry, drills and a spinner."""

__version__ = "0.1.0"