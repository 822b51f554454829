"""Benchmark hangman letter-guessing strategies against a dictionary."""

__version__ = "0.1.0"
