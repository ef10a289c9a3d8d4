"""Guess-the-number game: terminal loop plus a Redis-backed HTTP session service."""

__version__ = "0.1.0"
