"""A terminal fantasy football game with a player market, line-ups, rounds and a ranking."""

__version__ = "0.1.0"