"""A block maze game with a small scene and game-object framework."""

__version__ = "0.1.0"