"""Dominion card game engine, seeded random streams, interactive player and scripted games."""

__version__ = "0.1.0"
__all__ = ["cards", "rngs", "seedsearch", "game", "effects", "interface", "playdom", "player"]