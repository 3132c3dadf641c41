"""Game layer - participants."""

from chesschecker.game.player import Player

__all__ = ["Player"]
