"""Game clock API boundary and runtime modules."""

from gameclock.api.clock import create_game_clock

__all__ = ["create_game_clock"]
