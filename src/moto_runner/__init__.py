"""
Moto Runner: an endless-runner motorcycle game.
Simulation core (engine, physics, spawning, collisions) plus a pygame client.
"""

from .data_models import GameSession, InputIntent
from .game_engine import GameEngine, GameState

__all__ = ["GameEngine", "GameState", "GameSession", "InputIntent"]
