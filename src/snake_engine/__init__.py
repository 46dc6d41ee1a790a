"""Tick and rules engine for a grid-based snake game."""

from .collision import Collision, check_collision
from .config import BASE_UPDATE_INTERVAL, MIN_MOVE_INTERVAL, CFG, Config
from .entities import Entity, EntityKind, EntitySpawner
from .grid import Grid, Position
from .scheduler import MoveTrigger, MovementScheduler
from .session import Frame, Game, GameSession, HighScore, TickResult
from .snake import Direction, SnakeBody

__all__ = [
    "BASE_UPDATE_INTERVAL", "MIN_MOVE_INTERVAL", "CFG", "Config",
    "Collision", "check_collision",
    "Entity", "EntityKind", "EntitySpawner",
    "Grid", "Position",
    "MoveTrigger", "MovementScheduler",
    "Frame", "Game", "GameSession", "HighScore", "TickResult",
    "Direction", "SnakeBody",
]
