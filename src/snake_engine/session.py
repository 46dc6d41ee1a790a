# session.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

from .collision import Collision, check_collision
from .config import CFG, Config
from .entities import Entity, EntityKind, EntitySpawner, consume
from .grid import Grid, Position
from .scheduler import MovementScheduler
from .snake import Direction, SnakeBody

logger = logging.getLogger(__name__)


class TickResult(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Frame:
    """What the renderer gets each tick."""
    body: Tuple[Position, ...]
    apple: Optional[Position]
    score: int


# ---------- Session ----------
class GameSession:
    """
    One life of the snake: body, live entities, score and move clock.

    A session is thrown away on game over; see Game for the lifecycle.
    """

    def __init__(
        self,
        grid: Grid,
        config: Config = CFG,
        rng: Optional[random.Random] = None,
        snake: Optional[SnakeBody] = None,
    ):
        self.grid = grid
        self.snake = snake or SnakeBody([grid.center], Direction.RIGHT)
        self.scheduler = MovementScheduler(config.base_update_interval, config.min_move_interval)
        self.spawner = EntitySpawner(grid, rng, avoid_snake=config.avoid_snake_on_spawn)
        self.entities: List[Entity] = []
        self.score = 0
        self.last_collision = Collision.NONE

    def tick(self, delta: float, now: float, pressed: Optional[Direction] = None) -> TickResult:
        """
        Run one frame of game logic.

        Returns GAME_OVER when the move just made hit a wall or the body,
        CONTINUE otherwise (including ticks where nothing moved).
        """
        if pressed is not None:
            self.snake.set_direction(pressed)

        trigger = self.scheduler.tick(delta, now, pressed is not None)
        if trigger is None:
            return TickResult.CONTINUE

        head = self.snake.advance()
        logger.debug("Moved to %s (%s)", tuple(head), trigger.value)

        self.last_collision = check_collision(self.grid, self.snake)
        if self.last_collision.terminal:
            return TickResult.GAME_OVER

        eaten = consume(self.entities, head)
        if eaten is not None:
            self._on_consumed(eaten)

        if not self.entities:
            apple = self.spawner.spawn(EntityKind.APPLE, self.snake)
            if apple is not None:
                self.entities.append(apple)

        return TickResult.CONTINUE

    def _on_consumed(self, entity: Entity) -> None:
        if entity.kind is EntityKind.APPLE:
            self.snake.grow()
            self.score += 1

    @property
    def apple(self) -> Optional[Entity]:
        for entity in self.entities:
            if entity.kind is EntityKind.APPLE:
                return entity
        return None

    def frame(self) -> Frame:
        apple = self.apple
        return Frame(
            body=self.snake.segments,
            apple=apple.position if apple is not None else None,
            score=self.score,
        )


# ---------- Lifecycle ----------
class HighScore:
    """
    Best score of the process. Starts at 0, only ever raised by
    record() on game over, forgotten when the process exits.
    """

    def __init__(self):
        self.best = 0

    def record(self, score: int) -> int:
        self.best = max(self.best, score)
        return self.best

    def __int__(self):
        return self.best


class Game:
    """
    Owns the high score and the current session, and swaps in a fresh
    session whenever the current one ends. The grid never changes.
    """

    def __init__(self, grid: Grid, config: Config = CFG, rng: Optional[random.Random] = None):
        self.grid = grid
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.high_score = HighScore()
        self.games_played = 0
        self.session = self.new_session()

    def new_session(self) -> GameSession:
        return GameSession(self.grid, self.config, self.rng)

    def tick(self, delta: float, now: float, pressed: Optional[Direction] = None) -> TickResult:
        result = self.session.tick(delta, now, pressed)
        if result is TickResult.GAME_OVER:
            self._game_over()
        return result

    def _game_over(self) -> None:
        ended = self.session
        best = self.high_score.record(ended.score)
        self.games_played += 1
        logger.info(
            "Game over (%s): score=%d high_score=%d",
            ended.last_collision.value, ended.score, best,
        )
        self.session = self.new_session()

    def frame(self) -> Frame:
        return self.session.frame()
