# scheduler.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import BASE_UPDATE_INTERVAL, MIN_MOVE_INTERVAL


class MoveTrigger(Enum):
    INPUT = "input"
    TIMER = "timer"


@dataclass
class MovementScheduler:
    """
    Decides, once per tick, whether the snake moves.

    Two cadences run side by side:
      - input: a fresh key press moves right away, but no sooner than
        min_move_interval after the previous move
      - timer: with no key press this tick, move every base_update_interval

    A key press inside the cooldown still counts as input for the tick,
    so the timer cannot fire on that tick either.
    """
    base_update_interval: float = BASE_UPDATE_INTERVAL
    min_move_interval: float = MIN_MOVE_INTERVAL
    update_timer: float = 0.0
    last_move_time: float = 0.0

    def tick(self, delta: float, now: float, input_pressed: bool) -> Optional[MoveTrigger]:
        if delta < 0:
            raise ValueError(f"delta must be non-negative, got {delta}")
        self.update_timer += delta

        trigger = None
        if input_pressed:
            if now - self.last_move_time >= self.min_move_interval:
                trigger = MoveTrigger.INPUT
        elif self.update_timer >= self.base_update_interval:
            trigger = MoveTrigger.TIMER

        if trigger is not None:
            self._record_move(now, trigger)
        return trigger

    def _record_move(self, now: float, trigger: MoveTrigger) -> None:
        self.last_move_time = now
        if trigger is MoveTrigger.INPUT:
            self.update_timer = 0.0
        else:
            # carry the overshoot into the next interval
            self.update_timer -= self.base_update_interval

    def reset(self) -> None:
        self.update_timer = 0.0
        self.last_move_time = 0.0
