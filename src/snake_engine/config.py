# config.py
from __future__ import annotations
from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 600
CELL_SIZE = 20
FPS = 60

# ----- Colors -----
BG     = (0, 0, 0)
RED    = (230, 41, 55)
YELLOW = (253, 249, 0)
TEXT   = (255, 255, 255)

# ----- Movement cadence (seconds) -----
BASE_UPDATE_INTERVAL = 0.5
MIN_MOVE_INTERVAL = 0.1

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    base_update_interval: float = BASE_UPDATE_INTERVAL
    min_move_interval: float = MIN_MOVE_INTERVAL
    avoid_snake_on_spawn: bool = False  # spawn anywhere, body included

    def __post_init__(self):
        if self.base_update_interval <= 0 or self.min_move_interval <= 0:
            raise ValueError("Move intervals must be positive")

CFG = Config()
