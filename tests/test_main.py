"""
Tests for main.py - command line parsing and key mapping.
"""

import pygame

from snake_engine.config import CELL_SIZE, FPS, HEIGHT, WIDTH
from snake_engine.main import KEYMAP, parse_args
from snake_engine.snake import Direction


def test_defaults():
    args = parse_args([])
    assert (args.width, args.height, args.cell_size, args.fps) == (WIDTH, HEIGHT, CELL_SIZE, FPS)
    assert args.seed is None
    assert args.avoid_snake is False


def test_overrides():
    args = parse_args(["--seed", "9", "--avoid-snake", "--cell-size", "10"])
    assert args.seed == 9
    assert args.avoid_snake is True
    assert args.cell_size == 10


def test_arrow_keys_map_to_directions():
    assert KEYMAP[pygame.K_UP] is Direction.UP
    assert KEYMAP[pygame.K_DOWN] is Direction.DOWN
    assert KEYMAP[pygame.K_LEFT] is Direction.LEFT
    assert KEYMAP[pygame.K_RIGHT] is Direction.RIGHT
