"""
difficulty.py: Pure functions mapping elapsed frames to speed and spawn windows.
"""

import random
from typing import Tuple

from .constants import (
    INITIAL_SPEED, SPEED_INCREMENT, SPEED_INCREASE_INTERVAL,
    OBSTACLE_INTERVAL_DECREASE_RATE, DAY_NIGHT_CYCLE_FRAMES
)


def speed_level(frame: int) -> int:
    """Number of completed speed-increase intervals."""
    return frame // SPEED_INCREASE_INTERVAL


def speed_for_frame(frame: int) -> float:
    """Forward speed after `frame` ticks. Grows without bound."""
    return INITIAL_SPEED + speed_level(frame) * SPEED_INCREMENT


def interval_bounds(frame: int, base_min: float, base_max: float,
                    floor_cap: float, min_spacing: float) -> Tuple[float, float]:
    """
    Returns the (min, max) spawn interval window for the current difficulty.

    Both bounds shrink as speed rises; min never drops below floor_cap and
    max always stays at least min_spacing above min.
    """
    shrink = speed_level(frame) * OBSTACLE_INTERVAL_DECREASE_RATE
    adj_min = max(floor_cap, base_min - shrink)
    adj_max = max(adj_min + min_spacing, base_max - shrink)
    return adj_min, adj_max


def draw_interval(rng: random.Random, frame: int, base_min: float, base_max: float,
                  floor_cap: float, min_spacing: float) -> float:
    low, high = interval_bounds(frame, base_min, base_max, floor_cap, min_spacing)
    return low + rng.random() * (high - low)


def is_night(frame: int) -> bool:
    return (frame // DAY_NIGHT_CYCLE_FRAMES) % 2 == 1
