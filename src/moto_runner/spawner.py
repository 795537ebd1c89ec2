"""
spawner.py: Decides when and what obstacles enter from the right edge.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .constants import (
    CANVAS_WIDTH, GROUND_LINE_Y, SAFE_DISTANCE, OBSTACLE_RETRY_DELAY,
    OBSTACLE_MIN_INTERVAL, OBSTACLE_MAX_INTERVAL, OBSTACLE_MIN_INTERVAL_CAP,
    GROUND_INTERVAL_MIN_SPACING, FLYING_OBSTACLE_MIN_INTERVAL,
    FLYING_OBSTACLE_MAX_INTERVAL, FLYING_INTERVAL_MIN_CAP,
    FLYING_INTERVAL_MIN_SPACING, FLYING_OBSTACLE_MIN_SCORE, FLYING_HEIGHT_OFFSETS
)
from .data_models import FlyingObstacle, GameSession, GroundKind, Obstacle
from .difficulty import draw_interval


@dataclass
class SpawnController:
    """
    Spawns ground and aerial obstacles on independent schedules.

    A spawn is suppressed while the newest obstacle of the other class is still
    within `safe_distance` of the right edge, so the player is never asked to
    jump and duck at the same moment. Suppressed spawns retry after
    `retry_delay` frames.
    """
    rng: random.Random = field(default_factory=random.Random)
    canvas_width: float = CANVAS_WIDTH
    safe_distance: float = SAFE_DISTANCE
    retry_delay: int = OBSTACLE_RETRY_DELAY

    def is_too_close(self, obstacles: Sequence[Union[Obstacle, FlyingObstacle]]) -> bool:
        if not obstacles:
            return False
        return self.canvas_width - obstacles[-1].x < self.safe_distance

    def update(self, session: GameSession) -> List[Union[Obstacle, FlyingObstacle]]:
        """Runs one spawn attempt per class. Returns whatever was spawned."""
        spawned = []

        ground = self._try_ground(session)
        if ground is not None:
            spawned.append(ground)

        if session.score > FLYING_OBSTACLE_MIN_SCORE:
            flying = self._try_flying(session)
            if flying is not None:
                spawned.append(flying)

        return spawned

    def _try_ground(self, session: GameSession) -> Optional[Obstacle]:
        schedule = session.schedule
        if session.frame < schedule.next_ground_frame:
            return None

        if self.is_too_close(session.obstacles.flying):
            schedule.next_ground_frame = session.frame + self.retry_delay
            return None

        kind = self.rng.choice(GroundKind.unlocked(session.score))
        obstacle = Obstacle(
            id=session.obstacles.new_id(),
            kind=kind,
            x=float(self.canvas_width),
            flip_h=self.rng.random() < 0.5,
        )
        session.obstacles.ground.append(obstacle)

        schedule.ground_interval = draw_interval(
            self.rng, session.frame,
            OBSTACLE_MIN_INTERVAL, OBSTACLE_MAX_INTERVAL,
            OBSTACLE_MIN_INTERVAL_CAP, GROUND_INTERVAL_MIN_SPACING)
        schedule.next_ground_frame = session.frame + schedule.ground_interval
        return obstacle

    def _try_flying(self, session: GameSession) -> Optional[FlyingObstacle]:
        schedule = session.schedule
        if session.frame < schedule.next_flying_frame:
            return None

        if self.is_too_close(session.obstacles.ground):
            schedule.next_flying_frame = session.frame + self.retry_delay
            return None

        offset = self.rng.choice(FLYING_HEIGHT_OFFSETS)
        obstacle = FlyingObstacle(
            id=session.obstacles.new_id(),
            y=float(GROUND_LINE_Y + offset),
            x=float(self.canvas_width),
        )
        session.obstacles.flying.append(obstacle)

        schedule.flying_interval = draw_interval(
            self.rng, session.frame,
            FLYING_OBSTACLE_MIN_INTERVAL, FLYING_OBSTACLE_MAX_INTERVAL,
            FLYING_INTERVAL_MIN_CAP, FLYING_INTERVAL_MIN_SPACING)
        schedule.next_flying_frame = session.frame + schedule.flying_interval
        return obstacle
