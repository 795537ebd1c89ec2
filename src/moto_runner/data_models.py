"""
data_models.py: Data structures for the game session.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    CANVAS_WIDTH, GROUND_LINE_Y, VEHICLE_X, VEHICLE_WIDTH,
    VEHICLE_NORMAL_HEIGHT, VEHICLE_DUCK_HEIGHT, VEHICLE_GROUND_Y,
    GRAVITY, JUMP_POWER, INITIAL_SPEED, GROUND_OBSTACLE_POINTS,
    FLYING_OBSTACLE_POINTS, FLYING_OBSTACLE_WIDTH, FLYING_OBSTACLE_HEIGHT,
    GROUND_FIRST_SPAWN_FRAME, FLYING_FIRST_SPAWN_FRAME,
    OBSTACLE_MAX_INTERVAL, FLYING_OBSTACLE_MAX_INTERVAL,
    MOUNTABLE_OBSTACLE_MIN_SCORE, PARTICLE_GRAVITY
)


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in canvas pixels (y grows downward)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "Box") -> bool:
        return (self.x < other.x + other.width and
                self.x + self.width > other.x and
                self.y < other.y + other.height and
                self.y + self.height > other.y)

    def contains(self, other: "Box") -> bool:
        return (other.x >= self.x and other.y >= self.y and
                other.right <= self.right and other.bottom <= self.bottom)


@dataclass(frozen=True)
class InputIntent:
    """What the player asked for this tick, merged from every input source."""
    jump: bool = False
    duck: bool = False


class GroundKind(Enum):
    """Ground obstacle archetypes: (width, height, mountable, unlock score)."""
    SMALL = (24, 36, False, 0)
    MEDIUM = (30, 48, False, 0)
    TALL = (30, 60, False, 0)
    EXTRA_TALL = (36, 72, False, 0)
    PICKUP_TRUCK = (96, 42, True, MOUNTABLE_OBSTACLE_MIN_SCORE)

    def __init__(self, width, height, mountable, min_score):
        self.width = width
        self.height = height
        self.mountable = mountable
        self.min_score = min_score

    @classmethod
    def unlocked(cls, score: int) -> List["GroundKind"]:
        return [kind for kind in cls if score >= kind.min_score]


@dataclass
class Vehicle:
    """The motorcycle: fixed x, vertical kinematics and pose."""
    x: float = VEHICLE_X
    y: float = VEHICLE_GROUND_Y
    width: float = VEHICLE_WIDTH
    height: float = VEHICLE_NORMAL_HEIGHT
    velocity_y: float = 0.0
    gravity: float = GRAVITY
    jump_power: float = JUMP_POWER
    ground_y: float = VEHICLE_GROUND_Y
    normal_height: float = VEHICLE_NORMAL_HEIGHT
    duck_height: float = VEHICLE_DUCK_HEIGHT
    is_jumping: bool = False
    is_ducking: bool = False
    is_riding: bool = False
    mount_id: Optional[int] = None     # Handle into ObstacleSet.ground, never ownership
    landing_animation: int = 0

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Obstacle:
    """A ground obstacle standing on the road line."""
    id: int
    kind: GroundKind
    x: float = float(CANVAS_WIDTH)
    flip_h: bool = False
    points: int = GROUND_OBSTACLE_POINTS

    @property
    def width(self) -> float:
        return self.kind.width

    @property
    def height(self) -> float:
        return self.kind.height

    @property
    def y(self) -> float:
        return GROUND_LINE_Y - self.kind.height

    @property
    def mountable(self) -> bool:
        return self.kind.mountable

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class FlyingObstacle:
    """An aerial obstacle flying at a fixed height."""
    id: int
    y: float
    x: float = float(CANVAS_WIDTH)
    width: float = FLYING_OBSTACLE_WIDTH
    height: float = FLYING_OBSTACLE_HEIGHT
    wing_frame: int = 0
    points: int = FLYING_OBSTACLE_POINTS

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int, int, int]
    life: int
    max_life: int = 0
    size: int = 2

    def __post_init__(self):
        if not self.max_life:
            self.max_life = self.life

    def update(self) -> bool:
        """Moves one tick; returns False once the particle has expired."""
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= 1
        return self.life > 0


@dataclass
class SpawnSchedule:
    next_ground_frame: float = GROUND_FIRST_SPAWN_FRAME
    next_flying_frame: float = FLYING_FIRST_SPAWN_FRAME
    ground_interval: float = OBSTACLE_MAX_INTERVAL
    flying_interval: float = FLYING_OBSTACLE_MAX_INTERVAL


@dataclass
class ObstacleSet:
    """Ground and aerial obstacles, each ordered oldest (leftmost) first."""
    ground: List[Obstacle] = field(default_factory=list)
    flying: List[FlyingObstacle] = field(default_factory=list)
    next_id: int = 1

    def new_id(self) -> int:
        handle = self.next_id
        self.next_id += 1
        return handle

    def find_ground(self, handle: Optional[int]) -> Optional[Obstacle]:
        if handle is None:
            return None
        for obstacle in self.ground:
            if obstacle.id == handle:
                return obstacle
        return None

    def advance(self, speed: float, flying_speed: float) -> int:
        """
        Moves every obstacle left and drops the ones past the left edge.
        Returns the points credited for obstacles removed this call.
        """
        points = 0
        for obstacle in self.ground:
            obstacle.x -= speed
        for obstacle in self.flying:
            obstacle.x -= flying_speed

        kept_ground = []
        for obstacle in self.ground:
            if obstacle.x + obstacle.width < 0:
                points += obstacle.points
            else:
                kept_ground.append(obstacle)
        kept_flying = []
        for obstacle in self.flying:
            if obstacle.x + obstacle.width < 0:
                points += obstacle.points
            else:
                kept_flying.append(obstacle)

        self.ground = kept_ground
        self.flying = kept_flying
        return points


@dataclass
class GameSession:
    """Every piece of per-session mutable state. A fresh instance is the reset state."""
    frame: int = 0
    score: int = 0
    speed: float = INITIAL_SPEED
    vehicle: Vehicle = field(default_factory=Vehicle)
    obstacles: ObstacleSet = field(default_factory=ObstacleSet)
    schedule: SpawnSchedule = field(default_factory=SpawnSchedule)
    particles: List[Particle] = field(default_factory=list)
    collision_flash: int = 0
