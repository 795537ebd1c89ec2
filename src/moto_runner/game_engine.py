"""
game_engine.py: The authoritative game loop state machine.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .constants import (
    CANVAS_WIDTH, GROUND_LINE_Y, SURVIVAL_POINT_INTERVAL,
    FLYING_OBSTACLE_SPEED_MULTIPLIER, WING_FLAP_FRAME_INTERVAL,
    PARTICLE_SPAWN_INTERVAL, PARTICLE_LIFE, DUST_COLOR, COLLISION_FLASH_DURATION
)
from .collision import CollisionResolver
from .data_models import FlyingObstacle, GameSession, InputIntent, Obstacle, Particle
from .difficulty import is_night, speed_for_frame
from .physics_core import PhysicsCore
from .score_db import HighScoreStore
from .spawner import SpawnController


class GameState(Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the session and runs one tick at a time.
    Inherits vehicle physics from PhysicsCore.

    The high score outlives sessions: it is read from the store once at
    construction and written back whenever a finished session beats it.
    """
    store: Optional[HighScoreStore] = None
    rng: random.Random = field(default_factory=random.Random)
    canvas_width: float = CANVAS_WIDTH
    state: GameState = GameState.WAITING
    session: GameSession = field(default_factory=GameSession)
    high_score: int = 0
    final_score: Optional[int] = None

    def __post_init__(self):
        self.spawner = SpawnController(rng=self.rng, canvas_width=self.canvas_width)
        self.resolver = CollisionResolver(physics=self)
        if self.store is not None:
            self.high_score = self.store.load_high_score()

    # -------- State transitions --------

    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    def start(self) -> bool:
        """
        Starts a fresh session from WAITING or GAME_OVER.
        This is the only way into PLAYING; calling it while playing does nothing.
        """
        if self.state is GameState.PLAYING:
            return False
        self.session = GameSession()
        self.final_score = None
        self.state = GameState.PLAYING
        return True

    def force_pause(self) -> bool:
        """Drops a running game back to WAITING (e.g. the screen turned portrait)."""
        if self.state is not GameState.PLAYING:
            return False
        self.state = GameState.WAITING
        return True

    def _game_over(self):
        session = self.session
        self.state = GameState.GAME_OVER
        session.collision_flash = COLLISION_FLASH_DURATION
        self.final_score = session.score

        if session.score > self.high_score:
            self.high_score = session.score
            if self.store is not None:
                self.store.save_high_score(self.high_score)

    # -------- Simulation --------

    def tick(self, intent: InputIntent = InputIntent()) -> Optional[Union[Obstacle, FlyingObstacle]]:
        """
        Advances the session by one frame. Returns the obstacle that ended the
        game on this tick, if any. Does nothing unless PLAYING.
        """
        if self.state is not GameState.PLAYING:
            return None
        s = self.session

        # 1. Clock and difficulty
        s.frame += 1
        s.speed = speed_for_frame(s.frame)

        # 2. Survival score
        if s.frame % SURVIVAL_POINT_INTERVAL == 0:
            s.score += 1

        # 3. Vehicle
        self.update_vehicle(s.vehicle, intent, s.obstacles)

        # 4. Obstacles (credit the ones that left the screen)
        s.score += s.obstacles.advance(s.speed, s.speed * FLYING_OBSTACLE_SPEED_MULTIPLIER)
        wing_frame = (s.frame // WING_FLAP_FRAME_INTERVAL) % 2
        for bird in s.obstacles.flying:
            bird.wing_frame = wing_frame

        # 5. Spawning
        self.spawner.update(s)

        # 6. Particles
        self._update_particles()

        # 7. Collisions
        hit = self.resolver.check(s.vehicle, s.obstacles)
        if hit is not None:
            self._game_over()
        return hit

    def _update_particles(self):
        s = self.session
        if (s.frame % PARTICLE_SPAWN_INTERVAL == 0 and not s.vehicle.is_jumping
                and not s.vehicle.is_riding):
            s.particles.append(Particle(
                x=s.vehicle.x + 10,
                y=GROUND_LINE_Y + 5,
                vx=-2 - self.rng.random() * 2,
                vy=-1 - self.rng.random() * 2,
                color=DUST_COLOR,
                life=PARTICLE_LIFE,
            ))
        s.particles = [p for p in s.particles if p.update()]

    def advance_effects(self):
        """Runs visual-only countdowns that continue after the game ends."""
        if self.session.collision_flash > 0:
            self.session.collision_flash -= 1

    # -------- Snapshot for the renderer --------

    def to_render_state(self) -> dict:
        """Read-only snapshot of everything the renderer draws this frame."""
        s = self.session
        v = s.vehicle
        hitbox = self.hitbox(v)
        show_duck = v.is_ducking or v.landing_animation > 0
        draw_y = v.y
        if v.landing_animation > 0 and not v.is_ducking:
            draw_y += v.normal_height - v.duck_height

        return {
            "state": self.state.value,
            "frame": s.frame,
            "score": s.score,
            "high_score": self.high_score,
            "final_score": self.final_score,
            "speed": s.speed,
            "night": is_night(s.frame),
            "collision_flash": s.collision_flash,
            "vehicle": {
                "x": v.x,
                "y": draw_y,
                "width": v.width,
                "height": v.duck_height if show_duck else v.normal_height,
                "pose": "duck" if show_duck else "normal",
                "riding": v.is_riding,
                "hitbox": (hitbox.x, hitbox.y, hitbox.width, hitbox.height),
            },
            "ground": [
                {"x": o.x, "y": o.y, "width": o.width, "height": o.height,
                 "kind": o.kind.name.lower(), "flip_h": o.flip_h}
                for o in s.obstacles.ground
            ],
            "flying": [
                {"x": o.x, "y": o.y, "width": o.width, "height": o.height,
                 "wing_frame": o.wing_frame}
                for o in s.obstacles.flying
            ],
            "particles": [
                {"x": p.x, "y": p.y, "size": p.size, "color": p.color,
                 "alpha": p.life / p.max_life}
                for p in s.particles
            ],
        }
