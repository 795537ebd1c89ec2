"""
collision.py: Resolves vehicle contact with obstacles, including landing on mountable ones.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import MOUNT_TOLERANCE_ABOVE, MOUNT_TOLERANCE_BELOW
from .data_models import Box, FlyingObstacle, Obstacle, ObstacleSet, Vehicle
from .physics_core import PhysicsCore


@dataclass
class CollisionResolver:
    """
    Checks the vehicle hitbox against ground obstacles first, then aerial ones.
    The first overlapping obstacle is returned; checking stops there.
    """
    physics: PhysicsCore = field(default_factory=PhysicsCore)
    tolerance_above: float = MOUNT_TOLERANCE_ABOVE
    tolerance_below: float = MOUNT_TOLERANCE_BELOW

    def lands_on_top(self, vehicle: Vehicle, hitbox: Box, obstacle: Obstacle) -> bool:
        """True when a falling vehicle meets the top edge of the obstacle."""
        if not (vehicle.is_jumping and vehicle.velocity_y > 0):
            return False
        top = obstacle.y
        horizontal = hitbox.x < obstacle.x + obstacle.width and hitbox.right > obstacle.x
        vertical = top - self.tolerance_above <= hitbox.bottom <= top + self.tolerance_below
        return horizontal and vertical

    def check(self, vehicle: Vehicle, obstacles: ObstacleSet) -> Optional[Union[Obstacle, FlyingObstacle]]:
        """
        Returns the obstacle the vehicle crashed into, or None.
        May mount or dismount the vehicle as a side effect.
        """
        if vehicle.is_riding and obstacles.find_ground(vehicle.mount_id) is None:
            self.physics.dismount(vehicle)

        hitbox = self.physics.hitbox(vehicle)

        for obstacle in obstacles.ground:
            if vehicle.is_riding and obstacle.id == vehicle.mount_id:
                continue
            if obstacle.mountable and not vehicle.is_riding:
                if self.lands_on_top(vehicle, hitbox, obstacle):
                    self.physics.mount(vehicle, obstacle)
                    hitbox = self.physics.hitbox(vehicle)
                    continue
            if self.physics.overlap(hitbox, obstacle.box):
                return obstacle

        for obstacle in obstacles.flying:
            if self.physics.overlap(hitbox, obstacle.box):
                return obstacle

        return None
