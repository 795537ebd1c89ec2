"""
physics_core.py: Vehicle kinematics, pose handling and hitbox geometry.
"""

from typing import Optional, Tuple

from .constants import (
    HITBOX_SIZE_RATIO, NORMAL_HITBOX_OFFSET, DUCK_HITBOX_OFFSET,
    LANDING_ANIMATION_FRAMES, MOUNT_CLEARANCE
)
from .data_models import Box, InputIntent, Obstacle, ObstacleSet, Vehicle


def calculate_hitbox(width: float, height: float, size_ratio: float = HITBOX_SIZE_RATIO,
                     offset_x: Optional[float] = None,
                     offset_y: Optional[float] = None) -> Tuple[float, float, float, float]:
    """
    Shrinks a sprite box to a hitbox. Returns (offset_x, offset_y, width, height).
    Without explicit offsets the hitbox is centred inside the sprite box.
    """
    hit_w = width * size_ratio
    hit_h = height * size_ratio
    if offset_x is None:
        offset_x = (width - hit_w) / 2
    if offset_y is None:
        offset_y = (height - hit_h) / 2
    return offset_x, offset_y, hit_w, hit_h


class PhysicsCore:
    """
    Deterministic per-tick vehicle physics shared by the engine and the collision resolver.
    """

    HITBOX_SIZE_RATIO = HITBOX_SIZE_RATIO
    LANDING_ANIMATION_FRAMES = LANDING_ANIMATION_FRAMES
    MOUNT_CLEARANCE = MOUNT_CLEARANCE

    def hitbox(self, vehicle: Vehicle) -> Box:
        """Collision box for the vehicle's current pose."""
        if vehicle.is_ducking:
            offset = calculate_hitbox(vehicle.width, vehicle.duck_height,
                                      self.HITBOX_SIZE_RATIO, *DUCK_HITBOX_OFFSET)
        else:
            offset = calculate_hitbox(vehicle.width, vehicle.normal_height,
                                      self.HITBOX_SIZE_RATIO, *NORMAL_HITBOX_OFFSET)
        off_x, off_y, hit_w, hit_h = offset
        return Box(vehicle.x + off_x, vehicle.y + off_y, hit_w, hit_h)

    @staticmethod
    def overlap(a: Box, b: Box) -> bool:
        return a.overlaps(b)

    def perform_jump(self, vehicle: Vehicle) -> bool:
        """Starts a jump if the vehicle stands on something. Every input source calls this."""
        if vehicle.is_riding:
            self.dismount(vehicle, falling=False)
        elif vehicle.is_jumping or vehicle.is_ducking:
            return False

        vehicle.velocity_y = vehicle.jump_power
        vehicle.is_jumping = True
        return True

    def mount(self, vehicle: Vehicle, obstacle: Obstacle):
        vehicle.is_riding = True
        vehicle.mount_id = obstacle.id
        vehicle.is_jumping = False
        vehicle.is_ducking = False
        vehicle.velocity_y = 0.0
        vehicle.height = vehicle.normal_height
        vehicle.y = self._ride_y(vehicle, obstacle)

    def dismount(self, vehicle: Vehicle, falling: bool = True):
        """Leaves the mount. A falling dismount drops from rest under gravity."""
        vehicle.is_riding = False
        vehicle.mount_id = None
        if falling:
            vehicle.is_jumping = True
            vehicle.velocity_y = 0.0

    def _ride_y(self, vehicle: Vehicle, obstacle: Obstacle) -> float:
        return obstacle.y - vehicle.height - self.MOUNT_CLEARANCE

    def update_vehicle(self, vehicle: Vehicle, intent: InputIntent, obstacles: ObstacleSet):
        """
        Single-tick vehicle update: jump request, mount, pose, then gravity.
        Mutates the vehicle.
        """
        if intent.jump:
            self.perform_jump(vehicle)

        # 1. Mount handling
        if vehicle.is_riding:
            mount = obstacles.find_ground(vehicle.mount_id)
            if mount is None or mount.x + mount.width < vehicle.x + vehicle.width:
                self.dismount(vehicle)
            else:
                vehicle.y = self._ride_y(vehicle, mount)

        # 2. Pose handling
        if not vehicle.is_riding and not vehicle.is_jumping:
            if intent.duck:
                vehicle.is_ducking = True
                vehicle.height = vehicle.duck_height
                vehicle.y = vehicle.ground_y + (vehicle.normal_height - vehicle.duck_height)
            else:
                vehicle.is_ducking = False
                vehicle.height = vehicle.normal_height
                vehicle.y = vehicle.ground_y

        # 3. Gravity integration
        if vehicle.is_jumping:
            vehicle.velocity_y += vehicle.gravity
            vehicle.y += vehicle.velocity_y

            if vehicle.y >= vehicle.ground_y:
                vehicle.y = vehicle.ground_y
                vehicle.velocity_y = 0.0
                vehicle.is_jumping = False
                if vehicle.is_riding:
                    self.dismount(vehicle, falling=False)
                vehicle.landing_animation = self.LANDING_ANIMATION_FRAMES

        if vehicle.landing_animation > 0:
            vehicle.landing_animation -= 1
