"""
Tests for collision.py -- AABB overlaps, duck clearance, landing on mountable obstacles.
"""

import itertools
import unittest

from moto_runner.constants import GROUND_LINE_Y
from moto_runner.collision import CollisionResolver
from moto_runner.data_models import (
    Box, FlyingObstacle, GroundKind, InputIntent, Obstacle, ObstacleSet, Vehicle
)
from moto_runner.physics_core import PhysicsCore


def make_set(ground=(), flying=()):
    obstacles = ObstacleSet()
    for kind, x in ground:
        obstacles.ground.append(Obstacle(id=obstacles.new_id(), kind=kind, x=x))
    for y, x in flying:
        obstacles.flying.append(FlyingObstacle(id=obstacles.new_id(), y=y, x=x))
    return obstacles


class TestOverlap(unittest.TestCase):

    BOXES = [
        Box(0, 0, 10, 10),
        Box(5, 5, 10, 10),
        Box(10, 0, 10, 10),     # touching edge only
        Box(2, 2, 3, 3),        # fully inside the first
        Box(100, 100, 1, 1),
        Box(-5, 8, 30, 1),
    ]

    def test_symmetry(self):
        """overlap(a, b) == overlap(b, a) for every pair."""
        for a, b in itertools.product(self.BOXES, repeat=2):
            self.assertEqual(PhysicsCore.overlap(a, b), PhysicsCore.overlap(b, a),
                             f"asymmetric for {a} and {b}")

    def test_touching_edges_do_not_overlap(self):
        self.assertFalse(PhysicsCore.overlap(self.BOXES[0], self.BOXES[2]))

    def test_contained_box_overlaps(self):
        self.assertTrue(PhysicsCore.overlap(self.BOXES[0], self.BOXES[3]))

    def test_disjoint(self):
        self.assertFalse(PhysicsCore.overlap(self.BOXES[0], self.BOXES[4]))


class TestCollisionCheck(unittest.TestCase):

    def setUp(self):
        self.physics = PhysicsCore()
        self.resolver = CollisionResolver(physics=self.physics)
        self.vehicle = Vehicle()

    def test_no_obstacles_no_hit(self):
        self.assertIsNone(self.resolver.check(self.vehicle, ObstacleSet()))

    def test_ground_obstacle_hit(self):
        obstacles = make_set(ground=[(GroundKind.SMALL, 70)])
        self.assertIs(self.resolver.check(self.vehicle, obstacles), obstacles.ground[0])

    def test_ground_checked_before_flying(self):
        """With two overlapping obstacles the ground one is reported."""
        obstacles = make_set(ground=[(GroundKind.TALL, 70)], flying=[(GROUND_LINE_Y - 75, 60)])
        self.assertIs(self.resolver.check(self.vehicle, obstacles), obstacles.ground[0])

    def test_far_obstacle_no_hit(self):
        obstacles = make_set(ground=[(GroundKind.SMALL, 400)], flying=[(GROUND_LINE_Y - 75, 500)])
        self.assertIsNone(self.resolver.check(self.vehicle, obstacles))

    def test_low_bird_hits_standing_vehicle(self):
        obstacles = make_set(flying=[(GROUND_LINE_Y - 75, 60)])
        self.assertIs(self.resolver.check(self.vehicle, obstacles), obstacles.flying[0])

    def test_ducking_passes_under_bird(self):
        """The duck hitbox top sits below the lowest bird's bottom edge."""
        self.physics.update_vehicle(self.vehicle, InputIntent(duck=True), ObstacleSet())
        obstacles = make_set(flying=[(GROUND_LINE_Y - 75, 60)])
        bird = obstacles.flying[0]
        self.assertLess(bird.box.bottom, self.physics.hitbox(self.vehicle).y)
        self.assertIsNone(self.resolver.check(self.vehicle, obstacles))

    def test_high_bird_clears_standing_vehicle(self):
        obstacles = make_set(flying=[(GROUND_LINE_Y - 115, 60)])
        self.assertIsNone(self.resolver.check(self.vehicle, obstacles))


class TestMountPriority(unittest.TestCase):

    def setUp(self):
        self.physics = PhysicsCore()
        self.resolver = CollisionResolver(physics=self.physics)
        self.obstacles = make_set(ground=[(GroundKind.PICKUP_TRUCK, 40)])
        self.truck = self.obstacles.ground[0]

    def falling_vehicle(self, hitbox_bottom, velocity_y=3.0):
        vehicle = Vehicle(is_jumping=True, velocity_y=velocity_y)
        offset = self.physics.hitbox(vehicle).bottom - vehicle.y
        vehicle.y = hitbox_bottom - offset
        return vehicle

    def test_falling_onto_top_mounts(self):
        """Overlapping boxes still mount instead of ending the game."""
        vehicle = self.falling_vehicle(self.truck.y + 2)
        self.assertTrue(PhysicsCore.overlap(self.physics.hitbox(vehicle), self.truck.box))

        self.assertIsNone(self.resolver.check(vehicle, self.obstacles))
        self.assertTrue(vehicle.is_riding)
        self.assertEqual(vehicle.mount_id, self.truck.id)
        self.assertFalse(vehicle.is_jumping)
        self.assertEqual(vehicle.velocity_y, 0)

    def test_tolerance_band_edges(self):
        above = self.falling_vehicle(self.truck.y - 5)
        self.assertTrue(self.resolver.lands_on_top(above, self.physics.hitbox(above), self.truck))
        below = self.falling_vehicle(self.truck.y + 10)
        self.assertTrue(self.resolver.lands_on_top(below, self.physics.hitbox(below), self.truck))
        too_deep = self.falling_vehicle(self.truck.y + 11)
        self.assertFalse(self.resolver.lands_on_top(too_deep, self.physics.hitbox(too_deep), self.truck))

    def test_rising_vehicle_does_not_mount(self):
        vehicle = self.falling_vehicle(self.truck.y + 2, velocity_y=-4.0)
        self.assertIs(self.resolver.check(vehicle, self.obstacles), self.truck)
        self.assertFalse(vehicle.is_riding)

    def test_driving_into_side_crashes(self):
        vehicle = Vehicle()
        self.assertIs(self.resolver.check(vehicle, self.obstacles), self.truck)

    def test_non_mountable_never_mounts(self):
        obstacles = make_set(ground=[(GroundKind.EXTRA_TALL, 60)])
        cactus = obstacles.ground[0]
        vehicle = self.falling_vehicle(cactus.y + 2)
        self.assertIs(self.resolver.check(vehicle, obstacles), cactus)
        self.assertFalse(vehicle.is_riding)

    def test_ridden_obstacle_is_not_a_hit(self):
        vehicle = Vehicle()
        self.physics.mount(vehicle, self.truck)
        self.assertIsNone(self.resolver.check(vehicle, self.obstacles))
        self.assertTrue(vehicle.is_riding)

    def test_removed_mount_forces_dismount(self):
        vehicle = Vehicle()
        self.physics.mount(vehicle, self.truck)
        self.obstacles.ground.clear()
        self.assertIsNone(self.resolver.check(vehicle, self.obstacles))
        self.assertFalse(vehicle.is_riding)
        self.assertIsNone(vehicle.mount_id)
        self.assertTrue(vehicle.is_jumping)


if __name__ == "__main__":
    unittest.main()
