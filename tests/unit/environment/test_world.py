"""
Unit tests for evojump.environment.world module.
"""

from evojump.environment import World, Physics, BoxState, RobotState


class TestWorld:
    """Test the World class."""

    def test_default_physics(self):
        assert World().physics == Physics()

    def test_custom_physics(self):
        physics = Physics(box_velocity=0.3)
        world = World(physics)
        assert world.physics is physics
        assert world.box.velocity == 0.3

    def test_initial_box(self, world):
        assert world.box == BoxState.start(world.physics)

    def test_step_moves_box(self, world):
        x = world.box.x
        world.step(16.0)
        assert world.box.x < x

    def test_step_returns_new_state(self, world):
        assert world.step(16.0) is world.box

    def test_snapshot_unaffected_by_step(self, world):
        snapshot = world.snapshot()
        world.step(16.0)
        assert snapshot == BoxState.start(world.physics)
        assert world.snapshot() != snapshot

    def test_reset(self, world):
        for _ in range(100):
            world.step(16.0)
        world.reset()
        assert world.box == BoxState.start(world.physics)

    def test_initial_robot(self, world):
        assert world.initial_robot() == RobotState.start(world.physics)
