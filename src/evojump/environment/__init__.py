"""
Environment Package

This package provides the headless environment the agents are evaluated in.

Exported:
    World:      Owner of the shared box state
    Physics:    Physical constants of the task
    Rect:       Axis-aligned bounding box
    RobotState: State of one robot
    BoxState:   State of the box
    intersects, integrate_robot, robot_hitbox, advance_box, box_hitbox: pure physics steps
"""

from evojump.environment.physics import (
    Physics,
    Rect,
    RobotState,
    BoxState,
    intersects,
    integrate_robot,
    robot_hitbox,
    advance_box,
    box_hitbox
)
from evojump.environment.world import World

__all__ = [
    'World',
    'Physics',
    'Rect',
    'RobotState',
    'BoxState',
    'intersects',
    'integrate_robot',
    'robot_hitbox',
    'advance_box',
    'box_hitbox'
]
