"""
Physics Module

Headless physics of the jumping task: a robot running in place on the ground
must jump over a box sliding towards it from the right edge of the view. The
box wraps around every time it leaves the view, a little faster each time.

Each step is a pure function over frozen state objects: it returns a new
state and never modifies its arguments.

Units are pixels and milliseconds (velocities in pixels per millisecond),
with the y axis pointing down.

Classes:
    Physics:    Constants describing the view, the robot and the box
    Rect:       Axis-aligned bounding box
    RobotState: Position and vertical motion of one robot
    BoxState:   Position and speed of the box

Functions:
    intersects(a, b):                           Whether two rectangles overlap or touch
    integrate_robot(state, jump, dt, physics):  Advance a robot by one time step
    robot_hitbox(state, physics):               The rectangle a robot collides with
    advance_box(state, dt, physics):            Advance the box by one time step
    box_hitbox(state, physics):                 The rectangle the box collides with
"""

from dataclasses import dataclass, replace

@dataclass(frozen=True)
class Physics:
    view_width         : float = 600.0
    view_height        : float = 450.0
    ground_offset      : float = 20.0      # distance of the ground from the view bottom
    gravity            : float = 0.00256
    jump_force         : float = 0.9       # initial upwards velocity of a jump
    robot_x            : float = 10.0
    robot_frame        : float = 64.0      # robot sprite is a square frame
    robot_hitbox_inset : float = 16.0      # horizontal inset of the hitbox within the frame
    box_width          : float = 32.0
    box_height         : float = 32.0
    box_start_offset   : float = 100.0     # the first box starts this far right of the view
    box_velocity       : float = 0.15
    box_velocity_factor: float = 0.005     # speed gained per ms of the step in which the box wraps
    box_max_velocity   : float = 0.75

    @property
    def ground_y(self) -> float:
        """The y coordinate of the ground surface."""
        return self.view_height - self.ground_offset

@dataclass(frozen=True)
class Rect:
    left  : float
    top   : float
    right : float
    bottom: float

def intersects(a: Rect, b: Rect) -> bool:
    """
    Whether two rectangles overlap. Rectangles that merely touch do intersect.
    """
    return not (a.bottom < b.top  or
                a.right  < b.left or
                a.left   > b.right or
                a.top    > b.bottom)

@dataclass(frozen=True)
class RobotState:
    x         : float
    y         : float
    velocity_y: float = 0.0
    jumping   : bool  = False

    @classmethod
    def start(cls, physics: Physics) -> 'RobotState':
        """A robot standing on the ground."""
        return cls(x=physics.robot_x, y=physics.ground_y - physics.robot_frame)

def integrate_robot(state: RobotState, jump: bool, delta_time: float, physics: Physics) -> RobotState:
    """
    Advance a robot by one time step.

    A jump can only start while the robot stands on the ground; a request to
    jump while already in the air is ignored. Gravity only acts mid-jump, and
    the jump ends when the robot's feet reach the ground.

    Parameters:
        state:      the robot at the start of the step
        jump:       whether the robot wants to jump
        delta_time: duration of the step, in ms
        physics:    the physical constants

    Returns:
        the robot at the end of the step
    """
    velocity_y, jumping = state.velocity_y, state.jumping
    if jump and not jumping:
        velocity_y = -physics.jump_force
        jumping    = True

    y = state.y + velocity_y * delta_time
    velocity_y = velocity_y + physics.gravity * delta_time if jumping else 0.0

    if jumping and y + physics.robot_frame >= physics.ground_y:
        y          = physics.ground_y - physics.robot_frame
        velocity_y = 0.0
        jumping    = False

    return replace(state, y=y, velocity_y=velocity_y, jumping=jumping)

def robot_hitbox(state: RobotState, physics: Physics) -> Rect:
    return Rect(left  =state.x + physics.robot_hitbox_inset,
                top   =state.y,
                right =state.x + physics.robot_frame - physics.robot_hitbox_inset,
                bottom=state.y + physics.robot_frame)

@dataclass(frozen=True)
class BoxState:
    x       : float
    y       : float
    velocity: float

    @classmethod
    def start(cls, physics: Physics) -> 'BoxState':
        """The box resting on the ground, just outside the right edge of the view."""
        return cls(x=physics.view_width + physics.box_start_offset,
                   y=physics.ground_y - physics.box_height,
                   velocity=physics.box_velocity)

def advance_box(state: BoxState, delta_time: float, physics: Physics) -> BoxState:
    """
    Slide the box left by one time step.

    Once the box has completely left the view it reappears at the right edge
    and speeds up, never beyond 'box_max_velocity'.
    """
    x        = state.x - state.velocity * delta_time
    velocity = state.velocity

    if x <= -physics.box_width:
        x        = physics.view_width
        velocity = min(physics.box_max_velocity, velocity + physics.box_velocity_factor * delta_time)

    return replace(state, x=x, velocity=velocity)

def box_hitbox(state: BoxState, physics: Physics) -> Rect:
    return Rect(left  =state.x,
                top   =state.y,
                right =state.x + physics.box_width,
                bottom=state.y + physics.box_height)
