"""
World Module

Classes:
    World: Owner of the single box shared by every agent of a population
"""

from evojump.environment.physics import Physics, BoxState, RobotState, advance_box

class World:
    """
    The environment all agents of a population live in.

    The world is the only writer of the box state; agents read the immutable
    snapshot returned by 'snapshot()', so every agent of a tick sees the box
    exactly as it stood at the start of that tick.

    Public Attributes:
        physics: The physical constants of the task
        box:     The current state of the box

    Public Methods:
        reset():          Put the box back at its starting position and speed
        step(delta_time): Advance the box by one time step
        snapshot():       The current (immutable) box state
        initial_robot():  The starting state of every robot
    """

    def __init__(self, physics: Physics | None = None):
        self.physics: Physics  = physics if physics is not None else Physics()
        self.box    : BoxState = BoxState.start(self.physics)

    def reset(self) -> None:
        self.box = BoxState.start(self.physics)

    def step(self, delta_time: float) -> BoxState:
        self.box = advance_box(self.box, delta_time, self.physics)
        return self.box

    def snapshot(self) -> BoxState:
        # BoxState is frozen, handing out the current object is enough
        return self.box

    def initial_robot(self) -> RobotState:
        return RobotState.start(self.physics)

    def __repr__(self):
        return f"World(physics={self.physics!r}, box={self.box!r})"
