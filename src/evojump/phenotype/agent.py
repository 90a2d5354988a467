"""
Agent Module

This module implements the Agent class, one evolvable individual of the
population: a network bound to the state of a robot in the jumping task.

Classes:
    Agent: A robot controlled by a network, with an alive flag and a fitness
"""

import math
from itertools import count

from evojump.environment         import World, BoxState, RobotState
from evojump.environment         import integrate_robot, robot_hitbox, box_hitbox, intersects
from evojump.phenotype.network   import Network

class Agent:
    """
    A robot whose jumps are decided by a neural network.

    Every tick a living agent senses its own position and the box, asks its
    network whether to jump, moves, and checks for a collision with the box.
    A collision kills the agent for the rest of the generation: a dead agent
    no longer moves, decides or earns fitness, but it keeps its network and
    fitness so that it can take part in reproduction.

    The fitness is the distance survived: every tick the agent is still
    alive at the end of, it gains ceil(delta_time * fitness_rate).

    Public Attributes:
        ID:      Unique identifier for this agent
        network: The network powering this agent
        alive:   Whether the agent has not collided with the box yet
        fitness: Accumulated fitness of the current generation
        body:    The current robot state

    Public Methods:
        sense(box):              Build the network input vector
        decide(inputs):          Whether the network asks for a jump
        update(box, delta_time): Run one tick of sense-decide-move-collide
        reset():                 Prepare the agent for a new generation
    """

    # The length of the vector returned by 'sense()'
    NUM_INPUTS = 5

    _id_generator = count(0)

    def __init__(self,
                 network           : Network,
                 world             : World,
                 decision_threshold: float = 0.5,
                 fitness_rate      : float = 0.01):
        """
        Parameters:
            network:            the network powering this agent (owned by the agent)
            world:              the environment the agent senses (read-only)
            decision_threshold: the network output at or above which the agent jumps
            fitness_rate:       fitness gained per ms survived, rounded up every tick
        """
        self.ID     : int     = next(Agent._id_generator)
        self.network: Network = network
        self.alive  : bool    = True
        self.fitness: float   = 0.0

        self._world             : World = world
        self._decision_threshold: float = decision_threshold
        self._fitness_rate      : float = fitness_rate

        self.body: RobotState = world.initial_robot()

    def sense(self, box: BoxState) -> list[float]:
        """
        Build the input vector of the network.

        The robot x is scaled by the view width. Heights are measured from the
        ground up and scaled by the view height, so both read 0 at rest. The
        box x is the distance of the box ahead of the robot, in box widths and
        negated: it is large and negative while the box is far, and rises to
        about 0 as the box reaches the robot. The box speed is scaled by its
        maximum.

        Network parameters never drop below the mutation floor, so a network
        output can only grow with each input. A far box has to read as a
        large negative value for a network to hold back its jump.

        Returns:
            [robot x, robot y, box x, box y, box speed]
        """
        physics = self._world.physics
        return [self.body.x / physics.view_width,
                (physics.ground_y - physics.robot_frame - self.body.y) / physics.view_height,
                (self.body.x - box.x) / physics.box_width,
                (physics.ground_y - physics.box_height - box.y) / physics.view_height,
                box.velocity / physics.box_max_velocity]

    def decide(self, inputs: list[float]) -> bool:
        """
        Whether to jump: the first network output is read as a probability.
        """
        return self.network.predict(inputs)[0] >= self._decision_threshold

    def update(self, box: BoxState, delta_time: float) -> None:
        """
        Run one tick for this agent; dead agents are left untouched.

        Parameters:
            box:        the box as it stood at the start of the tick
            delta_time: duration of the tick, in ms
        """
        if not self.alive:
            return

        physics = self._world.physics
        jump = self.decide(self.sense(box))
        self.body = integrate_robot(self.body, jump, delta_time, physics)

        if intersects(robot_hitbox(self.body, physics), box_hitbox(box, physics)):
            self.alive = False
            return

        self.fitness += math.ceil(delta_time * self._fitness_rate)

    def reset(self) -> None:
        """
        Bring the agent back to life at the start position, with zero fitness.
        The network is left as it is.
        """
        self.alive   = True
        self.fitness = 0.0
        self.body    = self._world.initial_robot()

    def __str__(self):
        state = "alive" if self.alive else "dead"
        return f"ID={self.ID}, fitness={self.fitness:.1f}, {state}\n{self.network}"

    def __repr__(self):
        return f"Agent(ID={self.ID}, fitness={self.fitness!r}, alive={self.alive})"
