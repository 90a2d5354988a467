"""
Population Module

This module implements the Population class, the owner of every agent and
the place where one generation turns into the next.

Classes:
    Population: Fixed-size set of agents with elitist, tiered reproduction
"""

from typing import TYPE_CHECKING

from evojump.errors    import ConfigError
from evojump.phenotype import Agent, Network

if TYPE_CHECKING:
    from evojump.environment import World, BoxState
    from evojump.run.config  import Config

class Population:
    """
    A population of agents evolving to avoid the box.

    The population has a fixed size, and the agents keep their identity and
    position in 'agents' for the whole run: from one generation to the next
    only their state (alive flag, fitness, network parameters) is replaced.

    Reproduction happens once all agents are dead. Agents are ranked by
    fitness (ties keep population order) and:
     + the best agent is carried over untouched
     + the agents ranked just behind it, up to 'elite_fraction' of the
       population, inherit mutated copies of the best agent's parameters
     + the remaining, worst-ranked agents get fresh random parameters

    Public Attributes:
        agents: List of all Agent objects, in population order

    Public Properties:
        alive_count: Number of agents still alive
        is_extinct:  Whether every agent is dead

    Public Methods:
        update(box, delta_time):  Run one tick for every agent
        rank():                   Agents sorted by decreasing fitness
        get_fittest_agent():      The agent with the highest fitness
        spawn_next_generation():  Reproduce and reset every agent
    """

    def __init__(self, config: 'Config', world: 'World'):
        """
        Initialize the population, each agent with an independently randomized
        network of the configured topology.

        Parameters:
            config: Stores configuration parameters
            world:  The environment sensed by the agents
        """
        self._config = config
        self._world  = world

        if not config.layer_config:
            raise ConfigError("At least one layer must be configured")
        if config.layer_config[0].size != Agent.NUM_INPUTS:
            raise ConfigError(f"The first layer must have {Agent.NUM_INPUTS} neurons (one per sensed value), "
                              f"got {config.layer_config[0].size}")

        self.agents: list[Agent] = []
        for _ in range(config.population_size):
            network = Network(config.layer_config)
            agent   = Agent(network, world, config.decision_threshold, config.fitness_rate)
            self.agents.append(agent)

    @property
    def alive_count(self) -> int:
        return sum(1 for agent in self.agents if agent.alive)

    @property
    def is_extinct(self) -> bool:
        return not any(agent.alive for agent in self.agents)

    def update(self, box: 'BoxState', delta_time: float) -> None:
        """
        Run one tick for every agent, in population order.

        All agents read the same box state, so the outcome does not
        depend on the order in which they are updated.
        """
        for agent in self.agents:
            agent.update(box, delta_time)

    def rank(self) -> list[Agent]:
        """
        Return the agents sorted by decreasing fitness.
        The sort is stable: agents with equal fitness keep population order.
        """
        return sorted(self.agents, key=lambda agent: agent.fitness, reverse=True)

    def get_fittest_agent(self) -> Agent | None:
        """
        Return the agent with the highest fitness (the first one, in case of
        ties), or None if the population is empty.
        """
        if not self.agents:
            return None
        return self.rank()[0]

    def elite_cutoff(self) -> int:
        """
        The rank at which the re-initialized tier starts: ranks below it are
        the best agent plus the agents derived from it.
        """
        cutoff = int(round(self._config.elite_fraction * len(self.agents)))
        return min(max(cutoff, 1), len(self.agents))

    def spawn_next_generation(self) -> Agent:
        """
        Create the next generation in place.

        Step 1: rank the agents by fitness; the first one is the best agent
        Step 2: agents ranked 1 .. cutoff-1 inherit the best agent's
                parameters, each mutated by up to 'mutation_scale'
        Step 3: agents ranked cutoff .. N-1 get fresh random parameters
        Step 4: every agent (best included) is brought back to life at the
                start position with zero fitness

        The best agent's network is never modified.

        Returns:
            the best agent of the generation that just ended
        """
        ranked = self.rank()
        best   = ranked[0]
        cutoff = self.elite_cutoff()

        for agent in ranked[1:cutoff]:
            agent.network.inherit(best.network, self._config.mutation_scale)

        for agent in ranked[cutoff:]:
            agent.network.randomize()

        for agent in self.agents:
            agent.reset()

        return best

    def __len__(self):
        return len(self.agents)

    def __str__(self):
        return '\n'.join(str(agent) for agent in self.agents)
