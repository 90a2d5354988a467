"""
Trial Module

This module defines the Trial class, which drives the evolution of a
population of agents on the jumping task.

A trial represents one independent run: the population is evaluated tick by
tick, and every time all agents are dead a new generation is bred from the
old one, until the generation limit (or an optional fitness target) is
reached.
"""

from enum import Enum

from evojump.environment import World
from evojump.phenotype   import Agent
from evojump.pool        import Population
from evojump.run.config  import Config

class GenerationState(Enum):
    """
    RUNNING: at least one agent is alive
    EXTINCT: every agent is dead, the next generation must be bred
    """
    RUNNING = "running"
    EXTINCT = "extinct"

class Trial:
    """
    One run of the evolutionary algorithm on the jumping task.

    The trial is driven by ticks. Each tick:
     1. takes a snapshot of the box
     2. updates every living agent against that snapshot
     3. moves the box
     4. if no agent is alive anymore, breeds the next generation (exactly
        once) and resets the world, so that the following tick already
        processes the new generation

    A trial can be driven by an external clock (call 'reset()' once, then
    'tick(delta_time)' once per frame) or run on its own fixed time step
    with 'run()'.

    Public Attributes:
        history: Best fitness of every completed generation
        failed:  Whether the trial ended without reaching the fitness threshold
        champion: The best agent of the most recently completed generation

    Public Properties:
        state:       GenerationState of the current generation
        generation:  Number of completed generations
        population:  The Population being evolved
        world:       The World the agents live in

    Public Methods:
        reset():           Create a fresh world and population
        tick(delta_time):  Advance the simulation by one time step
        run():             Reset, then tick until the trial terminates
    """

    def __init__(self, config: Config, suppress_output: bool = False, visualize: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
            visualize:       If True, draw the champion network at the end of 'run()'
        """
        self._config            : Config            = config
        self._generation_counter: int               = 0
        self._tick_counter      : int               = 0
        self._population        : Population | None = None
        self._world             : World | None      = None
        self._state             : GenerationState   = GenerationState.RUNNING
        self._suppress_output   : bool              = suppress_output
        self._visualize         : bool              = visualize
        self.history            : list[float]       = []
        self.champion           : Agent | None      = None
        self.failed             : bool              = True

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation_counter

    @property
    def population(self) -> Population | None:
        return self._population

    @property
    def world(self) -> World | None:
        return self._world

    def reset(self):
        """
        Reset the trial state: new world, new randomly initialized population.
        """
        self._world              = World(self._config.physics)
        self._population         = Population(self._config, self._world)
        self._state              = GenerationState.RUNNING
        self._generation_counter = 0
        self._tick_counter       = 0
        self.history             = []
        self.champion            = None
        self.failed              = True

    def run(self):
        """
        Run the trial.

        Resets the trial state and ticks on a fixed time step of
        'config.time_step' ms until the terminate condition is met.
        """
        self.reset()

        while not self._terminate():
            self.tick()

        if not self._suppress_output:
            self._final_report()

    def tick(self, delta_time: float | None = None) -> GenerationState:
        """
        Advance the simulation by one time step.

        Parameters:
            delta_time: duration of the step in ms (default: 'config.time_step')

        Returns:
            the state of the population after the tick; always RUNNING, as an
            extinction is resolved before the tick returns
        """
        if self._population is None:
            raise RuntimeError("Trial has not been reset, call 'reset()' or 'run()' first")

        if delta_time is None:
            delta_time = self._config.time_step

        # Agents only ever read the box as it stood at the start of the tick
        box = self._world.snapshot()
        self._population.update(box, delta_time)
        self._world.step(delta_time)
        self._tick_counter += 1

        if self._population.is_extinct:
            self._state = GenerationState.EXTINCT
            self._next_generation()

        return self._state

    def _next_generation(self):
        """
        Breed the next generation from the one that just went extinct.
        """
        best = self._population.get_fittest_agent()
        self.history.append(best.fitness)

        if not self._suppress_output:
            self._report_progress()

        self.champion = self._population.spawn_next_generation()
        self._world.reset()

        self._generation_counter += 1
        self._tick_counter        = 0
        self._state               = GenerationState.RUNNING

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        The trial stops after a maximum number of generations and (optionally)
        as soon as the fittest agent of the current generation reaches a
        fitness threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            best_fitness = max(agent.fitness for agent in self._population.agents)
            success = best_fitness >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate

    def _report_progress(self):
        """
        Print a report describing the generation that just went extinct.
        """
        fittest = self._population.get_fittest_agent()
        fitness = [agent.fitness for agent in self._population.agents]

        s  = f"===============\n"
        s += f"GENERATION {self._generation_counter:04d}\n"
        s += f"Maximum fitness  = {fittest.fitness:.1f}\n"
        s += f"Mean fitness     = {sum(fitness) / len(fitness):.1f}\n"
        s += f"Ticks survived   = {self._tick_counter}\n"
        s += f"Population size  = {len(self._population)}\n"
        print(s)

    def _final_report(self):
        """
        Display results at the end of the trial.
        """
        print("="*14)
        print("FINAL CHAMPION")
        print("="*14)

        if self.champion is None:
            print("No generation completed")
            return

        print(f"Champion ID={self.champion.ID}")
        print(self.champion.network)
        print(f"\nBest fitness: {max(self.history):.1f} over {len(self.history)} generations")
        print(f"Network: {self.champion.network.number_neurons} neurons, "
              f"{self.champion.network.number_parameters} parameters")

        if self._visualize:
            try:
                self.champion.network.visualize(view=True)
                print("Network visualization saved as 'Digraph.gv.pdf'")
            except Exception as e:
                print(f"Could not visualize network: {e}")
