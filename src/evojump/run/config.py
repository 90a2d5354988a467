import configparser
import os
from dataclasses import fields

from evojump.activations         import Activation
from evojump.environment.physics import Physics
from evojump.errors              import ConfigError
from evojump.phenotype.network   import LayerSpec

class Config:

    @staticmethod
    def _parse_layer_config(raw_sizes, raw_activations) -> list[LayerSpec]:
        """
        Parse the network layers from their sizes and activation names.

        Parameters:
            raw_sizes:       comma-separated layer sizes (e.g. "5, 4, 1"), or a list of ints
            raw_activations: comma-separated activation names, or a list of names

        Returns:
            List of LayerSpec, one per layer
        """
        if isinstance(raw_sizes, str):
            raw_sizes = [s.strip() for s in raw_sizes.split(',') if s.strip()]
        if isinstance(raw_activations, str):
            raw_activations = [a.strip() for a in raw_activations.split(',') if a.strip()]

        if len(raw_sizes) == 0:
            raise ConfigError("At least one layer must be configured")
        if len(raw_sizes) != len(raw_activations):
            raise ConfigError(f"Got {len(raw_sizes)} layer sizes but {len(raw_activations)} layer activations")

        layer_config = []
        for size, name in zip(raw_sizes, raw_activations):
            try:
                size = int(size)
            except ValueError:
                raise ConfigError(f"Invalid layer size '{size}'") from None
            if size <= 0:
                raise ConfigError(f"Layer sizes must be positive, got {size}")
            layer_config.append(LayerSpec(size, Activation.scalar_from_name(name).name))

        return layer_config

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values
                         which can then be modified attribute by attribute.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size = 1000
            self.layer_config    = self._parse_layer_config("5, 4, 1", "LINEAR, TANH, SIGMOID")

            self.mutation_scale = 0.1
            self.elite_fraction = 0.8

            self.decision_threshold = 0.5
            self.fitness_rate       = 0.01

            self.physics = Physics()

            self.time_step                 = 16.0
            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_threshold         = 10000.0
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION]

        # The number of agents; it stays the same in every generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # [NETWORK]

        # The size of each layer, from input to output. The first layer has one
        # neuron per sensed value, so its size must match the agent input vector.
        # The activation function shared by the neurons of each layer
        # (SIGMOID, RELU, LEAKY_RELU, LINEAR, TANH); one name per layer.
        self.layer_config = self._parse_layer_config(get_value('NETWORK', 'layer_sizes', str),
                                                     get_value('NETWORK', 'layer_activations', str))

        # [REPRODUCTION]

        # The upper bound of the perturbation applied to each parameter
        # inherited from the best agent.
        self.mutation_scale = get_value('REPRODUCTION', 'mutation_scale', float)

        # The best-ranked fraction of the population that is derived from the
        # best agent; the rest of the population is re-initialized at random.
        self.elite_fraction = get_value('REPRODUCTION', 'elite_fraction', float, default=0.8)

        # [AGENT]

        # An agent jumps when the first network output is at least this value.
        self.decision_threshold = get_value('AGENT', 'decision_threshold', float, default=0.5)

        # Fitness gained per ms survived (rounded up on every tick).
        self.fitness_rate = get_value('AGENT', 'fitness_rate', float, default=0.01)

        # [ENVIRONMENT] (optional section)

        # Any physical constant of the task can be overridden here,
        # using the names of the 'Physics' fields.
        defaults = Physics()
        self.physics = Physics(**{f.name: get_value('ENVIRONMENT', f.name, float, default=getattr(defaults, f.name))
                                  for f in fields(Physics)})

        # [TERMINATION]

        # The duration of a tick, in ms, when the trial drives its own clock.
        self.time_step = get_value('TERMINATION', 'time_step', float, default=16.0)

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to stop the run as soon as an agent reaches 'fitness_threshold'.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The fitness which when met or exceeded by an agent causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=10000.0)

    def __setattr__(self, name, value):
        """
        Override 'setattr' so that population parameters are checked when set
        (from a file or by hand).
        """
        if name == 'population_size' and (value is None or value < 1):
            raise ConfigError(f"population_size must be at least 1, got {value}")
        if name == 'elite_fraction' and (value is None or not 0.0 <= value <= 1.0):
            raise ConfigError(f"elite_fraction must be within [0, 1], got {value}")
        if name == 'mutation_scale' and (value is None or value < 0.0):
            raise ConfigError(f"mutation_scale must be a non-negative number, got {value}")
        super().__setattr__(name, value)
