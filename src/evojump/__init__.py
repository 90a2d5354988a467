"""
evojump - evolving neural controllers for a jump-over-the-box task.

A population of robots, each driven by a small feedforward network, runs
towards a box sliding across the ground. Networks are never trained by
gradients: every time the whole population has crashed into the box, the
best robot is kept, most of the others inherit mutated copies of its
parameters, and the worst ones are re-initialized at random.

Main components:
- activations: Activation functions available to the networks
- phenotype:   Neuron, Layer, Network and the Agent they power
- environment: Headless physics of the robots and the box
- pool:        Population and its reproduction
- run:         Configuration and the tick-driven Trial

Example:
    >>> from evojump import Config, Trial
    >>> config = Config("examples/configs/config_jump.ini")
    >>> trial = Trial(config)
    >>> trial.run()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evojump.run.config        import Config
from evojump.run.trial         import Trial, GenerationState
from evojump.pool.population   import Population
from evojump.phenotype         import Agent, Network, Layer, Neuron, LayerSpec
from evojump.activations       import Activation
from evojump.environment       import World, Physics
from evojump.errors            import ConfigError, ShapeError

__all__ = [
    "Config",
    "Trial",
    "GenerationState",
    "Population",
    "Agent",
    "Network",
    "Layer",
    "Neuron",
    "LayerSpec",
    "Activation",
    "World",
    "Physics",
    "ConfigError",
    "ShapeError",
]
