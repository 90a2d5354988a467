"""Pytest configuration and shared fixtures."""

import random
from itertools import count

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility and reset global state."""
    from evojump.phenotype.agent import Agent

    random.seed(42)
    np.random.seed(42)

    # Reset Agent ID generator so that IDs start from 0 in each test
    Agent._id_generator = count(0)

    yield

    random.seed(None)
    np.random.seed(None)


@pytest.fixture
def small_config():
    """A default configuration with a population small enough for unit tests."""
    from evojump.run.config import Config

    config = Config()
    config.population_size = 10
    config.max_number_generations = 3
    return config


@pytest.fixture
def world():
    """A world with the default physics."""
    from evojump.environment import World
    return World()


@pytest.fixture
def set_network_parameters():
    """Return a helper setting every weight and bias of a network to one value."""
    def _set(network, value):
        for layer in network.layers:
            for neuron in layer.neurons:
                neuron.weights[:] = [value] * len(neuron.weights)
                neuron.bias = value
    return _set
