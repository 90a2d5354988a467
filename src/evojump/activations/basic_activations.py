import numpy as np
from enum import Enum
from typing import Callable

from evojump.errors import ConfigError

def linear_activation(z):
    return z

def sigmoid_activation(z):
    z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

def relu_activation(z):
    return np.maximum(0.0, z)

def leaky_relu_activation(z, alpha=0.01):
    return np.maximum(alpha * z, z)

def softmax_activation(z):
    # Operates on a whole vector, never on a single neuron's sum.
    # Shifting by the max leaves the result unchanged but keeps exp finite.
    z = np.asarray(z, dtype=float)
    e = np.exp(z - np.max(z))
    return e / np.sum(e)

activations = {
    "sigmoid"   : sigmoid_activation,
    "relu"      : relu_activation,
    "leaky_relu": leaky_relu_activation,
    "linear"    : linear_activation,
    "tanh"      : tanh_activation,
    "softmax"   : softmax_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid"   : "SIG",
    "relu"      : "RLU",
    "leaky_relu": "LRL",
    "linear"    : "LIN",
    "tanh"      : "TNH",
    "softmax"   : "SMX"
    }

class Activation(Enum):
    """
    The fixed set of activation kinds a network can be configured with.

    Each member carries its pure function through the 'function' property.
    SOFTMAX is vector-only: it maps a whole vector to a vector and cannot be
    used as the scalar activation of a single neuron.
    """
    SIGMOID    = "sigmoid"
    RELU       = "relu"
    LEAKY_RELU = "leaky_relu"
    LINEAR     = "linear"
    TANH       = "tanh"
    SOFTMAX    = "softmax"

    @property
    def function(self) -> Callable:
        """The pure numeric function implementing this activation."""
        return activations[self.value]

    @property
    def code(self) -> str:
        """Short identifier used when printing or drawing networks."""
        return activation_codes[self.value]

    @property
    def is_vector(self) -> bool:
        """Whether the function operates on whole vectors only."""
        return self is Activation.SOFTMAX

    @classmethod
    def from_name(cls, name: 'str | Activation') -> 'Activation':
        """
        Resolve a symbolic activation name, e.g. "SIGMOID" or "leaky_relu".

        Parameters:
            name: the activation name (case-insensitive), or an Activation

        Returns:
            the matching Activation member

        Raises:
            ConfigError: if the name is not a known activation
        """
        if isinstance(name, Activation):
            return name
        if not isinstance(name, str):
            raise ConfigError(f"Activation name must be a string, got {name!r}")
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ConfigError(f"Unknown activation function '{name}'") from None

    @classmethod
    def scalar_from_name(cls, name: 'str | Activation') -> 'Activation':
        """
        Resolve an activation that can be applied to a single neuron's output.

        Raises:
            ConfigError: if the name is unknown or names a vector-only activation
        """
        activation = cls.from_name(name)
        if activation.is_vector:
            raise ConfigError(f"Activation '{activation.name}' is vector-only "
                              f"and cannot be used as a neuron activation")
        return activation
