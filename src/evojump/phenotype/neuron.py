"""
Neuron Module

This module implements the Neuron, the smallest computational unit of an
evojump network, together with the single mutation operator used during
reproduction.

Classes:
    Neuron: A weighted sum of its inputs plus a bias, passed through an activation
"""

import random
from typing import Sequence

from evojump.activations import Activation
from evojump.errors      import ShapeError

# Mutated parameters are never allowed to fall below this value.
MUTATION_FLOOR = 0.01

class Neuron:
    """
    A single neuron computing: activation(sum(weights[i] * inputs[i]) + bias)

    The number of weights is fixed when the neuron is created; across
    generations only the values of the weights and of the bias change.

    Public Attributes:
        weights:    One weight per input, in input order
        bias:       Bias value added to the weighted input
        activation: The (scalar) Activation applied to the weighted input

    Public Methods:
        activate(inputs):         Compute the neuron output for an input vector
        create(width, act):       Create a neuron with random parameters in [0, 1)
        mutate(value, magnitude): The mutation operator applied to every parameter
        inherit(parent, scale):   Overwrite parameters with mutated copies of the parent's
        randomize():              Overwrite parameters with fresh random values
        parameters():             Immutable snapshot of the parameters
    """

    def __init__(self, weights: Sequence[float], bias: float, activation: Activation):
        """
        Parameters:
            weights:    the input weights (their number is the neuron input width)
            bias:       the neuron bias
            activation: the activation applied to the weighted input
        """
        self.weights   : list[float] = list(weights)
        self.bias      : float       = bias
        self.activation: Activation  = activation

    @classmethod
    def create(cls, input_width: int, activation: Activation) -> 'Neuron':
        """
        Create a neuron whose weights and bias are drawn uniformly from [0, 1).

        Parameters:
            input_width: the number of weights (inputs) of the neuron
            activation:  the activation applied to the weighted input
        """
        weights = [random.random() for _ in range(input_width)]
        return cls(weights, random.random(), activation)

    @property
    def input_width(self) -> int:
        """The number of inputs (and weights) of this neuron."""
        return len(self.weights)

    def activate(self, inputs: Sequence[float]) -> float:
        """
        Calculate the output of this neuron.

        Parameters:
            inputs: as many input values as the neuron has weights

        Returns:
            activation(weighted sum of the inputs + bias)
        """
        if len(inputs) != len(self.weights):
            raise ShapeError(f"Expected {len(self.weights)} inputs, got {len(inputs)}")

        z = sum(w * x for w, x in zip(self.weights, inputs)) + self.bias
        return float(self.activation.function(z))

    @staticmethod
    def mutate(value: float, magnitude: float) -> float:
        """
        Move 'value' up or down (with equal probability) by 'magnitude'.

        The result is clipped from below at MUTATION_FLOOR, whatever the magnitude.
        """
        if random.random() < 0.5:
            value = value - magnitude
        else:
            value = value + magnitude
        return max(MUTATION_FLOOR, value)

    def inherit(self, parent: 'Neuron', mutation_scale: float) -> None:
        """
        Replace every weight and the bias by a mutated copy of the parent's.

        Each parameter draws its own magnitude uniformly from [0, mutation_scale)
        and its own direction.

        Parameters:
            parent:         the neuron the new values are derived from
            mutation_scale: upper bound of the perturbation magnitude
        """
        if len(parent.weights) != len(self.weights):
            raise ShapeError(f"Cannot inherit {len(parent.weights)} weights "
                             f"into a neuron with {len(self.weights)} weights")

        self.weights[:] = [Neuron.mutate(w, random.random() * mutation_scale) for w in parent.weights]
        self.bias       = Neuron.mutate(parent.bias, random.random() * mutation_scale)

    def randomize(self) -> None:
        """
        Replace every weight and the bias by a fresh value drawn uniformly from [0, 1).
        """
        self.weights[:] = [random.random() for _ in self.weights]
        self.bias       = random.random()

    def parameters(self) -> tuple[tuple[float, ...], float]:
        """Return a snapshot of the neuron parameters: (weights, bias)."""
        return tuple(self.weights), self.bias

    def __str__(self):
        weights = ", ".join(f"{w:+.3f}" for w in self.weights)
        return f"Neuron({self.activation.code}, bias={self.bias:+.3f}, weights=[{weights}])"

    def __repr__(self):
        return f"Neuron(weights={self.weights!r}, bias={self.bias!r}, activation={self.activation})"
