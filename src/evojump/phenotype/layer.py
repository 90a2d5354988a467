"""
Layer Module

Classes:
    Layer: An ordered group of neurons sharing input width and activation
"""

from typing import Sequence

from evojump.activations      import Activation
from evojump.errors           import ShapeError
from evojump.phenotype.neuron import Neuron

class Layer:
    """
    An ordered collection of neurons with identical input width and activation.

    The order of the neurons determines the order of the layer outputs, which
    is the input order expected by the next layer.

    The input layer is special: its neuron i reads only component i of the raw
    input vector (so each of its neurons has a single weight). Every other
    layer feeds the whole input vector to each of its neurons.

    Public Attributes:
        neurons:         The neurons of this layer, in output order
        is_input_layer:  Whether neuron i reads only input component i
        is_output_layer: Informational, it does not change the computation
    """

    def __init__(self, neurons: Sequence[Neuron], is_output_layer: bool = False, is_input_layer: bool = False):
        self.neurons        : list[Neuron] = list(neurons)
        self.is_output_layer: bool         = is_output_layer
        self.is_input_layer : bool         = is_input_layer

    @classmethod
    def create(cls,
               size           : int,
               input_width    : int,
               is_output_layer: bool,
               activation     : Activation,
               is_input_layer : bool = False) -> 'Layer':
        """
        Create a layer of 'size' randomly initialized neurons.

        Parameters:
            size:            the number of neurons
            input_width:     the number of weights of each neuron
            is_output_layer: whether this is the last layer of its network
            activation:      the activation shared by all neurons
            is_input_layer:  whether this is the first layer of its network
        """
        neurons = [Neuron.create(input_width, activation) for _ in range(size)]
        return cls(neurons, is_output_layer, is_input_layer)

    @property
    def width(self) -> int:
        """The number of neurons (and outputs) of this layer."""
        return len(self.neurons)

    @property
    def activation(self) -> Activation:
        return self.neurons[0].activation

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """
        Compute the output of every neuron, in neuron order.

        Parameters:
            inputs: the raw input vector (input layer), or the previous layer's output

        Returns:
            one output per neuron
        """
        if self.is_input_layer:
            if len(inputs) != len(self.neurons):
                raise ShapeError(f"Expected {len(self.neurons)} inputs, got {len(inputs)}")
            return [neuron.activate([x]) for neuron, x in zip(self.neurons, inputs)]

        return [neuron.activate(inputs) for neuron in self.neurons]

    def inherit(self, parent: 'Layer', mutation_scale: float) -> None:
        """Derive every neuron's parameters from the matching neuron of 'parent'."""
        if parent.width != self.width:
            raise ShapeError(f"Cannot inherit a layer of width {parent.width} into one of width {self.width}")
        for neuron, parent_neuron in zip(self.neurons, parent.neurons):
            neuron.inherit(parent_neuron, mutation_scale)

    def randomize(self) -> None:
        for neuron in self.neurons:
            neuron.randomize()

    def parameters(self) -> tuple:
        return tuple(neuron.parameters() for neuron in self.neurons)

    def __str__(self):
        kind = "input" if self.is_input_layer else "output" if self.is_output_layer else "hidden"
        neurons = "\n".join(f"    {neuron}" for neuron in self.neurons)
        return f"Layer({kind}, width={self.width})\n{neurons}"
