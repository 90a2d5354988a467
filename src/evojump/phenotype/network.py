"""
Network Module

This module implements the feedforward network that powers each agent.
A network is an ordered sequence of layers, built once from a layer
configuration; afterwards its topology never changes and only the weights
and biases of its neurons are overwritten from one generation to the next.

Classes:
    LayerSpec: Describes one layer of a network (size and activation name)
    Network:   An ordered sequence of layers performing forward propagation
"""

from collections.abc import Mapping
from typing          import NamedTuple, Sequence
import graphviz  # type: ignore

from evojump.activations     import Activation
from evojump.errors          import ConfigError, ShapeError
from evojump.phenotype.layer import Layer

# Keys naming the activation in a mapping layer descriptor, in lookup order
_ACTIVATION_KEYS = ('activation', 'activation_name', 'activationName')

class LayerSpec(NamedTuple):
    """The size of a layer and the name of the activation shared by its neurons."""
    size      : int
    activation: str

class Network:
    """
    A feedforward neural network made of layers of neurons.

    The first layer is not a fully-connected layer: its neuron i takes the
    single input component i, so the size of the first layer is the size of
    the input vector. Each subsequent layer's neurons read the whole output
    vector of the previous layer.

    Public Attributes:
        layers: The layers of the network, from input to output

    Public Properties:
        input_width:  Expected length of the input vector
        output_width: Length of the output vector
        layer_config: The configuration the network was built from

    Public Methods:
        build(layer_config):     (Re)build the topology with random parameters
        predict(inputs):         Propagate an input vector through the network
        inherit(parent, scale):  Derive all parameters from 'parent' by mutation
        randomize():             Replace all parameters with fresh random values
        parameters():            Immutable snapshot of all parameters
        visualize():             Draw the network with Graphviz
    """

    def __init__(self, layer_config: Sequence | None = None):
        """
        Parameters:
            layer_config: optional layer configuration, see 'build()'.
                          If None, the network is empty until 'build()' is called.
        """
        self.layers       : list[Layer]      = []
        self._layer_config: list[LayerSpec]  = []
        if layer_config is not None:
            self.build(layer_config)

    @staticmethod
    def _parse_layer_spec(index: int, spec) -> tuple[int, Activation]:
        """
        Validate one layer descriptor: a LayerSpec, a (size, name) pair or a
        mapping with a 'size' key and an 'activation' (or 'activation_name',
        'activationName') key.
        """
        if isinstance(spec, Mapping):
            size = spec.get('size')
            name = next((spec[key] for key in _ACTIVATION_KEYS if key in spec), None)
        else:
            try:
                size, name = spec
            except (TypeError, ValueError):
                raise ConfigError(f"Layer {index}: expected a (size, activation) pair, got {spec!r}") from None

        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError(f"Layer {index}: size must be a positive integer, got {size!r}")
        if name is None:
            raise ConfigError(f"Layer {index}: missing activation")

        return size, Activation.scalar_from_name(name)

    def build(self, layer_config: Sequence) -> 'Network':
        """
        Build the network topology, discarding any previously built one.

        All weights and biases are drawn uniformly from [0, 1). The neurons of
        the first layer have one weight each; the neurons of layer i > 0 have
        as many weights as layer i-1 has neurons.

        Parameters:
            layer_config: non-empty ordered sequence of layer descriptors
                          (LayerSpec, (size, activation name) or
                          {'size': ..., 'activation': ...}; 'activation_name'
                          and 'activationName' are accepted for 'activation')

        Returns:
            the network itself

        Raises:
            ConfigError: empty/malformed configuration, or unknown activation
        """
        if isinstance(layer_config, (str, bytes, Mapping)) or not isinstance(layer_config, Sequence):
            raise ConfigError(f"Layer configuration must be a sequence of layers, got {layer_config!r}")
        if len(layer_config) == 0:
            raise ConfigError("Layer configuration must contain at least one layer")

        parsed = [self._parse_layer_spec(i, spec) for i, spec in enumerate(layer_config)]

        layers = []
        for i, (size, activation) in enumerate(parsed):
            input_width = 1 if i == 0 else parsed[i-1][0]
            layers.append(Layer.create(size,
                                       input_width,
                                       is_output_layer=(i == len(parsed) - 1),
                                       activation=activation,
                                       is_input_layer=(i == 0)))

        self.layers        = layers
        self._layer_config = [LayerSpec(size, activation.name) for size, activation in parsed]
        return self

    @property
    def layer_config(self) -> list[LayerSpec]:
        """The configuration of the current topology."""
        return list(self._layer_config)

    @property
    def input_width(self) -> int:
        """Length of the input vector expected by 'predict()'."""
        return self.layers[0].width if self.layers else 0

    @property
    def output_width(self) -> int:
        """Length of the output vector returned by 'predict()'."""
        return self.layers[-1].width if self.layers else 0

    @property
    def number_neurons(self) -> int:
        return sum(layer.width for layer in self.layers)

    @property
    def number_parameters(self) -> int:
        return sum(len(n.weights) + 1 for layer in self.layers for n in layer.neurons)

    def predict(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as neurons in the first layer)

        Returns:
            the outputs of the last layer, in neuron order
        """
        if not self.layers:
            raise ConfigError("Network has not been built")
        if len(inputs) != self.input_width:
            raise ShapeError(f"Expected {self.input_width} inputs, got {len(inputs)}")

        values = list(inputs)
        for layer in self.layers:
            values = layer.forward(values)
        return values

    def inherit(self, parent: 'Network', mutation_scale: float) -> None:
        """
        Overwrite every weight and bias with a mutated copy of the matching
        parameter in 'parent'. Both networks must share the same topology.
        """
        if len(parent.layers) != len(self.layers):
            raise ShapeError(f"Cannot inherit a network of {len(parent.layers)} layers "
                             f"into one of {len(self.layers)} layers")
        for layer, parent_layer in zip(self.layers, parent.layers):
            layer.inherit(parent_layer, mutation_scale)

    def randomize(self) -> None:
        """Overwrite every weight and bias with a fresh value drawn from [0, 1)."""
        for layer in self.layers:
            layer.randomize()

    def parameters(self) -> tuple:
        """
        Snapshot of all the network parameters, as nested tuples.
        Two networks compare equal this way only if all values are identical.
        """
        return tuple(layer.parameters() for layer in self.layers)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Parameters:
            view: If True, render the graph and open the result

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill_colors = {'input': 'lightgrey', 'hidden': 'lightblue', 'output': 'white'}

        # One cluster per layer, raw inputs in front of the first layer
        with dot.subgraph(name='cluster_inputs') as cluster:
            cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self.input_width):
                cluster.node(f"x{i}", label=f"x{i}", shape='plaintext', fontsize='5')

        for depth, layer in enumerate(self.layers):
            kind = 'output' if layer.is_output_layer else 'input' if layer.is_input_layer else 'hidden'
            with dot.subgraph(name=f'cluster_layer{depth}') as cluster:
                cluster.attr(rank='same', label=f'Layer {depth}', style='invisible')
                for n, neuron in enumerate(layer.neurons):
                    attrs = dict(node_attrs, fillcolor=fill_colors[kind])
                    attrs['label'] = f"{neuron.activation.code}\\nbias={neuron.bias:.2f}"
                    cluster.node(f"L{depth}N{n}", **attrs)

        edge_attrs = {'fontsize': '5', 'penwidth': '0.5', 'arrowsize': '0.5', 'labelfloat': 'false'}
        for depth, layer in enumerate(self.layers):
            for n, neuron in enumerate(layer.neurons):
                if layer.is_input_layer:
                    sources = [f"x{n}"]
                else:
                    sources = [f"L{depth-1}N{m}" for m in range(len(neuron.weights))]
                for source, weight in zip(sources, neuron.weights):
                    dot.edge(source, f"L{depth}N{n}", label=f"w={weight:.2f}", **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        return "\n".join(str(layer) for layer in self.layers)

    def __repr__(self):
        return f"Network(layer_config={self._layer_config!r})"
