"""
Phenotype Package

This package provides the neural network classes and the agent they power.

Exported:
    Neuron:         A weighted sum plus bias through an activation
    Layer:          An ordered group of neurons
    LayerSpec:      Size and activation of one layer
    Network:        Feedforward network of layers
    Agent:          A robot controlled by a network
    MUTATION_FLOOR: Lowest value a mutated parameter can take
"""

from evojump.phenotype.neuron  import Neuron, MUTATION_FLOOR
from evojump.phenotype.layer   import Layer
from evojump.phenotype.network import LayerSpec, Network
from evojump.phenotype.agent   import Agent

__all__ = [
    'Neuron',
    'Layer',
    'LayerSpec',
    'Network',
    'Agent',
    'MUTATION_FLOOR'
]
