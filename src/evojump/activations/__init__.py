"""
Activations Package

This package provides the activation functions available to evojump networks.

Exported:
    Activation:  Enumeration of activation kinds, each carrying its function
    activations: Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: sigmoid_activation, relu_activation,
                                     leaky_relu_activation, linear_activation,
                                     tanh_activation, softmax_activation (vector-only)
"""

from evojump.activations.basic_activations import (
    Activation,
    activations,
    activation_codes,
    sigmoid_activation,
    relu_activation,
    leaky_relu_activation,
    linear_activation,
    tanh_activation,
    softmax_activation
)

__all__ = [
    'Activation',
    'activations',
    'activation_codes',
    'sigmoid_activation',
    'relu_activation',
    'leaky_relu_activation',
    'linear_activation',
    'tanh_activation',
    'softmax_activation'
]
