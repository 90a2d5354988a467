"""
Unit tests for evojump.phenotype.network module.
"""

import math

import graphviz
import pytest

from evojump.activations       import Activation
from evojump.errors            import ConfigError, ShapeError
from evojump.phenotype.network import LayerSpec, Network


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def layer_config():
    return [LayerSpec(5, 'LINEAR'), LayerSpec(4, 'TANH'), LayerSpec(1, 'SIGMOID')]


@pytest.fixture
def network(layer_config):
    return Network(layer_config)


# ============================================================================
# Test Build
# ============================================================================

class TestNetworkBuild:
    """Test Network.build method."""

    def test_build_layer_widths(self, network):
        assert [layer.width for layer in network.layers] == [5, 4, 1]

    def test_first_layer_has_one_weight_per_neuron(self, network):
        assert all(len(n.weights) == 1 for n in network.layers[0].neurons)

    def test_later_layers_weights_match_previous_width(self, network):
        assert all(len(n.weights) == 5 for n in network.layers[1].neurons)
        assert all(len(n.weights) == 4 for n in network.layers[2].neurons)

    def test_layer_flags(self, network):
        assert network.layers[0].is_input_layer
        assert not network.layers[1].is_input_layer
        assert network.layers[2].is_output_layer
        assert not network.layers[0].is_output_layer

    def test_activations_resolved(self, network):
        assert [layer.activation for layer in network.layers] == \
               [Activation.LINEAR, Activation.TANH, Activation.SIGMOID]

    def test_parameters_in_unit_interval(self, network):
        for layer in network.layers:
            for neuron in layer.neurons:
                assert all(0.0 <= v < 1.0 for v in neuron.weights + [neuron.bias])

    def test_single_layer_network(self):
        network = Network([(3, 'RELU')])
        assert network.input_width == 3
        assert network.output_width == 3
        assert network.layers[0].is_input_layer and network.layers[0].is_output_layer

    def test_accepts_pairs_and_mappings(self):
        network = Network([(2, 'linear'), {'size': 1, 'activation': 'sigmoid'}])
        assert network.layer_config == [LayerSpec(2, 'LINEAR'), LayerSpec(1, 'SIGMOID')]

    @pytest.mark.parametrize("key", ["activation", "activation_name", "activationName"])
    def test_accepts_activation_key_spellings(self, key):
        network = Network([{'size': 5, key: 'linear'}, {'size': 1, key: 'sigmoid'}])
        assert network.layer_config == [LayerSpec(5, 'LINEAR'), LayerSpec(1, 'SIGMOID')]

    def test_build_replaces_topology(self, network):
        network.build([(2, 'LINEAR'), (3, 'RELU')])
        assert [layer.width for layer in network.layers] == [2, 3]
        assert network.input_width == 2
        assert network.output_width == 3

    def test_build_returns_self(self):
        network = Network()
        assert network.build([(1, 'LINEAR')]) is network

    def test_counts(self, network):
        assert network.number_neurons == 10
        # 5 * (1+1) + 4 * (5+1) + 1 * (4+1)
        assert network.number_parameters == 39


class TestNetworkBuildErrors:
    """Test that malformed configurations raise ConfigError."""

    def test_empty_config(self):
        with pytest.raises(ConfigError, match="at least one layer"):
            Network([])

    def test_unknown_activation(self):
        with pytest.raises(ConfigError, match="Unknown activation"):
            Network([(2, 'LINEAR'), (1, 'GELU')])

    def test_softmax_rejected(self):
        with pytest.raises(ConfigError, match="vector-only"):
            Network([(2, 'LINEAR'), (2, 'SOFTMAX')])

    @pytest.mark.parametrize("size", [0, -1, 2.5, "3", True, None])
    def test_invalid_size(self, size):
        with pytest.raises(ConfigError):
            Network([(size, 'LINEAR')])

    def test_missing_activation(self):
        with pytest.raises(ConfigError, match="missing activation"):
            Network([{'size': 2}])

    def test_malformed_descriptor(self):
        with pytest.raises(ConfigError):
            Network([(2, 'LINEAR', 'extra')])
        with pytest.raises(ConfigError):
            Network([5])

    def test_not_a_sequence(self):
        with pytest.raises(ConfigError):
            Network("5:LINEAR")
        with pytest.raises(ConfigError):
            Network({'size': 5, 'activation': 'LINEAR'})

    def test_failed_build_keeps_previous_topology(self, network):
        before = network.parameters()
        with pytest.raises(ConfigError):
            network.build([(2, 'LINEAR'), (1, 'NOPE')])
        assert network.parameters() == before


# ============================================================================
# Test Predict
# ============================================================================

class TestNetworkPredict:
    """Test Network.predict method."""

    def test_two_input_sigmoid_scenario(self):
        """An identity first layer feeding one sigmoid neuron with unit weights."""
        network = Network([(2, 'LINEAR'), (1, 'SIGMOID')])
        for neuron in network.layers[0].neurons:
            neuron.weights[:] = [1.0]
            neuron.bias = 0.0
        output_neuron = network.layers[1].neurons[0]
        output_neuron.weights[:] = [1.0, 1.0]
        output_neuron.bias = 0.0

        result = network.predict([0.5, 0.5])
        assert len(result) == 1
        assert result[0] == pytest.approx(1.0 / (1.0 + math.exp(-1.0)))
        assert result[0] == pytest.approx(0.731, abs=1e-3)

    def test_output_length(self, network):
        assert len(network.predict([0.1, 0.2, 0.3, 0.4, 0.5])) == 1

    @pytest.mark.parametrize("sizes", [[1], [3, 2], [5, 4, 1], [2, 6, 6, 3]])
    def test_output_length_matches_last_layer(self, sizes):
        network = Network([(s, 'TANH') for s in sizes])
        assert len(network.predict([0.5] * sizes[0])) == sizes[-1]

    def test_deterministic(self, network):
        inputs = [0.1, -0.2, 0.3, -0.4, 0.5]
        assert network.predict(inputs) == network.predict(inputs)

    def test_equal_parameters_equal_outputs(self, layer_config, set_network_parameters):
        a = Network(layer_config)
        set_network_parameters(a, 0.3)
        b = Network(layer_config)
        b.inherit(a, 0.0)
        inputs = [0.9, 0.1, -0.5, 0.0, 0.3]
        assert a.predict(inputs) == b.predict(inputs)

    @pytest.mark.parametrize("length", [0, 4, 6])
    def test_wrong_input_length(self, network, length):
        with pytest.raises(ShapeError, match=f"Expected 5 inputs, got {length}"):
            network.predict([0.0] * length)

    def test_predict_before_build(self):
        with pytest.raises(ConfigError, match="not been built"):
            Network().predict([1.0])

    def test_hidden_layer_reads_whole_vector(self):
        network = Network([(2, 'LINEAR'), (1, 'LINEAR')])
        network.layers[0].neurons[0].weights[:] = [1.0]
        network.layers[0].neurons[0].bias = 0.0
        network.layers[0].neurons[1].weights[:] = [10.0]
        network.layers[0].neurons[1].bias = 0.0
        network.layers[1].neurons[0].weights[:] = [1.0, 1.0]
        network.layers[1].neurons[0].bias = 0.0
        assert network.predict([1.0, 2.0]) == [21.0]


# ============================================================================
# Test Inherit / Randomize / Parameters
# ============================================================================

class TestNetworkParameters:
    """Test parameter manipulation across whole networks."""

    def test_inherit_within_scale(self, layer_config, set_network_parameters):
        parent = Network(layer_config)
        set_network_parameters(parent, 0.5)
        child = Network(layer_config)
        child.inherit(parent, 0.1)

        for layer in child.layers:
            for neuron in layer.neurons:
                assert all(0.4 < v < 0.6 for v in neuron.weights + [neuron.bias])

    def test_inherit_leaves_parent_unchanged(self, layer_config):
        parent = Network(layer_config)
        before = parent.parameters()
        Network(layer_config).inherit(parent, 0.1)
        assert parent.parameters() == before

    def test_inherit_topology_mismatch(self, network):
        with pytest.raises(ShapeError):
            network.inherit(Network([(5, 'LINEAR'), (1, 'SIGMOID')]), 0.1)
        with pytest.raises(ShapeError):
            network.inherit(Network([(5, 'LINEAR'), (3, 'TANH'), (1, 'SIGMOID')]), 0.1)

    def test_randomize_changes_parameters(self, network, set_network_parameters):
        set_network_parameters(network, 5.0)
        network.randomize()
        for layer in network.layers:
            for neuron in layer.neurons:
                assert all(0.0 <= v < 1.0 for v in neuron.weights + [neuron.bias])

    def test_randomize_keeps_topology(self, network, layer_config):
        network.randomize()
        assert network.layer_config == layer_config

    def test_parameters_is_a_snapshot(self, network):
        snapshot = network.parameters()
        network.layers[1].neurons[0].weights[0] += 1.0
        assert network.parameters() != snapshot


# ============================================================================
# Test Visualization
# ============================================================================

class TestNetworkVisualize:
    """Test Network.visualize (graph construction only, nothing is rendered)."""

    def test_returns_digraph(self, network):
        assert isinstance(network.visualize(view=False), graphviz.Digraph)

    def test_contains_every_neuron(self, network):
        source = network.visualize(view=False).source
        for depth, layer in enumerate(network.layers):
            for n in range(layer.width):
                assert f"L{depth}N{n}" in source

    def test_contains_every_weight_edge(self, network):
        source = network.visualize(view=False).source
        # 5 input edges + 4*5 + 1*4
        assert source.count("->") == 29
