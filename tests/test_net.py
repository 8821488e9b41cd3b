import random

import pytest

from tinynet.net import Net


def test_layers_include_bias_neurons():
    net = Net([3, 2, 1])
    assert [len(layer) for layer in net.layers] == [4, 3, 2]
    assert all(layer[-1].output_val == 1.0 for layer in net.layers)


def test_connection_counts_match_next_layer():
    net = Net([3, 2, 1])
    assert [len(layer[0].output_weights) for layer in net.layers] == [2, 1, 0]


@pytest.mark.parametrize("topology", [[], [3], [3, 0, 1]])
def test_invalid_topology_rejected(topology):
    with pytest.raises(ValueError):
        Net(topology)


def test_feed_forward_rejects_wrong_input_count():
    net = Net([3, 2, 1])
    with pytest.raises(ValueError):
        net.feed_forward([1.0, 2.0])


def test_back_propagation_rejects_wrong_target_count():
    net = Net([2, 2, 1])
    net.feed_forward([0.5, 0.5])
    with pytest.raises(ValueError):
        net.back_propagation([1.0, 0.0])


def test_results_length_and_range():
    net = Net([3, 4, 2])
    net.feed_forward([0.2, -0.4, 0.9])
    results = net.results()
    assert len(results) == 2
    assert all(-1.0 < value < 1.0 for value in results)


def test_default_rng_is_reproducible():
    a, b = Net([3, 4, 1]), Net([3, 4, 1])
    a.feed_forward([0.1, 0.2, 0.3])
    b.feed_forward([0.1, 0.2, 0.3])
    assert a.results() == b.results()


def test_explicit_rng_is_used():
    a = Net([3, 4, 1], random.Random(5))
    b = Net([3, 4, 1], random.Random(5))
    weights_a = [c.weight for n in a.layers[0] for c in n.output_weights]
    weights_b = [c.weight for n in b.layers[0] for c in n.output_weights]
    assert weights_a == weights_b


def test_error_is_rms_of_single_output():
    net = Net([2, 3, 1])
    net.feed_forward([0.5, -0.5])
    output = net.results()[0]
    net.back_propagation([0.8])
    assert net.error == pytest.approx(abs(0.8 - output))


def test_recent_average_error_starts_at_zero_and_smooths():
    net = Net([2, 3, 1])
    assert net.recent_average_error == 0.0
    net.feed_forward([0.5, -0.5])
    net.back_propagation([0.8])
    assert 0.0 < net.recent_average_error < net.error


def test_inputs_reach_output_layer():
    net = Net([2, 3, 1])
    net.feed_forward([0.0, 0.0])
    first = net.results()
    net.feed_forward([1.0, 1.0])
    assert net.results() != first
    assert net.layers[0][0].output_val == 1.0


def test_training_reduces_error():
    net = Net([2, 3, 1])
    net.feed_forward([1.0, 0.0])
    net.back_propagation([0.5])
    initial_error = net.error
    for _ in range(400):
        net.feed_forward([1.0, 0.0])
        net.back_propagation([0.5])
    assert net.error < initial_error


def test_bias_outputs_survive_training():
    net = Net([2, 3, 1])
    for _ in range(10):
        net.feed_forward([0.3, 0.7])
        net.back_propagation([0.2])
    assert all(layer[-1].output_val == 1.0 for layer in net.layers)