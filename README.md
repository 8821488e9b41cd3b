# tinynet

A small, dependency-free, fully connected feed-forward neural network in plain
Python. Neurons use a `tanh` activation, weights start from a random value in
`[0, sqrt(1 / fan_out))`, and training is per-sample backpropagation with a
learning rate of 0.01 and momentum of 0.05. Every layer carries a bias neuron
whose output is fixed at 1.0.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tinynet
```

With no options this builds a network with topology `10,32,8,1`, generates a
reproducible training set of 1000 samples and a test set of 100 samples,
trains for 12000 epochs (printing the average loss every 1000 epochs), and
then prints the accuracy and average loss on the test set.

Options:

- `--topology` – comma separated layer sizes, at least two, all positive; the
  first must be 10 to match the dataset (default `10,32,8,1`)
- `--train-size` – number of training samples, positive (default 1000)
- `--test-size` – number of test samples, positive (default 100)
- `--epochs` – number of training passes, zero or more (default 12000)

Each sample has ten random inputs in `[0, 1)`; its target is `1.0` when the
inputs sum to more than 5 and `0.0` otherwise. The training set is drawn with
seed 42 and the test set with seed 84, so every run sees the same data. A
network built without an explicit random generator is seeded with 42 as well,
so runs are fully reproducible.

## Library use

```python
import random

from tinynet.net import Net
from tinynet.dataset import generate_training_set, generate_test_set
from tinynet.cli import train, evaluate

net = Net([10, 32, 8, 1], random.Random(42))

train_inputs, train_targets = generate_training_set(200)
test_inputs, test_targets = generate_test_set(50)

losses = train(net, train_inputs, train_targets, epochs=100)
result = evaluate(net, test_inputs, test_targets)
print(losses[-1], result.accuracy, result.average_loss)
```

`train` returns the average squared loss of every epoch and writes a progress
line to `out` (standard output by default) every 1000 epochs. `evaluate`
thresholds the first output at 0.5 and returns an `EvaluationResult` with
`accuracy` (percent), `average_loss`, `correct` and `total`. Both raise
`ValueError` when inputs and targets differ in length or the dataset is empty.
`has_overlap(training_inputs, test_inputs)` tells whether any input vector
appears in both sets.

Working with a network directly:

```python
net.feed_forward([0.1] * 10)
net.back_propagation([1.0])
print(net.results())
print(net.recent_average_error)
```

`feed_forward` needs exactly as many values as the input layer has neurons
(bias excluded), and `back_propagation` exactly as many targets as the output
layer has; both raise `ValueError` otherwise. `recent_average_error` is a
property holding a smoothed running average of the RMS error. `Net` raises
`ValueError` for a topology with fewer than two layers or a layer of size zero.

The building blocks live in `tinynet.neuron` (`Neuron`, `Connection`,
`activation`, `activation_prime`), `tinynet.net` (`Net`),
`tinynet.dataset` (`generate_complex_sample`, `generate_training_set`,
`generate_test_set`) and `tinynet.cli` (`train`, `evaluate`,
`EvaluationResult`, `has_overlap`, `main`).

## Limitations

- Trained weights cannot be saved or loaded; a network lives only in memory.
- The command line only trains and tests on the built-in synthetic dataset; it
  does not read data files or make predictions on new inputs.
- The activation (`tanh`), learning rate and momentum are fixed class-level
  settings rather than command-line options.