"""A small feed-forward neural network trained by backpropagation, with a synthetic dataset and a training command."""

__version__ = "0.1.0"