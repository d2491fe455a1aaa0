"""A network is a chain of layers; values run forward from the head to the tail
and the error runs back from the tail to the head."""

import logging
from typing import Iterable, Sequence

import numpy as np

from chainnet import layer, loss, tensor

logger = logging.getLogger(__name__)


class Network():
    def __init__(self, layers: Iterable[layer.Layer] | None = None, learning_rate: float = 0.1):
        """Create a network, optionally from an ordered set of layers

        Args:
            layers (Iterable[layer.Layer], optional): layers from head to tail. Defaults to None.
            learning_rate (float, optional): step size for the weight updates. Defaults to 0.1.
        """
        self.layers: list[layer.Layer] = []
        self.learning_rate = learning_rate
        self.loss = loss.SquaredError()  # supplies the output delta
        for lay in layers or []:
            self.add(lay)

    @classmethod
    def from_sizes(cls, sizes: Sequence[tuple[int, int]], learning_rate: float = 0.1) -> 'Network':
        """Build a network from (in_size, out_size) pairs, head first"""
        return cls([layer.Layer(in_size, out_size) for in_size, out_size in sizes], learning_rate)

    def __len__(self) -> int:
        return len(self.layers)

    def empty(self) -> bool:
        return len(self.layers) == 0

    @property
    def head(self) -> layer.Layer | None:
        return None if self.empty() else self.layers[0]

    @property
    def tail(self) -> layer.Layer | None:
        return None if self.empty() else self.layers[-1]

    def add(self, new_layer: layer.Layer):
        """Append a layer after the current tail"""
        if any(new_layer is lay for lay in self.layers):
            raise ValueError(f'{new_layer!r} is already in the network')
        if self.tail is not None and self.tail.out_size != new_layer.in_size:
            raise tensor.DimensionError(
                f'{self.tail!r} cannot feed {new_layer!r}: {self.tail.out_size} != {new_layer.in_size}')
        self.layers.append(new_layer)
        logger.debug('Added %r at position %d', new_layer, len(self.layers) - 1)

    def init(self, rng: np.random.Generator | None = None):
        """Initialize the weights of every layer that has a successor"""
        if rng is None:
            rng = np.random.default_rng()
        for lay in self.layers[:-1]:
            lay.init_weights(rng)
        logger.debug('Initialized weights for %d layers', max(len(self.layers) - 1, 0))

    def set_input(self, features: Sequence[float] | tensor.Tensor):
        """Copy an input vector into the head layer"""
        features = tensor.as_vector(features)
        if self.empty():
            raise tensor.DimensionError(f'cannot load {len(features)} inputs into an empty network')
        tensor.check_same_size(features, self.head.values, 'input and head layer')
        self.head.values[:] = features

    def forward(self, features: Sequence[float] | tensor.Tensor | None = None):
        """Forward pass through the whole network, optionally loading new input first"""
        if self.empty():
            return
        if features is not None:
            self.set_input(features)
        for k in range(len(self.layers) - 1):
            self.layers[k].forward(self.layers[k + 1])

    def backward(self, labels: Sequence[float] | tensor.Tensor):
        """Backward pass from the labels for the current output, updating weights along the way"""
        if self.empty():
            return
        delta = self.loss.delta(self.tail.values, tensor.as_vector(labels))
        for k in range(len(self.layers) - 2, -1, -1):
            delta = self.layers[k].backward(delta, self.learning_rate)

    def output(self) -> tensor.Tensor:
        """Copy of the tail layer's values after the latest forward pass, empty for an empty network"""
        if self.empty():
            return np.zeros(0)
        return self.tail.values.copy()
