"""Layer of neurons holding its activations, biases and the weights out to the next layer.
Keep track of the ability to run and train."""

import numpy as np

from chainnet import tensor


def sigmoid(x: tensor.Tensor | float) -> tensor.Tensor | float:
    """Logistic activation: 1 / (1 + e^-x)"""
    return 1 / (1 + np.exp(-x))


def sigmoid_prime_from_output(y: tensor.Tensor | float) -> tensor.Tensor | float:
    """Derivative of the sigmoid written in terms of its output y = sigmoid(x)"""
    return y * (1 - y)


class Layer():
    def __init__(self, in_size: int, out_size: int):
        """Create a new layer of in_size neurons feeding out_size neurons in the next layer

        Args:
            in_size (int): number of neurons in this layer
            out_size (int): number of neurons in the next layer (the tail repeats its own size)
        """
        if in_size < 1 or out_size < 1:
            raise ValueError(f'layer sizes must be positive, got ({in_size}, {out_size})')
        self.in_size = in_size
        self.out_size = out_size
        self.values = np.zeros(in_size)  # activations (raw input for the head)
        self.biases = np.zeros(in_size)  # used by the previous layer's forward
        self.weights = None  # out_size x in_size once initialized

    def __repr__(self) -> str:
        return f'Layer(in_size={self.in_size}, out_size={self.out_size})'

    def init_weights(self, rng: np.random.Generator):
        """Fill the weight matrix with samples from U[-1, 1]. Biases stay at zero."""
        self.weights = rng.uniform(-1, 1, size=(self.out_size, self.in_size))

    def _check_weights(self):
        if self.weights is None:
            raise tensor.UninitializedWeightsError(f'{self!r} has uninitialized weights')

    def forward(self, next_layer: 'Layer'):
        """Push this layer's values through the weights into next_layer.values

        next.values[i] = sigmoid(w[i] . values + next.biases[i])
        """
        self._check_weights()
        if self.out_size != next_layer.in_size:
            raise tensor.DimensionError(
                f'{self!r} cannot feed {next_layer!r}: {self.out_size} != {next_layer.in_size}')

        for i in range(self.out_size):
            d = tensor.dot(self.weights[i], self.values) + next_layer.biases[i]
            next_layer.values[i] = sigmoid(d)

    def backward(self, delta: tensor.Tensor, learning_rate: float = 0.1) -> tensor.Tensor:
        """Update the outgoing weights from the next layer's delta and return this layer's delta.

        delta holds dC/dz for each neuron of the next layer. For each weight row i
        and each neuron j of this layer:

        w[i][j] += lr * delta[i] * values[j]
        own_delta[j] = values[j] * (1 - values[j]) * w[i][j] * delta[i]

        own_delta is computed from the weight after its update and is overwritten
        for every row, so the row of the last next-layer neuron is what gets returned.
        """
        self._check_weights()
        delta = tensor.as_vector(delta)
        tensor.check_same_size(delta, self.weights, 'delta and weight rows')

        own_delta = np.zeros(self.in_size)
        for i, w in enumerate(self.weights):
            for j in range(len(w)):
                w[j] = w[j] + learning_rate * delta[i] * self.values[j]
                own_delta[j] = sigmoid_prime_from_output(self.values[j]) * w[j] * delta[i]

        return own_delta
