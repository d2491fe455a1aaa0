"""Squared error cost for a sigmoid output layer, and the delta that starts the backward pass."""

import numpy as np

from chainnet import layer, tensor


class Loss():
    def loss(self, predictions: tensor.Tensor, labels: tensor.Tensor) -> float:
        """Cost of one example

        Returns:
            float: non-negative cost, zero when predictions equal labels
        """
        raise NotImplementedError

    def delta(self, predictions: tensor.Tensor, labels: tensor.Tensor) -> tensor.Tensor:
        """dC/dz for each output neuron, pointing in the direction that reduces the loss"""
        raise NotImplementedError


class SquaredError(Loss):
    def loss(self, predictions: tensor.Tensor, labels: tensor.Tensor) -> float:
        """sum((labels - y)^2) over the output neurons"""
        tensor.check_same_size(predictions, labels, 'predictions and labels')
        return float(np.sum((labels - predictions)**2))

    def delta(self, predictions: tensor.Tensor, labels: tensor.Tensor) -> tensor.Tensor:
        # sigmoid output, the factor of 2 is folded into the learning rate
        tensor.check_same_size(predictions, labels, 'predictions and labels')
        return layer.sigmoid_prime_from_output(predictions) * (labels - predictions)
