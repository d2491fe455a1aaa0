"""A tensor is just a numpy array. Helpers here check sizes before combining two of them."""

from typing import Sequence

import numpy as np

Tensor = np.ndarray


class DimensionError(ValueError):
    """Two vectors that get combined have different lengths"""


class UninitializedWeightsError(RuntimeError):
    """A layer was asked to propagate before its weights were initialized"""


def as_vector(x: Sequence[float] | Tensor) -> Tensor:
    """Turn a list (or array) of numbers into a flat float vector"""
    return np.asarray(x, dtype=np.float64).reshape(-1)


def check_same_size(a: Tensor, b: Tensor, what: str = 'vectors'):
    """Raise DimensionError unless a and b hold the same number of entries

    Args:
        a (Tensor): first operand
        b (Tensor): second operand
        what (str, optional): name used in the error message. Defaults to 'vectors'.
    """
    if len(a) != len(b):
        raise DimensionError(f'{what} have different sizes: {len(a)} != {len(b)}')


def dot(a: Tensor, b: Tensor) -> float:
    """Inner product of two equal length vectors"""
    check_same_size(a, b)
    return float(np.dot(a, b))
