import numpy as np
import pytest

from chainnet.tensor import DimensionError, as_vector, check_same_size, dot


def test_dot_matches_numpy() -> None:
    assert dot(np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0])) == pytest.approx(32.0)


def test_dot_raises_on_unequal_lengths() -> None:
    with pytest.raises(DimensionError, match="3 != 2"):
        dot(np.array([1.0, 2.0, 3.0]), np.array([1.0, 2.0]))


def test_dimension_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        check_same_size([1, 2], [1])


def test_as_vector_flattens_to_float() -> None:
    v = as_vector([[1, 0]])
    assert v.shape == (2,)
    assert v.dtype == np.float64
