"""Need a mechanism for feeding training examples to the network one at a time"""

import numpy as np

from chainnet import tensor

NOR_TABLE = (
    np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=np.float64),
    np.array([[1], [0], [0], [0]], dtype=np.float64),
)


def nor_gate(n: int, rng: np.random.Generator) -> tuple[tensor.Tensor, tensor.Tensor]:
    """Draw n random boolean pairs labelled with their NOR

    Args:
        n (int): number of examples
        rng (np.random.Generator): source of randomness

    Returns:
        tuple[tensor.Tensor, tensor.Tensor]: features shaped (n, 2), labels shaped (n, 1)
    """
    features = rng.integers(0, 2, size=(n, 2)).astype(np.float64)
    labels = (features.sum(axis=1, keepdims=True) == 0).astype(np.float64)
    return features, labels


class ExampleIterator():
    def __init__(self, shuffle: bool = False, rng: np.random.Generator | None = None):
        """Create a new iterator over single training examples

        Args:
            shuffle (bool, optional): visit the examples in a random order. Defaults to False.
            rng (np.random.Generator, optional): used when shuffling. Defaults to None.
        """
        self.shuffle = shuffle
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self, features: tensor.Tensor, labels: tensor.Tensor):
        tensor.check_same_size(features, labels, 'features and labels')
        order = np.arange(len(features))
        if self.shuffle:
            self.rng.shuffle(order)

        for k in order:
            yield (features[k], labels[k])
