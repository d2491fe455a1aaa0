"""Train a chain network one example at a time, plus a NOR gate demo"""

import argparse
import logging
import sys

import numpy as np

from chainnet import data, loss, network, tensor

logger = logging.getLogger(__name__)


def train_step(nn: network.Network, features: tensor.Tensor, labels: tensor.Tensor,
               loss: loss.Loss = loss.SquaredError()) -> float:
    """One stochastic gradient step on a single example; returns the loss before the update"""
    nn.forward(features)
    step_loss = loss.loss(nn.tail.values, tensor.as_vector(labels))
    nn.backward(labels)
    return step_loss


def train(nn: network.Network,
          features: tensor.Tensor,
          labels: tensor.Tensor,
          epochs: int = 1,
          iterator: data.ExampleIterator = data.ExampleIterator(),
          loss: loss.Loss = loss.SquaredError(),
          log_every: int = 0) -> list[float]:
    """Train the network, visiting every example once per epoch

    Args:
        nn (network.Network): initialized network to train in place
        features (tensor.Tensor): one input vector per row
        labels (tensor.Tensor): one label vector per row
        epochs (int, optional): passes over the data. Defaults to 1.
        iterator (data.ExampleIterator, optional): example ordering. Defaults to data.ExampleIterator().
        loss (loss.Loss, optional): used for reporting only. Defaults to loss.SquaredError().
        log_every (int, optional): log at INFO every this many epochs, 0 for never. Defaults to 0.

    Returns:
        list[float]: mean loss of each epoch
    """
    history = []
    for e in range(epochs):
        epoch_loss = 0.0
        count = 0
        for x, y in iterator(features, labels):
            epoch_loss += train_step(nn, x, y, loss)
            count += 1
        mean_loss = epoch_loss / max(count, 1)
        history.append(mean_loss)
        logger.debug('Epoch %d has loss %f', e, mean_loss)
        if log_every and (e + 1) % log_every == 0:
            logger.info('Epoch %d has loss %f', e, mean_loss)
    return history


def predict(nn: network.Network, features: tensor.Tensor) -> tensor.Tensor:
    """Run a forward pass and return a copy of the output"""
    nn.forward(features)
    return nn.output()


def read_pair(line: str, parser: argparse.ArgumentParser) -> tuple[int, int]:
    """Parse two whitespace separated integers, exiting through the parser on bad input"""
    tokens = line.split()
    if len(tokens) != 2:
        parser.error(f'expected two integers, got {line.strip()!r}')
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError:
        parser.error(f'expected two integers, got {line.strip()!r}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Train a [2, 4, 1] sigmoid network on the NOR gate.')
    parser.add_argument('--steps', type=int, default=100000, help='number of training examples')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--learning-rate', type=float, default=0.1)
    parser.add_argument('--samples', type=int, default=20, help='random pairs to show after training')
    parser.add_argument('--interactive', action='store_true', help='read one pair from stdin and predict it')
    parser.add_argument('--verbose', action='store_true')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    rng = np.random.default_rng(args.seed)
    nn = network.Network.from_sizes([(2, 4), (4, 1), (1, 1)], learning_rate=args.learning_rate)
    nn.init(rng)

    features, labels = data.nor_gate(args.steps, rng)

    print('Training...')
    history = train(nn, features, labels)
    logger.info('Trained on %d examples, mean loss %f', args.steps, history[-1])

    print('Results!')
    sample_features, _ = data.nor_gate(args.samples, rng)
    for a, b in sample_features.astype(int):
        print(f'{a} NOR {b} = {predict(nn, [a, b])[0]:f}')

    if args.interactive:
        print('Try it yourself!')
        a, b = read_pair(sys.stdin.readline(), parser)
        print(f'{a} NOR {b} = {predict(nn, [a, b])[0]:f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
