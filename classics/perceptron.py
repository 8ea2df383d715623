"""A single-layer perceptron with a step activation."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass


def activate(total: float) -> int:
    """Step function: 1 for a non-negative sum, otherwise 0.

    A NaN sum cannot be classified and raises ``ValueError``.
    """
    if math.isnan(total):
        raise ValueError("cannot classify a NaN sum")
    if total >= 0:
        return 1
    return 0


@dataclass(frozen=True)
class TrainingResult:
    """Outcome of training: whether it converged and the errors per epoch."""

    converged: bool
    epochs: int
    errors: tuple[int, ...]


class Perceptron:
    """A perceptron with random initial weights and bias in ``[-1, 1]``."""

    def __init__(self, num_inputs: int, rng: random.Random | None = None) -> None:
        if num_inputs < 1:
            raise ValueError("a perceptron needs at least one input")
        rng = rng if rng is not None else random.Random()
        self.num_inputs = num_inputs
        self.weights = [rng.random() * 2 - 1 for _ in range(num_inputs)]
        self.bias = rng.random() * 2 - 1

    def predict(self, inputs: Sequence[float]) -> int:
        """Classify ``inputs`` as 0 or 1."""
        if len(inputs) != self.num_inputs:
            raise ValueError(f"expected {self.num_inputs} inputs, got {len(inputs)}")
        total = self.bias + sum(x * w for x, w in zip(inputs, self.weights))
        return activate(total)

    def train(
        self,
        samples: Sequence[Sequence[float]],
        expected: Sequence[int],
        learning_rate: float = 0.1,
        epochs: int = 100,
    ) -> TrainingResult:
        """Apply the perceptron rule until an epoch has no errors or ``epochs`` run out."""
        if len(samples) != len(expected):
            raise ValueError("samples and expected outputs differ in length")
        history: list[int] = []
        for _ in range(epochs):
            errors = 0
            for inputs, target in zip(samples, expected):
                error = target - self.predict(inputs)
                if error:
                    errors += 1
                    self.weights = [
                        w + learning_rate * error * x
                        for w, x in zip(self.weights, inputs)
                    ]
                    self.bias += learning_rate * error
            history.append(errors)
            if errors == 0:
                return TrainingResult(True, len(history), tuple(history))
        return TrainingResult(False, len(history), tuple(history))


def main(argv: Sequence[str] | None = None) -> int:
    """Train a perceptron on the AND gate and print the results."""
    del argv
    out = sys.stdout
    out.write("=== Perceptron Learning AND Gate ===\n\n")
    samples = [(0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)]
    expected = [0, 0, 0, 1]

    perceptron = Perceptron(2)
    out.write("Training perceptron...\n")
    result = perceptron.train(samples, expected, 0.1, 100)
    for epoch, errors in enumerate(result.errors):
        if epoch % 10 == 0:
            out.write(f"Epoch {epoch}: {errors} errors\n")
    if result.converged:
        out.write(f"Converged at epoch {result.epochs - 1}!\n")

    out.write("\nTesting:\n")
    for inputs, target in zip(samples, expected):
        got = perceptron.predict(inputs)
        mark = "✓" if got == target else "✗"
        out.write(
            f"{inputs[0]:.0f} AND {inputs[1]:.0f} = {got} (expected {target}) {mark}\n"
        )

    out.write("\nLearned weights:\n")
    for index, weight in enumerate(perceptron.weights):
        out.write(f"w{index} = {weight:.4f}\n")
    out.write(f"bias = {perceptron.bias:.4f}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())