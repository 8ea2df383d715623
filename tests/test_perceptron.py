import random

import pytest

from classics.perceptron import Perceptron, activate

INPUTS = [(0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)]
AND = [0, 0, 0, 1]
OR = [0, 1, 1, 1]
XOR = [0, 1, 1, 0]


def test_activate_step():
    assert activate(0.0) == 1
    assert activate(2.5) == 1
    assert activate(-0.1) == 0


def test_initial_weights_in_range():
    p = Perceptron(5, random.Random(3))
    assert len(p.weights) == 5
    assert all(-1.0 <= w <= 1.0 for w in p.weights)
    assert -1.0 <= p.bias <= 1.0


def test_same_seed_same_weights():
    a = Perceptron(3, random.Random(42))
    b = Perceptron(3, random.Random(42))
    assert a.weights == b.weights
    assert a.bias == b.bias


def test_predict_with_fixed_weights_computes_and():
    p = Perceptron(2, random.Random(0))
    p.weights = [1.0, 1.0]
    p.bias = -1.5
    assert [p.predict(x) for x in INPUTS] == AND


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("targets", [AND, OR])
def test_learns_separable_gates(seed, targets):
    p = Perceptron(2, random.Random(seed))
    result = p.train(INPUTS, targets, 0.1, 100)
    assert result.converged
    assert result.errors[-1] == 0
    assert result.epochs == len(result.errors) <= 100
    assert [p.predict(x) for x in INPUTS] == targets


def test_xor_never_converges():
    p = Perceptron(2, random.Random(1))
    result = p.train(INPUTS, XOR, 0.1, 100)
    assert not result.converged
    assert result.epochs == 100
    assert all(errors > 0 for errors in result.errors)


def test_wrong_input_length():
    p = Perceptron(2, random.Random(0))
    with pytest.raises(ValueError):
        p.predict([1.0])


def test_mismatched_training_data():
    p = Perceptron(2, random.Random(0))
    with pytest.raises(ValueError):
        p.train(INPUTS, [0, 1], 0.1, 10)


def test_zero_inputs_rejected():
    with pytest.raises(ValueError):
        Perceptron(0)