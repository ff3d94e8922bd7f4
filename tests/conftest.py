import numpy as np
import pytest

from mnds import DynMatrix, IntRing, Matrix


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_rows(rng):
    def make(n, m, low=-9, high=10):
        return rng.integers(low, high, size=(n, m)).tolist()
    return make


@pytest.fixture
def fib():
    return Matrix[IntRing, 2].from_rows([[1, 1], [1, 0]])


@pytest.fixture
def dyn_fib():
    return DynMatrix[IntRing].from_rows([[1, 1], [1, 0]])
