import numpy as np
import pytest
import scipy.sparse as sp


def rng(seed=0):
    return np.random.default_rng(seed)


@pytest.fixture
def small_dense():
    """The 2x2 example: mean 3, min 0, so rank 2 gives a seed of sqrt(1.5)."""
    return np.array([[0.0, 2.0], [4.0, 6.0]])


@pytest.fixture
def single_stored_sparse():
    """3x3 sparse matrix with a single stored value 5 in the centre."""
    return sp.csr_matrix(([5.0], ([1], [1])), shape=(3, 3))


@pytest.fixture(scope="session")
def ratings_like():
    """
    A 40x25 non-negative matrix with ~30% stored entries, in both dense and
    CSR form. Values are in [1, 5] so the sparse minimum is never zero.
    """
    r = rng(7)
    X = r.integers(1, 6, size=(40, 25)).astype(float)
    X *= r.random(X.shape) < 0.3
    return X, sp.csr_matrix(X)
