import numpy as np
import scipy.sparse as sp


def make_nonnegative_low_rank(n_rows=100, n_cols=50, rank=5, *, density=1.0,
                              noise=0.0, sparse_format=None, random_state=None):
    """
    Generate a non-negative matrix with a known low-rank factorization.

    Parameters
    ----------
    n_rows, n_cols : int
        Shape of the generated matrix.
    rank : int
        Inner dimension of the true factors.
    density : float
        Fraction of entries kept; the rest are set to zero.
    noise : float
        Scale of the non-negative uniform noise added to ``W_true @ H_true``.
    sparse_format : {"csr", "csc", "coo"} or None
        Return a scipy sparse matrix in this format instead of an ndarray.
    random_state : int, Generator or None
        Random seed

    Returns
    -------
    V : ndarray or sparse matrix, shape (n_rows, n_cols)
    W_true : ndarray, shape (n_rows, rank)
    H_true : ndarray, shape (rank, n_cols)
    """
    if n_rows < 1 or n_cols < 1 or rank < 1:
        raise ValueError(f"n_rows, n_cols and rank must be >= 1, got {(n_rows, n_cols, rank)}")
    if not 0.0 < density <= 1.0:
        raise ValueError(f"density must be in (0, 1], got {density}")
    if noise < 0:
        raise ValueError(f"noise must be >= 0, got {noise}")

    rng = np.random.default_rng(random_state)
    W_true = rng.uniform(0.1, 1.0, size=(n_rows, rank))
    H_true = rng.uniform(0.1, 1.0, size=(rank, n_cols))
    V = W_true @ H_true
    if noise:
        V += noise * rng.random(V.shape)
    if density < 1.0:
        V *= rng.random(V.shape) < density

    if sparse_format is not None:
        V = sp.csr_matrix(V).asformat(sparse_format)
    return V, W_true, H_true
