# SPDX-License-Identifier: BSD-3-Clause
"""
Average initialization for alternating matrix factorization (V ~= W @ H).

W and H are filled with uniform noise in [0, 1) shifted by a single seed value
computed from V:

    seed = sqrt((mean(V) - min(V)) / rank)

The mean always divides by the full size ``n * m``. For sparse inputs the
minimum only sees explicitly stored elements, so implicit zeros lower the mean
but never the minimum. When the square-root argument is negative the seed is
clamped to 0 and a :class:`NumericDomainWarning` is emitted.
"""
from __future__ import annotations

import logging
import math
import numbers
import warnings
from typing import NamedTuple, Tuple, Union

import numpy as np
import scipy.sparse as sp
from sklearn.base import BaseEstimator
from sklearn.utils import check_array

from ._exceptions import InvalidArgumentError, InvalidInputError, NumericDomainWarning

__all__ = [
    "MatrixSummary", "summarize", "seed_value",
    "average_init", "average_init_one", "AverageInitialization",
]

logger = logging.getLogger(__name__)

Array = np.ndarray
RandomState = Union[None, int, np.random.Generator]


class MatrixSummary(NamedTuple):
    """Statistics of the stored elements of a matrix."""
    total: float
    minimum: float
    count: int
    n_rows: int
    n_cols: int


# -----------------------------
# Validation
# -----------------------------

def _check_matrix(V):
    try:
        X = check_array(V, accept_sparse="csr", dtype=np.float64,
                        ensure_min_samples=0, ensure_min_features=0)
    except ValueError as exc:
        raise InvalidInputError(f"Cannot initialize from this matrix: {exc}") from exc
    n, m = X.shape
    if n == 0 or m == 0:
        raise InvalidInputError(f"V must have at least one row and one column, got shape {X.shape}.")
    return X


def _check_rank(rank) -> int:
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise InvalidInputError(f"rank must be an integer >= 1, got {rank!r}.")
    if rank < 1:
        raise InvalidInputError(f"rank must be an integer >= 1, got {rank}.")
    return int(rank)


def _check_which(which) -> str:
    if isinstance(which, str) and which.upper() in ("W", "H"):
        return which.upper()
    raise InvalidArgumentError(
        f"Specify either 'W' or 'H' when initializing one of the W and H matrices, got {which!r}."
    )


# -----------------------------
# Statistics & seed
# -----------------------------

def _stored_values(X) -> Array:
    if sp.issparse(X):
        if not X.has_canonical_format:
            X = X.copy()
            X.sum_duplicates()
        return X.data
    return X.ravel()


def _summarize(X) -> MatrixSummary:
    values = _stored_values(X)
    if values.size:
        total = float(np.sum(values))
        minimum = float(np.min(values))
    else:
        # an all-implicit sparse matrix: nothing replaces the starting minimum
        total = 0.0
        minimum = float(np.finfo(np.float64).max)
    n, m = X.shape
    return MatrixSummary(total, minimum, int(values.size), int(n), int(m))


def summarize(V) -> MatrixSummary:
    """
    Sum, minimum and count over the stored elements of V.

    Dense inputs visit every entry; sparse inputs visit only the explicitly
    stored ones (duplicates are summed first).
    """
    return _summarize(_check_matrix(V))


def _seed_from_summary(summary: MatrixSummary, rank: int) -> float:
    mean = summary.total / (summary.n_rows * summary.n_cols)
    arg = (mean - summary.minimum) / rank
    if arg < 0.0:
        warnings.warn(
            f"(mean - min) / rank = {arg:.6g} is negative (mean={mean:.6g}, "
            f"min={summary.minimum:.6g}, rank={rank}); using a seed value of 0.",
            NumericDomainWarning,
            stacklevel=3,
        )
        arg = 0.0
    seed = math.sqrt(arg)
    logger.debug("summary=%s rank=%d mean=%.6g seed=%.6g", summary, rank, mean, seed)
    return seed


def seed_value(V, rank: int) -> float:
    """Return ``sqrt(max(0, (mean(V) - min(V)) / rank))`` for V."""
    X = _check_matrix(V)
    return _seed_from_summary(_summarize(X), _check_rank(rank))


def _shifted_uniform(rng: np.random.Generator, shape: Tuple[int, int], seed: float) -> Array:
    M = rng.random(shape)
    M += seed
    return M


# -----------------------------
# Public initializers
# -----------------------------

def average_init(V, rank: int, *, random_state: RandomState = None) -> Tuple[Array, Array]:
    """
    Initialize W and H to the seed value of V plus uniform noise.

    Parameters
    ----------
    V : array-like or sparse matrix, shape (n, m)
        Matrix to be factorized. Not modified.
    rank : int
        Factorization rank r (>= 1).
    random_state : int, numpy.random.Generator or None
        Source of the uniform noise. W is drawn before H.

    Returns
    -------
    W : ndarray, shape (n, rank)
    H : ndarray, shape (rank, m)
        Every entry lies in ``[seed, seed + 1)``.

    Raises
    ------
    InvalidInputError
        If V has a zero dimension or invalid entries, or rank < 1.
    """
    X = _check_matrix(V)
    r = _check_rank(rank)
    seed = _seed_from_summary(_summarize(X), r)
    n, m = X.shape

    rng = np.random.default_rng(random_state)
    W = _shifted_uniform(rng, (n, r), seed)
    H = _shifted_uniform(rng, (r, m), seed)
    return W, H


def average_init_one(V, rank: int, which: str, *, random_state: RandomState = None) -> Array:
    """
    Initialize only W (``which="W"``, shape (n, rank)) or only H
    (``which="H"``, shape (rank, m)); ``which`` is case-insensitive.

    Raises :class:`InvalidArgumentError` for any other ``which``.
    """
    target = _check_which(which)
    X = _check_matrix(V)
    r = _check_rank(rank)
    seed = _seed_from_summary(_summarize(X), r)
    n, m = X.shape

    shape = (n, r) if target == "W" else (r, m)
    return _shifted_uniform(np.random.default_rng(random_state), shape, seed)


class AverageInitialization(BaseEstimator):
    """
    Average initialization rule for alternating matrix factorization.

    Parameters
    ----------
    random_state : int, numpy.random.Generator or None, default=None
        An int gives the same draws on every call; a Generator is advanced by
        each call.

    The object keeps no state between calls and can be reused across inputs
    of different shapes and ranks.
    """

    def __init__(self, random_state: RandomState = None):
        self.random_state = random_state

    def seed_value(self, V, rank: int) -> float:
        return seed_value(V, rank)

    def initialize(self, V, rank: int) -> Tuple[Array, Array]:
        return average_init(V, rank, random_state=self.random_state)

    def initialize_one(self, V, rank: int, which: str) -> Array:
        return average_init_one(V, rank, which, random_state=self.random_state)
