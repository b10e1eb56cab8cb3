# SPDX-License-Identifier: BSD-3-Clause
"""
amf-init: average initialization for alternating matrix factorization.

Starting factors W (n x r) and H (r x m) for V ~= W @ H are uniform noise in
[0, 1) shifted by ``sqrt((mean(V) - min(V)) / r)``.
"""

from ._exceptions import InvalidArgumentError, InvalidInputError, NumericDomainWarning
from ._initialization import (
    AverageInitialization,
    MatrixSummary,
    average_init,
    average_init_one,
    seed_value,
    summarize,
)
from ._utils import make_nonnegative_low_rank

__version__ = "0.1.0"

__all__ = [
    "AverageInitialization",
    "MatrixSummary",
    "average_init",
    "average_init_one",
    "seed_value",
    "summarize",
    "make_nonnegative_low_rank",
    "InvalidInputError",
    "InvalidArgumentError",
    "NumericDomainWarning",
]
