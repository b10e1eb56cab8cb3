# amf_init/_exceptions.py
"""Errors and warnings raised by the initializers."""


class InvalidInputError(ValueError):
    """The input matrix or the rank cannot produce a seed value.

    Raised for matrices with a zero dimension, non-finite or non-numeric
    entries, and for ranks that are not integers >= 1.
    """


class InvalidArgumentError(ValueError):
    """``which`` names neither the W nor the H factor."""


class NumericDomainWarning(RuntimeWarning):
    """``(mean - min) / rank`` was negative; the seed value was clamped to 0."""
