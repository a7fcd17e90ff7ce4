"""Input validators for the LTTB entry points.

The array validators take a NumPy array and raise ``ValueError`` when it
fails a criterion. Only the shape check runs by default; the others are
opt-in because the algorithm itself never looks at x values.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Iterable

import numpy as np

__all__ = [
    "check_threshold",
    "contains_no_nans",
    "has_two_columns",
    "validate",
    "x_is_strictly_increasing",
]


def check_threshold(threshold: int) -> int:
    """Validate a requested output size.

    Args:
        threshold: Requested number of output points

    Returns:
        The threshold as a plain ``int``

    Raises:
        TypeError: If threshold is not an integer (booleans are rejected)
        ValueError: If threshold is negative
    """
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Integral):
        raise TypeError(f"threshold must be an integer, got {type(threshold).__name__}")
    if threshold < 0:
        raise ValueError("threshold must be >= 0")
    return int(threshold)


def has_two_columns(data: np.ndarray) -> None:
    if data.ndim != 2:
        raise ValueError("data is not a 2D array")
    if data.shape[1] != 2:
        raise ValueError("data does not have 2 columns")


def contains_no_nans(data: np.ndarray) -> None:
    if np.isnan(data).any():
        raise ValueError("data contains NaN values")


def x_is_strictly_increasing(data: np.ndarray) -> None:
    if np.any(np.diff(data[:, 0]) <= 0):
        raise ValueError("first column is not strictly increasing")


def validate(data: np.ndarray, validators: Iterable[Callable[[np.ndarray], None]]) -> None:
    """Apply each validator to ``data``, stopping at the first failure."""
    for validator in validators:
        validator(data)
