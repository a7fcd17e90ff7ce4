"""NumPy rendition of LTTB for ``(n, 2)`` arrays.

Bucket boundaries follow :func:`tribucket.lttb.lttb.downsample` exactly:
``trunc(k * every) + 1`` with ``every = (n - 2) / (n_out - 2)`` computed in
the array's floating dtype. Only the area evaluation inside each bucket is
vectorized; the previously selected point feeds the next bucket, so the loop
over buckets stays.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

import numpy as np

from tribucket.exceptions import ConversionError
from tribucket.lttb.lttb import CONVERSION_ERROR_MESSAGE
from tribucket.lttb.validators import check_threshold, has_two_columns, validate

logger = logging.getLogger(__name__)

default_validators: list[Callable[[np.ndarray], None]] = [has_two_columns]

_MAX_INDEX = float(np.iinfo(np.int64).max)


def _areas_of_triangles(a, bs, c):
    """Calculate areas of triangles from duples of vertex coordinates.

    Uses implicit numpy broadcasting along first axis of ``bs``.

    Note: Returns 2x the actual area since only relative magnitudes matter
    for picking the largest one.

    Returns
    -------
    numpy.array
        Array of area measures of shape (len(bs),)
    """
    return np.abs((a[0] - c[0]) * (bs[:, 1] - a[1]) - (a[0] - bs[:, 0]) * (c[1] - a[1]))


def _bucket_edges(n, n_out, dtype):
    """Compute the ``n_out`` bucket boundaries ``trunc(k * every) + 1``.

    Raises
    ------
    ConversionError
        If any boundary is not a finite, non-negative, representable index,
        or the boundaries do not form non-empty buckets inside the series.
    """
    multipliers = np.arange(n_out, dtype=dtype)
    if np.any(multipliers != np.arange(n_out)):
        # dtype cannot count up to n_out - 1
        raise ConversionError(CONVERSION_ERROR_MESSAGE)

    try:
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            every = dtype.type(n - 2) / dtype.type(n_out - 2)
            raw = multipliers * every
    except (ArithmeticError, ValueError) as e:
        raise ConversionError(CONVERSION_ERROR_MESSAGE) from e

    if not np.all(np.isfinite(raw)):
        raise ConversionError(CONVERSION_ERROR_MESSAGE)

    # Widening is exact, so truncating afterwards matches truncating in dtype.
    raw = raw.astype(np.float64)
    if np.any(raw < 0) or np.any(raw >= _MAX_INDEX):
        raise ConversionError(CONVERSION_ERROR_MESSAGE)

    edges = raw.astype(np.int64) + 1

    # Rounded boundaries can collapse a bucket or run past the last point.
    if np.any(np.diff(edges) <= 0) or edges[n_out - 2] >= n:
        raise ConversionError(CONVERSION_ERROR_MESSAGE)

    return edges


def downsample_array(data, n_out, validators: Sequence[Callable[[np.ndarray], None]] = default_validators, return_indices=False):
    """Downsample ``data`` to ``n_out`` rows using the LTTB algorithm.

    Parameters
    ----------
    data : array_like
        A 2-dimensional array with x values in the first column
    n_out : int
        Number of rows to downsample to
    validators : sequence of callables, optional
        Validation functions that take an array as argument and
        raise ``ValueError`` if the array fails some criterion
    return_indices : bool, optional
        If True, also return the indices of selected rows in ``data``

    Returns
    -------
    numpy.array or tuple
        ``data`` itself when ``n_out`` is 0, 1 or at least the number of rows.
        Otherwise the selected rows of ``data``, shape (n_out, 2), in the
        dtype of ``data``. When ``return_indices`` is True, a tuple of
        (array, indices array).

    Raises
    ------
    ValueError
        If ``data`` fails the validation checks or ``n_out`` is negative.
    ConversionError
        If a bucket boundary cannot be represented as an index.
    """
    n_out = check_threshold(n_out)
    data = np.asarray(data)

    if data.ndim > 0 and data.shape[0] == 0:
        if return_indices:
            return data, np.arange(0)
        return data

    validate(data, validators)
    n = data.shape[0]

    if n_out >= n or n_out < 2:
        # Nothing to do.
        if return_indices:
            return data, np.arange(n)
        return data

    start = time.time()

    values = data if np.issubdtype(data.dtype, np.floating) else data.astype(np.float64)

    indices = np.zeros(n_out, dtype=np.int64)
    indices[-1] = n - 1

    if n_out > 2:
        edges = _bucket_edges(n, n_out, values.dtype)
        n_bins = n_out - 2
        a = 0

        for i in range(n_bins):
            c = values[edges[i + 1] : min(edges[i + 2], n)].mean(axis=0)
            bs = values[edges[i] : edges[i + 1]]

            areas = _areas_of_triangles(values[a], bs, c)
            # NaN areas never win; an all-NaN bucket keeps its first point.
            areas = np.where(np.isnan(areas), -1, areas)

            a = int(edges[i] + np.argmax(areas))
            indices[i + 1] = a

    out = data[indices]

    logger.debug(f"[LTTB] {n} -> {n_out} rows: {(time.time() - start) * 1000:.1f}ms")

    if return_indices:
        return out, indices
    return out
