"""Downsample a series using the Largest-Triangle-Three-Buckets algorithm.

The first and last points are always kept. The points in between are split
into ``threshold - 2`` buckets by index position, and from each bucket the
point forming the largest triangle with the previously selected point and the
average of the following bucket is kept.

Arithmetic is done in the number type of the input coordinates, so
``Decimal``, ``Fraction`` and NumPy floating scalars are supported alongside
``float``. Integer coordinates are computed as ``float``.

Reference
---------
Sveinn Steinarsson. 2013. Downsampling Time Series for Visual
Representation. MSc thesis. University of Iceland.
"""

from __future__ import annotations

import logging
import numbers
import time
from collections.abc import Callable, Iterable
from typing import Any

from tribucket.exceptions import ConversionError
from tribucket.lttb.validators import check_threshold
from tribucket.models import DataPoint, as_points

logger = logging.getLogger(__name__)

CONVERSION_ERROR_MESSAGE = "numeric conversion failed"


def _number_type(point: DataPoint) -> Callable[[Any], Any]:
    """Pick the type used for bucket ratios, means and areas."""
    if isinstance(point.x, (float, numbers.Integral)):
        return float
    return type(point.x)


def _bucket_ratio(kind: Callable[[Any], Any], n: int, threshold: int) -> Any:
    """Ideal number of points per bucket, leaving room for the two anchors."""
    try:
        return kind(n - 2) / kind(threshold - 2)
    except (ArithmeticError, ValueError) as e:
        raise ConversionError(CONVERSION_ERROR_MESSAGE) from e


def _to_index(value: Any) -> int:
    """Truncate a real bucket boundary to an index.

    Raises:
        ConversionError: If the value is NaN, infinite or negative
    """
    try:
        index = int(value)
    except (ArithmeticError, ValueError, TypeError) as e:
        raise ConversionError(CONVERSION_ERROR_MESSAGE) from e
    if index < 0:
        raise ConversionError(CONVERSION_ERROR_MESSAGE)
    return index


def _bucket_edges(kind: Callable[[Any], Any], every: Any, n: int, threshold: int) -> list[int]:
    """Compute the ``threshold`` bucket boundaries ``trunc(k * every) + 1``.

    Bucket ``i`` selects from ``[edges[i], edges[i + 1])`` and averages over
    ``[edges[i + 1], min(edges[i + 2], n))``.

    Raises:
        ConversionError: If a multiplier is not exact in ``kind``, a boundary
            is not a valid index, or the boundaries do not form non-empty
            buckets inside the series
    """
    edges = []
    for k in range(threshold):
        edges.append(_to_index(k * every) + 1)
        if kind(k) != k:
            # kind cannot count up to threshold - 1
            raise ConversionError(CONVERSION_ERROR_MESSAGE)

    # Rounded boundaries can collapse a bucket or run past the last point.
    if any(lo >= hi for lo, hi in zip(edges, edges[1:])) or edges[threshold - 2] >= n:
        raise ConversionError(CONVERSION_ERROR_MESSAGE)
    return edges


def downsample(series: Iterable[DataPoint | Iterable[Any]], threshold: int) -> list[DataPoint]:
    """Downsample ``series`` to ``threshold`` points using the LTTB algorithm.

    Parameters
    ----------
    series : iterable of DataPoint or (x, y) pairs
        Ordered samples. x is expected to be non-decreasing but is not checked;
        buckets are formed from index positions only.
    threshold : int
        Number of points to keep

    Returns
    -------
    list of DataPoint
        The input points unchanged when ``threshold`` is 0, 1 or at least the
        series length. ``[first, last]`` when ``threshold`` is 2. Otherwise
        exactly ``threshold`` points, first and last included, in input order.
        Plain (x, y) pairs come back as DataPoint on every path, including
        the unchanged one.

    Raises
    ------
    ConversionError
        If a bucket boundary cannot be represented as an index.
    TypeError, ValueError
        If ``threshold`` is not a non-negative integer or an item is not an
        (x, y) pair.
    """
    threshold = check_threshold(threshold)
    data = as_points(series)
    n = len(data)

    if threshold >= n or threshold < 2:
        # Nothing to do.
        return data

    if threshold == 2:
        return [data[0], data[-1]]

    start = time.time()

    kind = _number_type(data[0])
    every = _bucket_ratio(kind, n, threshold)
    edges = _bucket_edges(kind, every, n, threshold)
    half = kind(1) / kind(2)

    sampled = [data[0]]
    a = 0

    for i in range(threshold - 2):
        # Average of the next bucket, the third vertex of the triangle.
        avg_range_start = edges[i + 1]
        avg_range_end = min(edges[i + 2], n)

        avg_x = kind(0)
        avg_y = kind(0)
        for point in data[avg_range_start:avg_range_end]:
            avg_x = avg_x + point.x
            avg_y = avg_y + point.y
        avg_range_length = kind(avg_range_end - avg_range_start)
        avg_x = avg_x / avg_range_length
        avg_y = avg_y / avg_range_length

        range_offs = edges[i]
        range_to = edges[i + 1]

        point_a = data[a]
        max_area = kind(-1)
        next_a = range_offs
        for idx in range(range_offs, range_to):
            point = data[idx]
            area = abs((point_a.x - avg_x) * (point.y - point_a.y) - (point_a.x - point.x) * (avg_y - point_a.y)) * half
            if area > max_area:
                max_area = area
                next_a = idx

        sampled.append(data[next_a])
        a = next_a

    sampled.append(data[-1])

    logger.debug(f"[LTTB] {n} -> {len(sampled)} points: {(time.time() - start) * 1000:.1f}ms")
    return sampled
