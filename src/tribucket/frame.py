"""
DataFrame downsampling utilities.

This module applies LTTB to a pair of columns of a Polars DataFrame and keeps
the selected rows whole, so any other columns (timestamps, labels) travel
along with the chosen points.
"""

from __future__ import annotations

import logging
import time

import polars as pl

from tribucket.config import get_settings
from tribucket.exceptions import SeriesTooLongError
from tribucket.lttb import downsample_array

logger = logging.getLogger(__name__)


def _x_expr(df: pl.DataFrame, x: str) -> pl.Expr:
    """Numeric expression for the x column; dates become epoch milliseconds."""
    dtype = df.schema[x]
    if dtype == pl.Datetime or dtype == pl.Date:
        return pl.col(x).dt.epoch(time_unit="ms").cast(pl.Float64)
    return pl.col(x).cast(pl.Float64)


def downsample_frame(df: pl.DataFrame, x: str, y: str, threshold: int | None = None) -> pl.DataFrame:
    """Downsample a DataFrame to ``threshold`` rows by its ``x`` and ``y`` columns.

    Rows with a null in ``x`` or ``y`` are dropped first. The remaining rows
    are expected to be ordered by ``x``.

    Args:
        df: Source DataFrame
        x: Name of the x column (numeric, Date or Datetime)
        y: Name of the y column (numeric)
        threshold: Number of rows to keep. Defaults to the configured threshold.

    Returns:
        The selected rows in their original order, with all columns.
        The null-dropped frame itself when no downsampling is needed.

    Raises:
        ValueError: If ``x`` or ``y`` is not a column of ``df``
        SeriesTooLongError: If the frame exceeds the configured maximum length
        ConversionError: If a bucket boundary cannot be represented as an index
    """
    settings = get_settings()
    if threshold is None:
        threshold = settings.threshold

    for column in (x, y):
        if column not in df.columns:
            raise ValueError(f"Column not found: {column}")

    series = df.drop_nulls(subset=[x, y])
    dropped = len(df) - len(series)
    if dropped:
        logger.warning(f"Dropped {dropped} rows with null values in {x!r} or {y!r}")

    if len(series) > settings.max_series_length:
        raise SeriesTooLongError(f"Series has {len(series)} rows, maximum is {settings.max_series_length}")

    logger.debug(f"[LTTB] Downsampling frame: {len(series)} rows -> {threshold}")
    start = time.time()

    t1 = time.time()
    values = series.select(_x_expr(series, x), pl.col(y).cast(pl.Float64)).to_numpy()
    t2 = time.time()
    logger.debug(f"  to_numpy: {(t2 - t1) * 1000:.1f}ms")

    _, indices = downsample_array(values, threshold, return_indices=True)
    if len(indices) == len(series):
        return series

    t1 = time.time()
    selected = series[indices]
    t2 = time.time()
    logger.debug(f"  extract by indices: {(t2 - t1) * 1000:.1f}ms")

    logger.debug(f"[LTTB] TOTAL: {(time.time() - start) * 1000:.1f}ms -> {len(selected)} rows")
    return selected
