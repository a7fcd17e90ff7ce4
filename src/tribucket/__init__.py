"""
tribucket - Shape-preserving downsampling of 2-D time series.

This module provides the Largest-Triangle-Three-Buckets (LTTB) algorithm over
point sequences, NumPy arrays and Polars DataFrames.

Examples:
    >>> from tribucket import DataPoint, downsample
    >>> raw = [DataPoint(0.0, 10.0), DataPoint(1.0, 12.0), DataPoint(2.0, 8.0), DataPoint(3.0, 10.0), DataPoint(4.0, 12.0)]
    >>> downsample(raw, 3)
    [DataPoint(x=0.0, y=10.0), DataPoint(x=2.0, y=8.0), DataPoint(x=4.0, y=12.0)]
"""

from tribucket.config import get_settings
from tribucket.exceptions import ConversionError, SeriesTooLongError
from tribucket.frame import downsample_frame
from tribucket.logger import setup_logger
from tribucket.lttb import downsample, downsample_array
from tribucket.models import DataPoint, as_points

__version__ = "0.1.0"
__all__ = [
    "ConversionError",
    "DataPoint",
    "SeriesTooLongError",
    "as_points",
    "downsample",
    "downsample_array",
    "downsample_frame",
    "get_settings",
    "setup_logger",
]
