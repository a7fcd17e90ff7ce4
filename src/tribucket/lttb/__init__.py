"""LTTB (Largest Triangle Three Buckets) downsampling implementation.

Two renditions share the same bucket arithmetic:

- ``downsample`` works on a sequence of points in any real number type
- ``downsample_array`` works on an ``(n, 2)`` NumPy array and can return the
  selected row indices
"""

from .array import downsample_array
from .lttb import downsample
from .validators import contains_no_nans, has_two_columns, x_is_strictly_increasing

__all__ = [
    "contains_no_nans",
    "downsample",
    "downsample_array",
    "has_two_columns",
    "x_is_strictly_increasing",
]
