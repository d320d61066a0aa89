"""Per-tap combining operators plugged into the horizontal and vertical filters.

An operator receives an aligned pair of slices and one kernel value, and
accumulates the source slice into the destination slice in place. Slices of
different lengths are truncated to the shorter one.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

Operator = Callable[[np.ndarray, np.ndarray, Any], None]


def convolution_operator(src: np.ndarray, dst: np.ndarray, kernel: Any) -> None:
    """
    Convolution operator, computes ``dst[i] += kernel * src[i]`` for every ``i``.

    Example:
        >>> src = np.array([1, 2, 3])
        >>> dst = np.array([4, 5, 6])
        >>> convolution_operator(src, dst, 3)
        >>> dst.tolist()
        [7, 11, 15]
    """
    count = min(len(src), len(dst))
    dst[:count] = dst[:count] + kernel * src[:count]


def maximum_operator(src: np.ndarray, dst: np.ndarray, kernel: Any) -> None:
    """Dilation operator, ``dst[i] = max(dst[i], src[i])`` for non-zero taps."""
    if kernel == 0:
        return
    count = min(len(src), len(dst))
    dst[:count] = np.maximum(dst[:count], src[:count])


def minimum_operator(src: np.ndarray, dst: np.ndarray, kernel: Any) -> None:
    """Erosion operator, ``dst[i] = min(dst[i], src[i])`` for non-zero taps."""
    if kernel == 0:
        return
    count = min(len(src), len(dst))
    dst[:count] = np.minimum(dst[:count], src[:count])


def initial_value(operator: Operator, dtype: Any) -> Any:
    """
    Neutral starting pixel for accumulating with ``operator`` in ``dtype``.

    Zero for convolution (and any other operator), the lowest representable
    value for ``maximum_operator`` and the highest for ``minimum_operator``.

    Example:
        >>> initial_value(minimum_operator, np.uint8)
        255
    """
    dtype = np.dtype(dtype)
    if operator is maximum_operator:
        return _extreme(dtype, lowest=True)
    if operator is minimum_operator:
        return _extreme(dtype, lowest=False)
    return 0


def _extreme(dtype: np.dtype, lowest: bool) -> Any:
    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        return int(info.min if lowest else info.max)
    if dtype.kind == "b":
        return not lowest
    return -np.inf if lowest else np.inf
