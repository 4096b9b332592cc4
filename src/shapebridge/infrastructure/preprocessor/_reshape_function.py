"""
Reshape primitives shared by input preprocessors.

Every preprocessor in shapebridge boils down to the same two steps:

1. make sure the tensor is laid out in row-major (C) order, copying only
   when it is not already, and
2. reinterpret its shape with a row-major `reshape`, which never moves data.

Keeping these steps here lets the preprocessor classes stay focused on
validating shapes against their configuration.

Design notes
------------
- C order is required because `reshape(..., order="c")` only yields the
  intended element order when the buffer is row-major. A tensor can declare
  C ordering while still having non-row-major strides (e.g. a transposed
  view), so both `ordering()` and `is_c_contiguous()` are checked.
- `flatten_to_2d` collapses axes 1..k-1 in *stored* order. It does not know
  or care whether the tensor is channels-first or channels-last.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...domain._tensor import ITensor

logger = logging.getLogger(__name__)


def ensure_c_order(x: ITensor) -> ITensor:
    """
    Return `x` itself if it is row-major contiguous, else a C-order copy.

    Parameters
    ----------
    x : ITensor
        Input tensor.

    Returns
    -------
    ITensor
        A tensor with row-major contiguous storage.
    """
    if x.ordering() == "c" and x.is_c_contiguous():
        return x
    logger.debug(
        "Copying tensor of shape %s (ordering '%s') to C order",
        x.shape,
        x.ordering(),
    )
    return x.dup("c")


def flatten_to_2d(x: ITensor) -> ITensor:
    """
    Collapse every non-batch axis of `x` into a single feature axis.

    Shape semantics
    ---------------
    Input:
        (N, d1, d2, ..., dk)

    Output:
        (N, d1 * d2 * ... * dk)

    Parameters
    ----------
    x : ITensor
        Input tensor of rank >= 2.

    Returns
    -------
    ITensor
        Row-major flattened tensor.
    """
    if x.rank < 2:
        raise ValueError(f"flatten_to_2d expects at least 2D input, got {x.shape}")
    x = ensure_c_order(x)
    shape = x.shape
    return x.reshape((shape[0], math.prod(shape[1:])), order="c")


def unflatten_from_2d(x: ITensor, feature_shape: Sequence[int]) -> ITensor:
    """
    Split the feature axis of a 2D tensor into `feature_shape`.

    Parameters
    ----------
    x : ITensor
        Input tensor of shape (N, prod(feature_shape)).
    feature_shape : Sequence[int]
        Per-example shape of the output.

    Returns
    -------
    ITensor
        Tensor of shape (N, *feature_shape) in row-major element order.
    """
    x = ensure_c_order(x)
    return x.reshape((x.size(0),) + tuple(int(d) for d in feature_shape), order="c")
