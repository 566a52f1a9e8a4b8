# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

import numpy as np

from .errors import NotSquareError, ShapeError

DTYPE = np.float64
DEFAULT_PRECISION: int = 6
# Cofactor expansion is O(n!), warn when asked to expand anything this big
COFACTOR_WARN_SIZE: int = 8


def check_dims(*dims: int) -> None:
    """Raise ShapeError unless every dimension is a non-negative integer."""
    for d in dims:
        if not isinstance(d, numbers.Integral) or d < 0:
            raise ShapeError(f"dimensions must be non-negative integers, got {d!r}")


def check_same_shape(first, *others) -> None:
    """Every matrix in ``others`` must have the same rows/cols as ``first``."""
    for other in others:
        if other.rows != first.rows:
            raise ShapeError(f"nrow don't match ({first.rows} != {other.rows})")
        if other.cols != first.cols:
            raise ShapeError(f"ncol don't match ({first.cols} != {other.cols})")


def check_square(m, what: str = "operation") -> None:
    if not m.is_square:
        raise NotSquareError(
            f"{what} is only defined for square matrices, got {m.rows}x{m.cols}"
        )
