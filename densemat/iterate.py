# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Row-major iteration combinators.

The callback receives the current value(s) at ``(row, col)``. If it returns
something other than ``None`` that value is written back into the *first*
matrix, which is how the combinators mutate in place::

    zip_for_each(a, b, lambda r, c, x, y: x + y)   # a += b
"""

import operator
from typing import Callable, Iterator, Optional, Tuple

from .utils import check_same_shape


def indices(m) -> Iterator[Tuple[int, int]]:
    """(row, col) pairs, row outer, col inner."""
    for row in range(m.rows):
        for col in range(m.cols):
            yield row, col


def for_each(m, fn: Callable[[int, int, float], Optional[float]]) -> None:
    for row, col in indices(m):
        result = fn(row, col, m.at(row, col))
        if result is not None:
            m.put(row, col, result)


def zip_for_each(m1, m2, fn: Callable[[int, int, float, float], Optional[float]]) -> None:
    check_same_shape(m1, m2)
    for row, col in indices(m1):
        result = fn(row, col, m1.at(row, col), m2.at(row, col))
        if result is not None:
            m1.put(row, col, result)


def zip_for_each3(
    m1, m2, m3, fn: Callable[[int, int, float, float, float], Optional[float]]
) -> None:
    check_same_shape(m1, m2, m3)
    for row, col in indices(m1):
        result = fn(row, col, m1.at(row, col), m2.at(row, col), m3.at(row, col))
        if result is not None:
            m1.put(row, col, result)


def elementwise(dst, a, b, op: Callable[[float, float], float]) -> None:
    """dst[r][c] = op(a[r][c], b[r][c]); dst may be a or b."""
    zip_for_each3(dst, a, b, lambda _r, _c, _d, x, y: op(x, y))


def add(dst, a, b) -> None:
    elementwise(dst, a, b, operator.add)


def subtract(dst, a, b) -> None:
    elementwise(dst, a, b, operator.sub)


def hadamard(dst, a, b) -> None:
    elementwise(dst, a, b, operator.mul)


def scale(dst, src, factor: float) -> None:
    zip_for_each(dst, src, lambda _r, _c, _d, x: x * factor)
