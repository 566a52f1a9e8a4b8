# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinant by Laplace (cofactor) expansion along row 0.

Every cofactor allocates its minor, recurses, and releases the minor before
returning, so the whole computation is O(n!) time but only O(n^2) live
scratch at any moment.
"""

import logging

from .matrix import Matrix, View, allocate
from .utils import COFACTOR_WARN_SIZE, check_same_shape, check_square

logger = logging.getLogger(__name__)


def minor(m: View, row: int, col: int) -> Matrix:
    """
    Contiguous (n-1)x(n-1) copy of m with ``row`` and ``col`` removed.

    A copy, not a view: dropping a row and a column leaves elements that no
    single stride can address.
    """
    sub = allocate(m.rows - 1, m.cols - 1)
    idx = 0
    for i in range(m.rows):
        if i == row:
            continue
        for j in range(m.cols):
            if j == col:
                continue
            # sub has no stride so flat indexing is fine
            sub.buffer[idx] = m.at(i, j)
            idx += 1
    return sub


def _cofactor(m: View, row: int, col: int) -> float:
    with minor(m, row, col) as sub:
        det = _determinant(sub)
    return det if (row + col) % 2 == 0 else -det


def _determinant(m: View) -> float:
    # base case: 0x0
    if m.rows == 0:
        return 1.0
    det = 0.0
    for col in range(m.cols):
        det += m.at(0, col) * _cofactor(m, 0, col)
    return det


def _warn_if_large(m: View, what: str) -> None:
    if m.rows >= COFACTOR_WARN_SIZE:
        logger.warning(f"{what}(): cofactor expansion of a {m.rows}x{m.cols} matrix – O(n!)")


def cofactor(m: View, row: int, col: int) -> float:
    """Signed minor determinant, + when row + col is even."""
    check_square(m, "cofactor")
    return _cofactor(m, row, col)


def determinant(m: View) -> float:
    """
    Determinant of a square matrix; the 0x0 matrix has determinant 1.
    """
    check_square(m, "determinant")
    _warn_if_large(m, "determinant")
    return _determinant(m)


def adjugate(dst: View, src: View) -> None:
    """
    Transpose of the cofactor matrix: dst[c][r] = cofactor(src, r, c).
    """
    check_square(src, "adjugate")
    check_same_shape(src, dst)
    _warn_if_large(src, "adjugate")
    for row in range(src.rows):
        for col in range(src.cols):
            dst.put(col, row, _cofactor(src, row, col))
