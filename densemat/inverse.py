# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

import numpy as np

from .errors import SingularMatrixError
from .matrix import Matrix, View, allocate, subview
from .ops import copy, duplicate, identity
from .utils import check_square

logger = logging.getLogger(__name__)


def _find_pivot_row(rows: np.ndarray, i: int) -> Optional[int]:
    """First row below i with a non-zero entry in column i."""
    nonzero = np.flatnonzero(rows[i + 1 :, i] != 0)
    if nonzero.size == 0:
        return None
    return i + 1 + int(nonzero[0])


def invert(m: View) -> bool:
    """
    Replace the square matrix m with its inverse (Gauss-Jordan elimination).

    The elimination runs on an n x 2n scratch matrix [m | I]. A zero pivot
    is swapped with the first row below it that has a non-zero entry in the
    same column; the pivot test is an exact comparison with 0, there is no
    tolerance and no search for the largest magnitude.

    Returns
    -------
    bool
        True if m now holds its inverse, False if m is singular. On False
        m is left untouched.
    """
    check_square(m, "inverse")
    n = m.rows

    with allocate(n, 2 * n) as aug:
        left = subview(aug, 0, 0, n, n)
        right = subview(aug, 0, n, n, n)
        copy(left, m)
        identity(right)

        # aug is contiguous, so this is a (n, 2n) view onto its buffer
        rows = aug.buffer.reshape(aug.rows, aug.cols)
        for i in range(n):
            if rows[i, i] == 0:
                j = _find_pivot_row(rows, i)
                if j is None:
                    logger.debug(f"no pivot for column {i}, matrix is singular")
                    return False
                logger.debug(f"zero pivot at {i}, swapping with row {j}")
                rows[[i, j]] = rows[[j, i]]

            rows[i] /= rows[i, i]

            # Eliminate column i from every other row, factors taken
            # before any of those rows is updated
            others = np.arange(n) != i
            factors = rows[others, i]
            rows[others] -= factors[:, None] * rows[i]

        copy(m, right)
    return True


def inverted(m: View) -> Matrix:
    """
    New matrix holding the inverse of m; m itself is not modified.

    Raises
    ------
    SingularMatrixError : if m has no inverse.
    """
    result = duplicate(m)
    if not invert(result):
        result.release()
        raise SingularMatrixError(f"{m.rows}x{m.cols} matrix is singular")
    return result
