# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from .errors import ShapeError
from .iterate import for_each, zip_for_each
from .matrix import Matrix, View, allocate
from .utils import check_square


def identity(dst: View) -> None:
    """Populate the square matrix dst with 1 on the diagonal, 0 elsewhere."""
    check_square(dst, "identity")
    for_each(dst, lambda row, col, _v: 1.0 if row == col else 0.0)


def copy(dst: View, src: View) -> None:
    zip_for_each(dst, src, lambda _r, _c, _d, s: s)


def duplicate(src: View) -> Matrix:
    """
    Contiguous owning copy of src. The caller releases it.
    """
    dst = allocate(src.rows, src.cols)
    copy(dst, src)
    return dst


def transpose(dst: View, src: View) -> None:
    """
    Write the transpose of src into dst.

    dst and src must not overlap in memory; this is not an in-place
    transpose.
    """
    if dst.rows != src.cols:
        raise ShapeError(f"dst.rows should be == to src.cols ({dst.rows} != {src.cols})")
    if dst.cols != src.rows:
        raise ShapeError(f"dst.cols should be == to src.rows ({dst.cols} != {src.rows})")
    for_each(src, lambda row, col, value: dst.put(col, row, value))


def multiply(dst: View, a: View, b: View) -> None:
    """
    Matrix product dst = a @ b with the standard triple loop.

    Parameters
    ----------
    dst : View    (m, p)
        Destination, must not alias a or b.
    a   : View    (m, n)
    b   : View    (n, p)
    """
    if a.rows != dst.rows:
        raise ShapeError(f"a.rows should match dst.rows ({a.rows} != {dst.rows})")
    if a.cols != b.rows:
        raise ShapeError(f"a.cols should match b.rows ({a.cols} != {b.rows})")
    if b.cols != dst.cols:
        raise ShapeError(f"b.cols should match dst.cols ({b.cols} != {dst.cols})")

    for row in range(dst.rows):
        for col in range(dst.cols):
            total = 0.0
            for i in range(a.cols):
                total += a.at(row, i) * b.at(i, col)
            dst.put(row, col, total)
