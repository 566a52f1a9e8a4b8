# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for densemat.

Shape and lifecycle errors are programmer errors: they are raised at the
call site and never caught inside the library. A singular matrix handed to
``invert`` is a data condition and is reported as a ``False`` return; only
the ``inverted`` convenience turns it into ``SingularMatrixError``.
"""


class DenseMatError(Exception):
    """Base exception for all densemat errors."""


class ShapeError(DenseMatError, ValueError):
    """Operand shapes violate the operation's contract."""


class NotSquareError(ShapeError):
    """A square-only operation received a non-square matrix."""


class AllocationError(DenseMatError, MemoryError):
    """The element buffer for a new matrix could not be allocated."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"could not allocate a {rows}x{cols} matrix")


class ReleasedMatrixError(DenseMatError, RuntimeError):
    """An owning matrix was used (or released) after release."""


class SingularMatrixError(DenseMatError, ArithmeticError):
    """A matrix expected to be invertible is singular."""
