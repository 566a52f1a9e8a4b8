# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Shape + stride addressing model.

Every matrix is a window onto a flat float64 buffer. Element ``(r, c)``
lives at ``buffer[origin + r * stride + c]``, where ``stride`` is the row
width of the *underlying* buffer and may exceed ``cols``.

Two ways to build a view, kept apart on purpose:

- ``view_of`` addresses a raw flat buffer and the caller supplies the true
  row width as ``stride``.
- ``subview`` derives a window from an existing View/Matrix and inherits the
  parent's stride and origin.
"""

import logging
from typing import List, Tuple

import numpy as np

from .errors import AllocationError, ReleasedMatrixError, ShapeError
from .formatting import format_matrix
from .utils import DTYPE, check_dims

logger = logging.getLogger(__name__)


class View:
    """
    Borrowing, strided window onto a flat buffer.

    ``at``/``put``/``offset`` are the unchecked fast path: nothing verifies
    that ``(row, col)`` lies inside ``[0, rows) x [0, cols)``. Indexing with
    ``m[row, col]`` is the checked path and raises ``IndexError``.
    """

    def __init__(self, buffer: np.ndarray, origin: int, rows: int, cols: int, stride: int):
        check_dims(origin, rows, cols, stride)
        self._buffer = buffer
        self.origin = int(origin)
        self.rows = int(rows)
        self.cols = int(cols)
        self.stride = int(stride)

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def offset(self, row: int, col: int) -> int:
        """Buffer index of element (row, col). No bound check."""
        return self.origin + row * self.stride + col

    def at(self, row: int, col: int) -> float:
        return float(self.buffer[self.origin + row * self.stride + col])

    def put(self, row: int, col: int, value: float) -> None:
        self.buffer[self.origin + row * self.stride + col] = value

    def _checked(self, key) -> Tuple[int, int]:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("matrix indices must be a (row, col) pair") from None
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self.rows}x{self.cols} matrix"
            )
        return row, col

    def __getitem__(self, key) -> float:
        return self.at(*self._checked(key))

    def __setitem__(self, key, value: float) -> None:
        row, col = self._checked(key)
        self.put(row, col, value)

    def tolist(self) -> List[List[float]]:
        return self.to_numpy().tolist()

    def to_numpy(self) -> np.ndarray:
        """Contiguous (rows, cols) copy of the viewed elements."""
        # fancy indexing copies, and never reads past the last viewed element
        idx = (
            self.origin
            + np.arange(self.rows)[:, None] * self.stride
            + np.arange(self.cols)[None, :]
        )
        return self.buffer[idx]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, "
            f"stride={self.stride}, origin={self.origin})"
        )

    def __str__(self) -> str:
        return format_matrix(self)


class Matrix(View):
    """
    Owning matrix: a contiguous ``rows * cols`` buffer with ``stride == cols``.

    Release exactly once, either explicitly with ``release()`` or by using
    the matrix as a context manager::

        with allocate(3, 3) as m:
            identity(m)
    """

    def __init__(self, rows: int, cols: int):
        check_dims(rows, cols)
        try:
            buffer = np.zeros(rows * cols, dtype=DTYPE)
        except (MemoryError, ValueError) as exc:
            raise AllocationError(rows, cols) from exc
        super().__init__(buffer, 0, rows, cols, cols)

    @property
    def buffer(self) -> np.ndarray:
        if self._buffer is None:
            raise ReleasedMatrixError(f"{self.rows}x{self.cols} matrix used after release")
        return self._buffer

    @property
    def released(self) -> bool:
        return self._buffer is None

    def release(self) -> None:
        if self._buffer is None:
            raise ReleasedMatrixError(f"{self.rows}x{self.cols} matrix released twice")
        self._buffer = None

    def __enter__(self) -> "Matrix":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._buffer is not None:
            self.release()

    def __repr__(self) -> str:
        state = ", released" if self.released else ""
        return f"Matrix(rows={self.rows}, cols={self.cols}{state})"


class ElementRef:
    """Mutable handle on one buffer element, returned by ``at_mut``."""

    def __init__(self, buffer: np.ndarray, index: int):
        self.buffer = buffer
        self.index = index

    def get(self) -> float:
        return float(self.buffer[self.index])

    def set(self, value: float) -> None:
        self.buffer[self.index] = value

    def __iadd__(self, value: float) -> "ElementRef":
        self.buffer[self.index] += value
        return self

    def __isub__(self, value: float) -> "ElementRef":
        self.buffer[self.index] -= value
        return self


def allocate(rows: int, cols: int) -> Matrix:
    logger.debug(f"allocate {rows}x{cols}")
    return Matrix(rows, cols)


def release(matrix: Matrix) -> None:
    matrix.release()


def at(m: View, row: int, col: int) -> float:
    return m.at(row, col)


def at_mut(m: View, row: int, col: int) -> ElementRef:
    return ElementRef(m.buffer, m.offset(row, col))


def _as_flat(buffer) -> np.ndarray:
    if isinstance(buffer, View):
        raise TypeError("view_of() takes a raw buffer; use subview() on a matrix")
    arr = np.asarray(buffer, dtype=DTYPE)
    flat = arr.reshape(-1)
    if isinstance(buffer, np.ndarray) and not np.may_share_memory(flat, buffer):
        # non-contiguous or non-float64 input, writes won't reach the caller
        logger.debug(f"buffer of dtype {buffer.dtype} copied, not shared")
    return flat


def view_of(buffer, row_start: int, col_start: int, rows: int, cols: int, stride: int) -> View:
    """
    View over a raw flat buffer.

    ``stride`` must be the real row width of ``buffer``. Do not pass the
    buffer of an existing strided view here, derive from it with ``subview``.
    """
    check_dims(row_start, col_start, stride)
    return View(_as_flat(buffer), row_start * stride + col_start, rows, cols, stride)


def subview(parent: View, row_start: int, col_start: int, rows: int, cols: int) -> View:
    """Window onto ``parent`` starting at (row_start, col_start), same stride."""
    check_dims(row_start, col_start)
    return View(parent.buffer, parent.offset(row_start, col_start), rows, cols, parent.stride)


def from_array(buffer, rows: int, cols: int) -> View:
    """Flat buffer read as ``rows`` rows of ``cols`` elements."""
    return view_of(buffer, 0, 0, rows, cols, cols)


def _as_2d(array) -> np.ndarray:
    arr = np.asarray(array, dtype=DTYPE)
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 0)
    if arr.ndim != 2:
        raise ShapeError(f"expected a 2-D array, got {arr.ndim} dimension(s)")
    return arr


def from_2d(array) -> View:
    """View over a 2-D ndarray or nested sequence, shape inferred."""
    arr = _as_2d(array)
    rows, cols = arr.shape
    return view_of(arr, 0, 0, rows, cols, cols)


def from_sub2d(array, row_start: int, col_start: int, rows: int, cols: int) -> View:
    """Sub-region of a 2-D array; stride is the array's row width."""
    arr = _as_2d(array)
    return view_of(arr, row_start, col_start, rows, cols, arr.shape[1])
