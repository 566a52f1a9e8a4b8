# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

Dense float64 matrices with zero-copy strided views.

Public API
~~~~~~~~~~
- Storage
    - `Matrix`, `View`, `allocate`, `release`
    - `view_of`, `subview`, `from_array`, `from_2d`, `from_sub2d`
    - `at`, `at_mut`
- Iteration
    - `for_each`, `zip_for_each`, `zip_for_each3`
    - `add`, `subtract`, `hadamard`, `scale`
- Products
    - `identity`, `duplicate`, `transpose`, `multiply`
- Square matrices
    - `determinant`, `cofactor`, `adjugate`
    - `invert`, `inverted`
- Output
    - `format_matrix`, `print_matrix`

Example
-------
>>> import densemat as dm
>>> a = dm.from_2d([[2.0, 1.0], [0.0, 4.0]])
>>> dm.determinant(a)
8.0
>>> dm.invert(a)
True
>>> a.tolist()
[[0.5, -0.125], [0.0, 0.25]]
"""

from importlib.metadata import version as _pkg_version

from .determinant import adjugate, cofactor, determinant, minor
from .errors import (
    AllocationError,
    DenseMatError,
    NotSquareError,
    ReleasedMatrixError,
    ShapeError,
    SingularMatrixError,
)
from .formatting import format_matrix, fprint, print_matrix
from .inverse import invert, inverted
from .iterate import (
    add,
    elementwise,
    for_each,
    hadamard,
    indices,
    scale,
    subtract,
    zip_for_each,
    zip_for_each3,
)
from .matrix import (
    ElementRef,
    Matrix,
    View,
    allocate,
    at,
    at_mut,
    from_2d,
    from_array,
    from_sub2d,
    release,
    subview,
    view_of,
)
from .ops import copy, duplicate, identity, multiply, transpose

__all__ = [
    "Matrix",
    "View",
    "ElementRef",
    "allocate",
    "release",
    "view_of",
    "subview",
    "from_array",
    "from_2d",
    "from_sub2d",
    "at",
    "at_mut",
    "indices",
    "for_each",
    "zip_for_each",
    "zip_for_each3",
    "elementwise",
    "add",
    "subtract",
    "hadamard",
    "scale",
    "identity",
    "copy",
    "duplicate",
    "transpose",
    "multiply",
    "minor",
    "cofactor",
    "determinant",
    "adjugate",
    "invert",
    "inverted",
    "format_matrix",
    "fprint",
    "print_matrix",
    "DenseMatError",
    "ShapeError",
    "NotSquareError",
    "AllocationError",
    "ReleasedMatrixError",
    "SingularMatrixError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
