# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Bordered text rendering.

>>> from densemat import from_2d
>>> print(format_matrix(from_2d([[1, -2], [30, 4]]), 1))
--         --
|  1.0 -2.0 |
| 30.0  4.0 |
--         --
"""

import sys
from typing import List, Optional, TextIO

from .utils import DEFAULT_PRECISION


def _format_element(value: float, precision: int) -> str:
    # never print -0.0
    if value == 0.0:
        value = 0.0
    return f"{value:.{precision}f}"


def element_width(value: float, precision: int = DEFAULT_PRECISION) -> int:
    return len(_format_element(value, precision))


def format_matrix(m, precision: int = DEFAULT_PRECISION) -> str:
    cells: List[List[str]] = [
        [_format_element(m.at(r, c), precision) for c in range(m.cols)]
        for r in range(m.rows)
    ]
    widths = [max((len(row[c]) for row in cells), default=0) for c in range(m.cols)]

    border = "--" + " " * max(m.cols - 1 + sum(widths), 0) + "--"
    lines = [border]
    for row in cells:
        body = "".join(f"{cell:>{w}} " for cell, w in zip(row, widths))
        lines.append(f"| {body}|")
    lines.append(border)
    return "\n".join(lines)


def fprint(stream: TextIO, m, precision: int = DEFAULT_PRECISION) -> None:
    stream.write(format_matrix(m, precision) + "\n")


def print_matrix(m, precision: int = DEFAULT_PRECISION, stream: Optional[TextIO] = None) -> None:
    fprint(stream if stream is not None else sys.stdout, m, precision)
