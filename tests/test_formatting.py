# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import io

from densemat.formatting import element_width, format_matrix, fprint, print_matrix
from densemat.matrix import allocate, from_2d


def test_format_example():
    m = from_2d([[140, 146], [320, 335]])
    assert format_matrix(m, 0) == "\n".join(
        [
            "--       --",
            "| 140 146 |",
            "| 320 335 |",
            "--       --",
        ]
    )


def test_columns_padded_independently():
    m = from_2d([[1, -2.5], [-30, 4]])
    assert format_matrix(m, 2) == "\n".join(
        [
            "--            --",
            "|   1.00 -2.50 |",
            "| -30.00  4.00 |",
            "--            --",
        ]
    )


def test_negative_zero_printed_as_zero():
    m = from_2d([[-0.0]])
    assert format_matrix(m, 1) == "--   --\n| 0.0 |\n--   --"


def test_element_width():
    assert element_width(-1.5, 2) == 5
    assert element_width(-0.0) == 8
    assert element_width(123.0, 0) == 3


def test_no_columns():
    assert format_matrix(allocate(2, 0)) == "----\n| |\n| |\n----"


def test_str_uses_default_precision():
    m = from_2d([[1]])
    assert str(m) == "--        --\n| 1.000000 |\n--        --"


def test_fprint_and_print_matrix(capsys):
    m = from_2d([[1, 2]])
    buf = io.StringIO()
    fprint(buf, m, 1)
    assert buf.getvalue() == format_matrix(m, 1) + "\n"

    print_matrix(m, 1)
    assert capsys.readouterr().out == format_matrix(m, 1) + "\n"
