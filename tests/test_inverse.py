# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import importlib
import logging

import numpy as np
import pytest

from densemat.errors import NotSquareError, SingularMatrixError
from densemat.inverse import invert, inverted
from densemat.matrix import allocate, from_2d, from_sub2d
from densemat.ops import duplicate, identity, multiply

logger = logging.getLogger(__name__)

EXAMPLE = [[-1, 0, 0, -2], [1, 0, 5, -5], [0, 1, 4, 0], [0, 0, -5, 0]]


def test_invert_known_example():
    m = from_2d(EXAMPLE)
    assert invert(m)
    expected = np.array(
        [
            [-5.0 / 7.0, 2.0 / 7.0, 0.0, 2.0 / 7.0],
            [0.0, 0.0, 1.0, 4.0 / 5.0],
            [0.0, 0.0, 0.0, -1.0 / 5.0],
            [-1.0 / 7.0, -1.0 / 7.0, 0.0, -1.0 / 7.0],
        ]
    )
    logger.debug(f"\ninverse:\n{m}")
    np.testing.assert_allclose(m.to_numpy(), expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_inverse_round_trip(n):
    rng = np.random.default_rng(seed=100 + n)
    A = from_2d(rng.normal(size=(n, n)))
    inv = duplicate(A)
    assert invert(inv)

    prod = allocate(n, n)
    multiply(prod, A, inv)
    assert np.allclose(prod.to_numpy(), np.eye(n), atol=1e-7)
    np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(A.to_numpy()), rtol=1e-6, atol=1e-7)


def test_invert_swaps_zero_pivot():
    m = from_2d([[0, 1], [1, 0]])
    assert invert(m)
    assert m.tolist() == [[0.0, 1.0], [1.0, 0.0]]

    m = from_2d([[0, 2, 0], [0, 0, 4], [8, 0, 0]])
    assert invert(m)
    assert m.tolist() == [[0.0, 0.0, 0.125], [0.5, 0.0, 0.0], [0.0, 0.25, 0.0]]


def test_invert_logs_pivot_swap(caplog):
    caplog.set_level(logging.DEBUG, logger="densemat.inverse")
    invert(from_2d([[0, 1], [1, 0]]))
    assert any("swapping with row 1" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "data",
    [
        [[1, 2], [0, 0]],
        [[0, 0], [1, 2]],
        [[1, 2], [2, 4]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        [[0]],
    ],
)
def test_invert_singular_reports_failure(data):
    m = from_2d(data)
    assert invert(m) is False
    # all work happens on scratch, the input is untouched
    assert m.tolist() == from_2d(data).tolist()


def test_invert_empty():
    assert invert(allocate(0, 0))


def test_invert_requires_square():
    with pytest.raises(NotSquareError):
        invert(allocate(2, 3))


def test_invert_exact_zero_pivot_test_has_no_tolerance():
    # numerically near-singular but not exactly: succeeds with huge entries
    m = from_2d([[1.0, 1.0], [1.0, 1.0 + 1e-15]])
    assert invert(m)
    assert np.abs(m.to_numpy()).max() > 1e14


def test_invert_through_a_view():
    big = np.zeros((3, 4))
    big[:2, :2] = [[2.0, 0.0], [0.0, 4.0]]
    assert invert(from_sub2d(big, 0, 0, 2, 2))
    expected = np.zeros((3, 4))
    expected[:2, :2] = [[0.5, 0.0], [0.0, 0.25]]
    np.testing.assert_array_equal(big, expected)


def test_inverted_returns_new_matrix():
    src = from_2d([[2, 1], [0, 4]])
    inv = inverted(src)
    assert inv.tolist() == [[0.5, -0.125], [0.0, 0.25]]
    assert src.tolist() == [[2.0, 1.0], [0.0, 4.0]]

    eye = allocate(2, 2)
    identity(eye)
    prod = allocate(2, 2)
    multiply(prod, inv, src)
    assert prod.tolist() == eye.tolist()


def test_inverted_raises_on_singular():
    with pytest.raises(SingularMatrixError):
        inverted(from_2d([[1, 2], [2, 4]]))


@pytest.mark.parametrize(
    "data,ok",
    [
        ([[1, 2], [2, 4]], False),
        ([[1, 2], [0, 0]], False),
        ([[0, 1], [1, 0]], True),
        (EXAMPLE, True),
    ],
)
def test_invert_releases_scratch(monkeypatch, data, ok):
    inv_module = importlib.import_module("densemat.inverse")
    made = []

    def tracking_allocate(rows, cols):
        m = allocate(rows, cols)
        made.append(m)
        return m

    monkeypatch.setattr(inv_module, "allocate", tracking_allocate)
    assert invert(from_2d(data)) is ok
    assert len(made) == 1
    assert all(m.released for m in made)
