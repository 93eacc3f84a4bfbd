#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.explorer` module."

import logging

import pytest

from ecarith.exceptions import ECArithTypeError, ECArithValueError, NotInRangeError
from ecarith.explorer import MAX_EXPLORER_P, find_all_points, find_subgroup_points
from ecarith.field_element import FieldElement
from ecarith.point import Affine, Infinity, mult


def test_find_all_points() -> None:
    a = FieldElement(497, 9739)
    b = FieldElement(1768, 9739)
    all_points = find_all_points(497, 1768, 9739)
    assert len(all_points) == 9735
    assert all_points[0] == Infinity(a, b)
    assert len(set(all_points)) == 9735
    G = Affine(FieldElement(1804, 9739), FieldElement(5368, 9739), a, b)
    assert G in all_points

    # y^2 = x^3 + 7 over F223: points with y = 0 are counted once
    points = find_all_points(0, 7, 223)
    assert len(set(points)) == len(points)
    # 223 = 1 mod 3: 6^3 = -7 has three cube roots
    y0 = [P for P in points if isinstance(P, Affine) and not P.y]
    assert len(y0) == 3
    assert FieldElement(6, 223) in [P.x for P in y0]
    for P in y0:
        assert P + P == points[0]

    err_msg = "p is too big to count all group points: "
    with pytest.raises(ECArithValueError, match=err_msg):
        find_all_points(0, 7, MAX_EXPLORER_P + 1)
    with pytest.raises(NotInRangeError):
        find_all_points(223, 7, 223)


def test_find_subgroup_points(caplog: pytest.LogCaptureFixture) -> None:
    a = FieldElement(497, 9739)
    b = FieldElement(1768, 9739)
    G = Affine(FieldElement(1804, 9739), FieldElement(5368, 9739), a, b)
    with caplog.at_level(logging.DEBUG, logger="ecarith"):
        points = find_subgroup_points(G)
    assert len(points) == 9735
    assert points[0] == G
    assert points[-1] == Infinity(a, b)
    assert points[1336] == mult(1337, G)
    assert "9735 points" in caplog.text

    a = FieldElement(0, 223)
    b = FieldElement(7, 223)
    G = Affine(FieldElement(47, 223), FieldElement(71, 223), a, b)
    assert len(find_subgroup_points(G)) == 21
    assert find_subgroup_points(Infinity(a, b)) == [Infinity(a, b)]

    with pytest.raises(ECArithTypeError, match="not a point over a finite field: "):
        find_subgroup_points(Affine(-1, -1, 5, 7))

    p = 2 ** 256 - 2 ** 32 - 977
    a = FieldElement(0, p)
    b = FieldElement(7, p)
    G = Affine(
        FieldElement(
            "79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798", p
        ),
        FieldElement(
            "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8", p
        ),
        a,
        b,
    )
    err_msg = "p is too big to count all subgroup points: "
    with pytest.raises(ECArithValueError, match=err_msg):
        find_subgroup_points(G)
