#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve group explorer functions.

These functions are meant to explore low-cardinality curve groups over Fp,
for didactical (and fun) reason only.
"""

import logging
from typing import Dict, List

from ecarith.exceptions import ECArithTypeError, ECArithValueError
from ecarith.field_element import FieldElement
from ecarith.point import Affine, Infinity, Point

logger = logging.getLogger(__name__)

MAX_EXPLORER_P = 10000


def find_all_points(a: int, b: int, p: int) -> List[Point]:
    """Find all group points of y^2 = x^3 + a*x + b over Fp, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The point at infinity is the first one.
    """
    if p > MAX_EXPLORER_P:
        err_msg = f"p is too big to count all group points: {p}"
        raise ECArithValueError(err_msg)

    fa = FieldElement(a, p)
    fb = FieldElement(b, p)

    # all the square roots of each quadratic residue
    roots: Dict[int, List[int]] = {}
    for y in range(p):
        roots.setdefault(y * y % p, []).append(y)

    points: List[Point] = [Infinity(fa, fb)]
    for x in range(p):
        y2 = ((x * x + a) * x + b) % p
        for y in roots.get(y2, []):
            points.append(Affine(FieldElement(x, p), FieldElement(y, p), fa, fb))

    logger.debug("y^2 = x^3 + %s*x + %s over F%s: %s points", a, b, p, len(points))
    return points


def find_subgroup_points(G: Point) -> List[Point]:
    """Find all G-generated subgroup points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The last point is the point at infinity.
    """
    if isinstance(G, Affine):
        if not isinstance(G.x, FieldElement):
            raise ECArithTypeError(f"not a point over a finite field: {G!r}")
        if G.x.modulus > MAX_EXPLORER_P:
            err_msg = f"p is too big to count all subgroup points: {G.x.modulus}"
            raise ECArithValueError(err_msg)

    points: List[Point] = [G]
    while not points[-1].is_infinity:
        points.append(points[-1] + G)

    logger.debug("subgroup generated by %r: %s points", G, len(points))
    return points
