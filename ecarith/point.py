#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points and the point addition group law.

The elliptic curve is the set of points (x, y)
that are solutions to a short Weierstrass equation y^2 = x^3 + a*x + b,
together with a point at infinity, the identity of the group.

A Point is either Affine, with its (x, y) coordinates,
or Infinity; both carry the (a, b) curve parameters.
Coordinates can be of any Number type:
FieldElement for curves over Fp,
or int/Fraction for didactical curves over the rationals.
Beware that int coordinates are divided with true division,
i.e. results become float and rounding may put them off the curve:
fractions.Fraction is exact.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ecarith.alias import Number
from ecarith.exceptions import (
    CurveMismatchError,
    ECArithRuntimeError,
    ECArithValueError,
    InvalidPointError,
    NotOnCurveError,
)
from ecarith.field_element import FieldElement


def is_on_curve(x: Number, y: Number, a: Number, b: Number) -> bool:
    "Return True if y^2 = x^3 + a*x + b."
    return y ** 2 == x ** 3 + a * x + b


def _is_zero(n: Number) -> bool:
    # n - n is the additive identity of whatever type n is
    return n == n - n


def _same_parameter(p: Any, q: Any) -> bool:
    # FieldElement equality ignores the modulus
    if isinstance(p, FieldElement) or isinstance(q, FieldElement):
        if not isinstance(p, FieldElement) or not isinstance(q, FieldElement):
            return False
        if p.modulus != q.modulus:
            return False
    return bool(p == q)


def _same_curve(Q: "Point", R: "Point") -> bool:
    return _same_parameter(Q.a, R.a) and _same_parameter(Q.b, R.b)


class Point:
    """Base class of the Affine and Infinity points.

    It implements the group law as the + operator,
    negation, subtraction, and scalar multiplication.
    """

    a: Any
    b: Any

    @staticmethod
    def from_coordinates(
        x: Optional[Number], y: Optional[Number], a: Number, b: Number
    ) -> "Point":
        """Return the point with optional coordinates.

        Both coordinates None is the point at infinity,
        a single None coordinate is an invalid point.
        """
        if x is None and y is None:
            return Infinity(a, b)
        if x is None or y is None:
            raise InvalidPointError(f"only one coordinate provided: ({x!r}, {y!r})")
        return Affine(x, y, a, b)

    @property
    def curve(self) -> Tuple[Any, Any]:
        "Return the (a, b) curve parameters."
        return self.a, self.b

    @property
    def is_infinity(self) -> bool:
        return isinstance(self, Infinity)

    def __add__(self, other: Any) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return add(self, other)

    def __neg__(self) -> "Point":
        return negate(self)

    def __sub__(self, other: Any) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return add(self, negate(other))

    def __mul__(self, m: Any) -> "Point":
        if not isinstance(m, int):
            return NotImplemented
        return mult(m, self)

    def __rmul__(self, m: Any) -> "Point":
        if not isinstance(m, int):
            return NotImplemented
        return mult(m, self)


@dataclass(frozen=True)
class Affine(Point):
    "Point (x, y), checked to be on the curve y^2 = x^3 + a*x + b."

    x: Any
    y: Any
    a: Any
    b: Any

    def __post_init__(self) -> None:
        if not is_on_curve(self.x, self.y, self.a, self.b):
            raise NotOnCurveError(self.x, self.y)


@dataclass(frozen=True)
class Infinity(Point):
    "The point at infinity, identity element of the curve group."

    a: Any
    b: Any


def negate(Q: Point) -> Point:
    "Return the opposite point."

    if isinstance(Q, Affine):
        return Affine(Q.x, (Q.y - Q.y) - Q.y, Q.a, Q.b)
    return Q


def add(Q: Point, R: Point) -> Point:
    """Return the sum of two points.

    The points must belong to the same curve, i.e. have the same (a, b):
    otherwise CurveMismatchError is raised, as this is a programming error.
    """

    if not _same_curve(Q, R):
        raise CurveMismatchError(f"points not on the same curve: {Q!r}, {R!r}")

    if isinstance(Q, Infinity):
        return R
    if isinstance(R, Infinity):
        return Q
    if not isinstance(Q, Affine) or not isinstance(R, Affine):
        raise ECArithRuntimeError(f"unknown point type: {Q!r}, {R!r}")

    if Q.x == R.x:
        if Q.y != R.y:
            # on the same curve, same x means opposite y
            if not _is_zero(Q.y + R.y):
                raise ECArithRuntimeError(f"invalid points: {Q!r}, {R!r}")
            return Infinity(Q.a, Q.b)
        return double(Q)

    lam = (R.y - Q.y) / (R.x - Q.x)
    x = lam * lam - Q.x - R.x
    y = lam * (Q.x - x) - Q.y
    return Affine(x, y, Q.a, Q.b)


def double(Q: Point) -> Point:
    "Return the point added to itself."

    if not isinstance(Q, Affine):
        return Q

    # vertical tangent
    if _is_zero(Q.y):
        return Infinity(Q.a, Q.b)

    x2 = Q.x * Q.x
    lam = (x2 + x2 + x2 + Q.a) / (Q.y + Q.y)
    x = lam * lam - Q.x - Q.x
    y = lam * (Q.x - x) - Q.y
    return Affine(x, y, Q.a, Q.b)


def mult(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient.
    """

    if m < 0:
        raise ECArithValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [Infinity(Q.a, Q.b), Q]
    # if least significant bit of m is 1, then add Q to R[0]
    R[0] = R[m & 1]
    # remove the bit just accounted for
    m >>= 1
    while m > 0:
        # the doubling part of 'double & add'
        Q = double(Q)
        # always perform the 'add', even if useless
        R[1] = add(R[0], Q)
        # if least significant bit of m is 1, then add Q to R[0]
        R[0] = R[m & 1]
        m >>= 1
    return R[0]
