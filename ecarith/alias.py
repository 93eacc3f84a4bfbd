#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Protocol, Union, runtime_checkable

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use ecarith.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]


@runtime_checkable
class Number(Protocol):
    """Capability required from field values and curve coordinates.

    Any type providing these operations can be plugged in:
    int, fractions.Fraction, float, gmpy2.mpz, and FieldElement itself.

    There is no zero/one constructor: the additive identity of v's type
    is v - v, the multiplicative one is v / v (for nonzero v).
    Exponents are small non-negative ints.
    """

    def __eq__(self, other: Any) -> bool:
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...

    def __mod__(self, other: Any) -> Any:
        ...

    def __pow__(self, exponent: int) -> Any:
        ...

    def __repr__(self) -> str:
        ...
