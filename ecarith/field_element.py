#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""FieldElement class: elements of the prime field Fp.

A FieldElement wraps a value and a modulus p,
with the value always in [0, p-1].
It is validated once at construction and it is immutable:
the arithmetic operators return new instances.

Division uses Fermat's little theorem to compute the inverse,
so the modulus must be a prime; this is not checked.
"""

import functools
from typing import Any

from ecarith.alias import Integer, Number
from ecarith.exceptions import DifferentFieldsError, NotInRangeError
from ecarith.number_theory import fermat_inv, mod_pow
from ecarith.utils import number_from_integer, str_from_number


@functools.total_ordering
class FieldElement:
    """Element of the finite field of integers modulo a prime.

    value and modulus can be of any integer-like Number type
    (e.g. int or gmpy2.mpz); hex-strings and bytes are converted to int.

    Equality only compares values, not moduli:
    it is up to the caller to compare elements of the same field.
    Instead, arithmetic between elements with different moduli
    raises DifferentFieldsError.
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: Integer, modulus: Integer) -> None:
        value = number_from_integer(value)
        modulus = number_from_integer(modulus)
        if value < 0 or value >= modulus:
            raise NotInRangeError(value, modulus)
        self._value = value
        self._modulus = modulus

    @property
    def value(self) -> Number:
        return self._value

    @property
    def modulus(self) -> Number:
        return self._modulus

    def __repr__(self) -> str:
        v = str_from_number(self._value)
        m = str_from_number(self._modulus)
        return f"FieldElement({v}, {m})"

    def __str__(self) -> str:
        return str_from_number(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        return self._value < other._value

    def _require_same_field(self, other: "FieldElement") -> None:
        if self._modulus != other._modulus:
            raise DifferentFieldsError(self._modulus, other._modulus)

    def _new(self, value: Any) -> "FieldElement":
        return FieldElement(value % self._modulus, self._modulus)

    def __add__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        return self._new(self._value + other._value)

    def __sub__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        return self._new(self._value - other._value)

    def __neg__(self) -> "FieldElement":
        return self._new(-self._value)

    def __mul__(self, other: Any) -> "FieldElement":
        # an int coefficient is a repeated addition, e.g. 3 * x
        if isinstance(other, int) and not isinstance(other, bool):
            return self._new(self._value * other)
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        return self._new(self._value * other._value)

    def __rmul__(self, other: Any) -> "FieldElement":
        if isinstance(other, int) and not isinstance(other, bool):
            return self._new(other * self._value)
        return NotImplemented

    def inverse(self) -> "FieldElement":
        "Return the multiplicative inverse, using Fermat's little theorem."
        return FieldElement(fermat_inv(self._value, self._modulus), self._modulus)

    def __truediv__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        inv = fermat_inv(other._value, self._modulus)
        return self._new(self._value * inv)

    def __mod__(self, other: Any) -> "FieldElement":
        """Return the Euclidean remainder, i.e. always zero.

        In a field any nonzero element divides any other one.
        """
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._require_same_field(other)
        if other._value == 0:
            raise ZeroDivisionError("modulo by the zero element")
        return FieldElement(0, self._modulus)

    def __pow__(self, exponent: Any) -> "FieldElement":
        """Return self^exponent.

        The exponent is reduced mod (p-1), as a^(p-1) = 1 for a != 0
        (Fermat's little theorem): negative exponents are allowed.
        """
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent == 0:
            return FieldElement(1, self._modulus)
        if self._value == 0:
            if exponent < 0:
                raise ZeroDivisionError("zero element raised to a negative power")
            return self
        n = exponent % (self._modulus - 1)
        return FieldElement(mod_pow(self._value, n, self._modulus), self._modulus)
