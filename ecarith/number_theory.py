#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Only what prime field arithmetic needs is included:

* modular exponentiation by 'square & multiply'
* modular inverse using Fermat's little theorem

The functions accept any integer-like type providing
multiplication, remainder, floor division, and comparisons
(e.g. int or gmpy2.mpz): the caller is responsible for picking a type
whose intermediate products do not overflow.
"""

from typing import Any

from ecarith.exceptions import ECArithValueError
from ecarith.utils import str_from_number


def mod_pow(base: Any, exponent: Any, m: Any) -> Any:
    """Return base^exponent (mod m).

    This implementation uses
    'square & multiply' algorithm,
    'right-to-left' binary decomposition of the exponent,
    i.e. O(log exponent) multiplications.
    """

    if exponent < 0:
        raise ECArithValueError(f"negative exponent: {str_from_number(exponent)}")
    if m <= 0:
        raise ECArithValueError(f"non positive modulus: {str_from_number(m)}")

    result = 1 % m
    base %= m
    while exponent > 0:
        # if least significant bit of exponent is 1, then multiply
        if exponent % 2 == 1:
            result = result * base % m
        # the squaring part of 'square & multiply'
        base = base * base % m
        exponent //= 2
    return result


def fermat_inv(a: Any, p: Any) -> Any:
    """Return the inverse of a (mod p); p must be a prime.

    Fermat's little theorem states that a^(p-1) = 1 (mod p)
    for any a not divisible by p: a^(p-2) is then the inverse of a.

    The primality of p is not checked:
    for a composite p the result is meaningless.
    """

    a %= p
    if a == 0:
        raise ZeroDivisionError(f"no inverse for 0 mod {str_from_number(p)}")
    return mod_pow(a, p - 2, p)
