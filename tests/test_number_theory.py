#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.number_theory` module."

import pytest

from ecarith.exceptions import ECArithValueError
from ecarith.number_theory import fermat_inv, mod_pow

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    97,
    101,
    113,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    2 ** 521 - 1,
]


def test_mod_pow() -> None:
    for m in range(1, 50):
        for base in range(-m, 2 * m):
            for exponent in range(20):
                assert mod_pow(base, exponent, m) == pow(base, exponent, m)

    p = 2 ** 256 - 2 ** 32 - 977
    for base in (2, 3, p - 1, 0xDEADBEEF):
        assert mod_pow(base, p - 1, p) == 1

    with pytest.raises(ECArithValueError, match="negative exponent: "):
        mod_pow(2, -1, 13)
    with pytest.raises(ECArithValueError, match="non positive modulus: "):
        mod_pow(2, 3, 0)


def test_fermat_inv() -> None:
    for p in primes:
        with pytest.raises(ZeroDivisionError, match="no inverse for 0 mod"):
            fermat_inv(0, p)
        with pytest.raises(ZeroDivisionError, match="no inverse for 0 mod"):
            fermat_inv(p, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = fermat_inv(a, p)
            assert a * inv % p == 1
            inv = fermat_inv(a + p, p)
            assert a * inv % p == 1
            assert fermat_inv(a, p) == pow(a, -1, p)


def test_fermat_inv_large() -> None:
    p = 2 ** 256 - 2 ** 32 - 977
    a = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    inv = fermat_inv(a, p)
    assert 0 < inv < p
    assert a * inv % p == 1
