#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion and formatting utilities."""

from typing import Any

from ecarith.alias import Integer

# integers above this threshold are printed as hex-strings
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def number_from_integer(i: Any) -> Any:
    """Return the input converted to int if it is a hex-string or bytes.

    Any other numeric type (int, Fraction, gmpy2.mpz, etc.)
    goes untouched.
    """
    if isinstance(i, (str, bytes)):
        return int_from_integer(i)
    return i


def hex_string(i: Integer) -> str:
    """Return a hex-string from many non-negative integer representations.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        # local import: ecarith.exceptions imports this module
        from ecarith.exceptions import ECArithValueError

        raise ECArithValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def str_from_number(n: Any) -> str:
    "Return the debug representation, as hex-string for large integers."

    if isinstance(n, int) and not isinstance(n, bool):
        if n > HEX_THRESHOLD:
            return f"'{hex_string(n)}'"
        if n < -HEX_THRESHOLD:
            return f"-'{hex_string(-n)}'"
    return f"{n!r}"
