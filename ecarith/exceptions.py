#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
raised by ecarith and those raised by other codebase:
users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecarith versions are derived.

ValueError subclasses signal bad input (recoverable);
RuntimeError subclasses signal a programming error,
e.g. combining points of different curves.
"""

from typing import Any

from ecarith.utils import str_from_number


class ECArithValueError(ValueError):
    pass


class ECArithTypeError(TypeError):
    pass


class ECArithRuntimeError(RuntimeError):
    pass


class NotInRangeError(ECArithValueError):
    "Field element value not in [0, modulus)."

    def __init__(self, value: Any, modulus: Any) -> None:
        self.value = value
        self.modulus = modulus
        err_msg = f"value not in field range 0..modulus-1: {str_from_number(value)}"
        err_msg += f" (modulus {str_from_number(modulus)})"
        super().__init__(err_msg)


class DifferentFieldsError(ECArithValueError):
    "Arithmetic between field elements with unequal moduli."

    def __init__(self, modulus: Any, other_modulus: Any) -> None:
        self.modulus = modulus
        self.other_modulus = other_modulus
        err_msg = "different fields: "
        err_msg += f"{str_from_number(modulus)} vs {str_from_number(other_modulus)}"
        super().__init__(err_msg)


class NotOnCurveError(ECArithValueError):
    "Coordinates not satisfying y^2 = x^3 + a*x + b."

    def __init__(self, x: Any, y: Any) -> None:
        self.x = x
        self.y = y
        err_msg = f"point not on curve: ({str_from_number(x)}, {str_from_number(y)})"
        super().__init__(err_msg)


class InvalidPointError(ECArithValueError):
    "Exactly one of the two coordinates has been provided."


class CurveMismatchError(ECArithRuntimeError):
    "Group law applied to points of different curves."
