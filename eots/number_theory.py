#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over the scalar field.

The private key recovery needs the inverse of (e1 - e2) modulo the
curve order n: it is computed here with the extended Euclidean
algorithm on plain integers, for any modulus, so that it can be
checked against small known vectors without any curve at hand.

Addition, subtraction, and multiplication modulo n are performed
inline with the % operator, so that every result lies in [0, n-1].
"""

from typing import Tuple

from eots.exceptions import EOTSValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    The result is always in [1, m-1].
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise EOTSValueError(f"{a} is not invertible modulo {m}")
