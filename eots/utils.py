#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Every 32 bytes value of the scheme (private key, nonce, public key,
public nonce, signature scalar, message digest) travels as
a 64 hex-digit string.
"""

import re
from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from eots.alias import Octets
from eots.exceptions import EOTSValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]

_HEX64 = re.compile(r"[0-9a-fA-F]{64}")


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return bytes(octets)

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise EOTSValueError(err_msg)


def is_hex64(data: object) -> bool:
    "Return True if data is a 64 hex-digit string (case insensitive)."
    return isinstance(data, str) and _HEX64.fullmatch(data) is not None


def int_from_hex64(hex64: str) -> int:
    return int(hex64, 16)


def hex_from_int(i: int, size: int = 32) -> str:
    """Return the lowercase, zero-padded, big-endian hex-string of i.

    Negative integers and integers not fitting into size bytes
    are not allowed.
    """

    if i < 0:
        raise EOTSValueError(f"negative integer: {i}")
    return i.to_bytes(size, byteorder="big", signed=False).hex()
