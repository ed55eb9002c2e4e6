#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "914350c04b3189b493d350565909350cedf1ea1f849de3a70957ba9447c2a19a"
#
# use eots.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for private keys and nonces (32 bytes)
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for the message to be signed:
# a text string is utf-8 encoded before hashing,
# unless it is a 64 hex-digit string (a precomputed digest)
String = Union[bytes, str]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]

# Elliptic curve point in affine coordinates,
# the same representation used by btclib.
Point = Tuple[int, int]
