#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Challenge hash and message digest.

The challenge binds together public nonce, public key, and message:

    e = int(SHA256(tag || tag || x_R || x_P || msg_hash))

where tag is the 32 bytes BIP340 challenge tag hash.
This is the BIP340 tagged hash construction written out explicitly,
the tag hash being hardcoded instead of being computed at runtime.
Differently from BIP340, e is not reduced modulo n here:
the reduction happens in the subsequent modular operations.

The message digest is always 32 bytes:
a 64 hex-digit string is assumed to be an already computed digest
and it is used as-is, anything else is hashed with SHA256.
Warning: a text message that happens to be a 64 hex-digit string
is therefore never hashed; to sign such a message pass its digest
(or its utf-8 encoding as bytes) instead.
"""

import hashlib

from btclib.ec import Curve, secp256k1

from eots.alias import HashF, Octets, String
from eots.utils import bytes_from_octets, is_hex64

CHALLENGE_TAG = bytes.fromhex(
    "7bb52d7a9fef58323eb1bf7a407db382d2f3f2d81bb1224f49fe518f6d48d37c"
)


def msg_digest(msg: String, hf: HashF = hashlib.sha256) -> bytes:
    """Return the 32 bytes digest of the message.

    A 64 hex-digit string is taken as the digest itself.
    """

    if is_hex64(msg):
        return bytes.fromhex(msg)  # type: ignore[arg-type]
    if isinstance(msg, str):
        msg = msg.encode()
    h = hf()
    h.update(msg)
    return bytes(h.digest())


def challenge(
    x_R: Octets, x_P: Octets, msg_hash: Octets, ec: Curve = secp256k1
) -> int:
    """Return the (unreduced) challenge integer.

    x_R and x_P are the p_size bytes (or hex-string) x-coordinates of
    public nonce and public key, msg_hash is the 32 bytes message digest.
    """

    t = b"".join(
        [
            CHALLENGE_TAG,
            CHALLENGE_TAG,
            bytes_from_octets(x_R, ec.p_size),
            bytes_from_octets(x_P, ec.p_size),
            bytes_from_octets(msg_hash, 32),
        ]
    )
    return int.from_bytes(hashlib.sha256(t).digest(), byteorder="big", signed=False)
