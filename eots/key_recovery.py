#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private key recovery from EOTS nonce reuse.

Two signatures sharing public key P and public nonce R,
but signing different messages, satisfy

    s1 = a + e1*q (mod n)
    s2 = a + e2*q (mod n)

so that

    q = (s1 - s2) * (e1 - e2)^-1 (mod n)

If e1 == e2 (e.g. the same message signed twice) the system is
singular and nothing is leaked.
"""

import logging

from btclib.ec import Curve, secp256k1

from eots.alias import String
from eots.eots import Sig
from eots.exceptions import EOTSRuntimeError, EOTSValueError, EqualChallengesError
from eots.hashes import challenge, msg_digest
from eots.number_theory import mod_inv
from eots.utils import hex_from_int, int_from_hex64, is_hex64

logger = logging.getLogger(__name__)


def recover_prv_key(
    s1: str,
    s2: str,
    msg1_hash: str,
    msg2_hash: str,
    public_key: str,
    public_nonce: str,
    ec: Curve = secp256k1,
) -> str:
    """Return the (normalized) private key as 64 hex-digit string.

    All inputs are 64 hex-digit strings: the two signature scalars,
    the two message digests, and the shared public key and public nonce.
    """
    if not all(
        is_hex64(h) for h in (s1, s2, msg1_hash, msg2_hash, public_key, public_nonce)
    ):
        raise EOTSValueError("all inputs must be 32-byte hex strings")

    e1 = challenge(public_nonce, public_key, msg1_hash, ec)
    e2 = challenge(public_nonce, public_key, msg2_hash, ec)

    num = (int_from_hex64(s1) - int_from_hex64(s2)) % ec.n
    den = (e1 - e2) % ec.n
    logger.debug("attempting key recovery for public key %s", public_key)
    if den == 0:
        logger.debug("key recovery failed: equal challenges")
        raise EqualChallengesError("cannot recover key: challenges are equal")

    q = num * mod_inv(den, ec.n) % ec.n
    logger.debug("private key recovered for public key %s", public_key)
    return hex_from_int(q, ec.n_size)


def extract_prv_key(
    msg1: String, sig1: Sig, msg2: String, sig2: Sig, ec: Curve = secp256k1
) -> str:
    """Return the private key leaked by two signatures reusing the nonce.

    The messages are digested with the same rule used for signing.
    """
    if sig1.public_key.lower() != sig2.public_key.lower():
        raise EOTSRuntimeError("signatures do not share the public key")
    if sig1.public_nonce.lower() != sig2.public_nonce.lower():
        raise EOTSRuntimeError("signatures do not share the public nonce")

    return recover_prv_key(
        sig1.s,
        sig2.s,
        msg_digest(msg1).hex(),
        msg_digest(msg2).hex(),
        sig1.public_key,
        sig1.public_nonce,
        ec,
    )
