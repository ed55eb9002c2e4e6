#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ephemeral One-Time Signature (EOTS).

EOTS is a Schnorr signature over secp256k1 where the ephemeral nonce
is not a throw-away secret of the signer: the x-coordinate of the
nonce point R = a*G is published as part of the signature.
Signing two different messages with the same nonce a then leaks
two linear equations in the private key q

    s1 = a + e1*q (mod n)
    s2 = a + e2*q (mod n)

and anybody can solve them for q (see eots.key_recovery).
This makes reuse of a committed nonce self-incriminating.

As in BIP340, public key and public nonce are represented by
their x-coordinate only: among the two points sharing x,
the one with even y-coordinate is always chosen.
Arguably, the knowledge of q as the discrete logarithm of Q
also implies the knowledge of n-q as discrete logarithm of -Q,
so the private key (and the nonce) is negated whenever its point
has odd y-coordinate.

The signature is the triple (x_P, x_R, s) with

    e = int(SHA256(tag || tag || x_R || x_P || msg_hash))
    s = a + e*q (mod n)

and it is verified checking that s*G == R + e*P.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass
from typing import Dict, Optional, Tuple, Type

from btclib.ec import Curve, mult, point_from_octets, secp256k1
from btclib.exceptions import BTClibValueError

from eots.alias import Octets, Point, String
from eots.exceptions import EOTSRuntimeError, EOTSValueError
from eots.hashes import challenge, msg_digest
from eots.utils import bytes_from_octets, hex_from_int, int_from_hex64, is_hex64

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sig:
    """EOTS signature.

    - public_key is the x-coordinate of the (even y) public key P
    - public_nonce is the x-coordinate of the (even y) nonce point R
    - s is a scalar, s = a + e*q (mod n)

    All of them as 64 hex-digit strings.
    """

    public_key: str
    public_nonce: str
    s: str
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        _check_formats(self.public_key, self.public_nonce, self.s)

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 96 bytes public_key || public_nonce || s serialization."
        if check_validity:
            self.assert_valid()
        return bytes.fromhex(self.public_key + self.public_nonce + self.s)

    @classmethod
    def parse(cls: Type[Sig], data: Octets, check_validity: bool = True) -> Sig:
        data = bytes_from_octets(data, 96)
        return cls(data[:32].hex(), data[32:64].hex(), data[64:].hex(), check_validity)

    def to_dict(self) -> Dict[str, str]:
        return {
            "publicKey": self.public_key,
            "publicNonce": self.public_nonce,
            "s": self.s,
        }


def _check_formats(public_key: str, public_nonce: str, s: str) -> None:
    if not is_hex64(public_key):
        raise EOTSValueError("invalid public key format")
    if not is_hex64(public_nonce):
        raise EOTSValueError("invalid public nonce format")
    if not is_hex64(s):
        raise EOTSValueError("invalid signature format")


def _int_from_scalar_octets(octets: Octets, name: str, ec: Curve) -> int:
    try:
        q_bytes = bytes_from_octets(octets, ec.n_size)
    except ValueError as e:
        raise EOTSValueError(f"{name} must be {ec.n_size} bytes") from e
    q = int.from_bytes(q_bytes, byteorder="big", signed=False)
    if not 0 < q < ec.n:
        raise EOTSValueError(f"{name} not in 1..n-1")
    return q


def _point_from_x(x: str, name: str, ec: Curve) -> Point:
    # the even y point, i.e. SEC compressed with 0x02 prefix
    try:
        return point_from_octets(b"\x02" + bytes.fromhex(x), ec)
    except BTClibValueError as e:
        raise EOTSValueError(f"invalid {name}: '{x}'") from e


def normalize(q: int, Q: Point, ec: Curve = secp256k1) -> Tuple[int, Point]:
    """Return the (scalar, point) pair with even y-coordinate.

    If Q has odd y-coordinate, return (n - q, -Q);
    otherwise return the input untouched.
    """
    if Q[1] % 2:
        return ec.n - q, ec.negate(Q)
    return q, Q


def gen_keys(
    prv_key: Optional[Octets] = None, ec: Curve = secp256k1
) -> Tuple[str, str]:
    """Return a normalized (private key, public key) hex-string pair.

    A random private key is generated if none is provided.
    """
    if prv_key is None:
        q = 1 + secrets.randbelow(ec.n - 1)
    else:
        q = _int_from_scalar_octets(prv_key, "private key", ec)

    q, P = normalize(q, mult(q, ec.G, ec), ec)
    return hex_from_int(q, ec.n_size), hex_from_int(P[0], ec.p_size)


def sign(
    prv_key: Octets,
    msg: String,
    nonce: Optional[Octets] = None,
    ec: Curve = secp256k1,
) -> Sig:
    """Sign msg with the private key, publishing the nonce point.

    prv_key and nonce are 32 bytes (bytes or hex-string).
    If the nonce is not provided a random one is drawn;
    a provided nonce makes the signature deterministic.
    Never reuse a nonce for different messages:
    the private key could be recovered from the two signatures.

    msg is hashed with SHA256 unless it is a 64 hex-digit string,
    see eots.hashes.msg_digest.
    """
    q = _int_from_scalar_octets(prv_key, "private key", ec)
    if nonce is None:
        a = 1 + secrets.randbelow(ec.n - 1)
    else:
        a = _int_from_scalar_octets(nonce, "nonce", ec)

    q, P = normalize(q, mult(q, ec.G, ec), ec)
    a, R = normalize(a, mult(a, ec.G, ec), ec)
    x_P = P[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    x_R = R[0].to_bytes(ec.p_size, byteorder="big", signed=False)

    e = challenge(x_R, x_P, msg_digest(msg), ec)
    # s=0 is not prevented here, but it would fail verification
    s = (a + e * q) % ec.n

    sig = Sig(x_P.hex(), x_R.hex(), hex_from_int(s, ec.n_size))
    logger.debug(
        "signed with public key %s and public nonce %s",
        sig.public_key,
        sig.public_nonce,
    )
    return sig


def assert_as_valid(
    public_key: str, public_nonce: str, msg: String, s: str, ec: Curve = secp256k1
) -> None:
    """Raise an Error if the signature is not valid.

    Malformed input raises EOTSValueError,
    a well-formed but invalid signature raises EOTSRuntimeError.
    """
    _check_formats(public_key, public_nonce, s)

    e = challenge(public_nonce, public_key, msg_digest(msg), ec)

    s_int = int_from_hex64(s)
    if not 0 < s_int < ec.n:
        raise EOTSRuntimeError("scalar s not in 1..n-1")

    P = _point_from_x(public_key, "public key", ec)
    R = _point_from_x(public_nonce, "public nonce", ec)

    # s*G == R + e*P
    if mult(s_int, ec.G, ec) != ec.add(R, mult(e % ec.n, P, ec)):
        raise EOTSRuntimeError("signature verification failed")


def verify(
    public_key: str, public_nonce: str, msg: String, s: str, ec: Curve = secp256k1
) -> bool:
    """Verify the EOTS signature of the provided message.

    Malformed hex-strings and x-coordinates not on the curve
    raise EOTSValueError; otherwise True or False is returned.
    """
    try:
        assert_as_valid(public_key, public_nonce, msg, s, ec)
    except EOTSRuntimeError as e:
        logger.debug("invalid signature: %s", e)
        return False

    return True


def verify_sig(msg: String, sig: Sig, ec: Curve = secp256k1) -> bool:
    return verify(sig.public_key, sig.public_nonce, msg, sig.s, ec)
