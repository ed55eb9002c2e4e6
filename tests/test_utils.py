#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eots.utils` module."

import pytest

from eots.exceptions import EOTSValueError
from eots.utils import bytes_from_octets, hex_from_int, int_from_hex64, is_hex64


def test_is_hex64() -> None:
    assert is_hex64("0" * 64)
    assert is_hex64("f" * 64)
    assert is_hex64("F" * 64)
    assert is_hex64("914350c04b3189b493d350565909350cedf1ea1f849de3a70957ba9447c2a19a")

    assert not is_hex64("0" * 63)
    assert not is_hex64("0" * 65)
    assert not is_hex64("g" * 64)
    assert not is_hex64("invalid")
    assert not is_hex64(" " + "0" * 63)
    assert not is_hex64("0" * 64 + "\n")
    assert not is_hex64(b"0" * 64)
    assert not is_hex64(None)


def test_hex_from_int() -> None:
    assert hex_from_int(0) == "0" * 64
    assert hex_from_int(1) == "0" * 63 + "1"
    assert hex_from_int(0xDEADBEEF) == "0" * 56 + "deadbeef"
    assert hex_from_int(2**256 - 1) == "f" * 64
    assert hex_from_int(0xDEADBEEF, 4) == "deadbeef"

    i = 0x914350C04B3189B493D350565909350CEDF1EA1F849DE3A70957BA9447C2A19A
    assert int_from_hex64(hex_from_int(i)) == i

    with pytest.raises(EOTSValueError, match="negative integer: "):
        hex_from_int(-1)
    with pytest.raises(OverflowError):
        hex_from_int(2**256)


def test_bytes_from_octets() -> None:
    assert bytes_from_octets("deadbeef") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(b"\xde\xad\xbe\xef", 4) == b"\xde\xad\xbe\xef"
    assert bytes_from_octets("deadbeef", (4, 8)) == b"\xde\xad\xbe\xef"

    err_msg = "invalid size: 4 bytes instead of 32"
    with pytest.raises(EOTSValueError, match=err_msg):
        bytes_from_octets("deadbeef", 32)
    with pytest.raises(EOTSValueError, match="invalid size: "):
        bytes_from_octets(b"\x00" * 31, (32, 33))
