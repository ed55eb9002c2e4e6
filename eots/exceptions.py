#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by eots from those raised by other codebase (e.g. btclib).

Users are usually better off just dealing with the regular
ValueError and RuntimeError from which the eots versions are derived.
"""


class EOTSValueError(ValueError):
    pass


class EOTSRuntimeError(RuntimeError):
    pass


class EqualChallengesError(EOTSRuntimeError):
    """The two signatures do not leak the private key.

    Raised when the challenges of the two signatures coincide,
    i.e. the same message has been signed twice with the same nonce.
    """
