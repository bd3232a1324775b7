#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BLS12-381 scalar field constants and secret key conversions.

Secret keys are integers in [1, r-1], where r is the prime order
of the BLS12-381 G1/G2 subgroups as defined in the IETF BLS signature
draft standard.
"""

from blskeylib.alias import Integer
from blskeylib.exceptions import BLSValueError
from blskeylib.utils import bytes_from_int, bytes_from_octets, int_from_integer

# group order
R = 52435875175126190479447740508185965837690552500527637822603658699938581184513

# ceil((3 * ceil(log2(r))) / 16)
L = 48

# fixed-width serialization size of a secret key
PRV_KEY_SIZE = 32


def int_from_prv_key(prv_key: Integer) -> int:
    """Return a verified secret key int, i.e. 0 < q < r."""

    if isinstance(prv_key, bytes):
        prv_key = bytes_from_octets(prv_key, PRV_KEY_SIZE)
    q = int_from_integer(prv_key)
    if not 0 < q < R:
        raise BLSValueError(f"private key not in 1..r-1: {hex(q)}")
    return q


def bytes_from_prv_key(prv_key: Integer) -> bytes:
    """Return the 32-byte big-endian serialization of a secret key."""

    q = int_from_prv_key(prv_key)
    return bytes_from_int(q, PRV_KEY_SIZE)
