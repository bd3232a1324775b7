#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

HKDF, the HMAC-based Extract-and-Expand Key Derivation Function,
is implemented according to RFC 5869:
https://tools.ietf.org/html/rfc5869
"""

import hashlib
import hmac
from typing import List

from blskeylib.alias import HashF, Octets
from blskeylib.exceptions import StreamExhaustionError
from blskeylib.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hkdf_extract(salt: Octets, ikm: Octets, hf: HashF = hashlib.sha256) -> bytes:
    """Return the pseudorandom key PRK = HMAC-Hash(salt, IKM).

    see https://tools.ietf.org/html/rfc5869 section 2.2
    """

    salt = bytes_from_octets(salt)
    ikm = bytes_from_octets(ikm)
    if not salt:
        salt = b"\x00" * hf().digest_size
    return hmac.new(salt, ikm, hf).digest()


def hkdf_expand(
    prk: Octets, info: Octets, length: int, hf: HashF = hashlib.sha256
) -> bytes:
    """Return length bytes of output keying material.

    see https://tools.ietf.org/html/rfc5869 section 2.3
    """

    prk = bytes_from_octets(prk)
    info = bytes_from_octets(info)

    hf_size = hf().digest_size
    if not 0 <= length <= 255 * hf_size:
        err_msg = f"cannot expand {length} bytes: "
        err_msg += f"at most {255 * hf_size} bytes available"
        raise StreamExhaustionError(err_msg)

    t = b""
    okm = b""
    i = 0
    while len(okm) < length:
        i += 1
        t = hmac.new(prk, t + info + i.to_bytes(1, "big", signed=False), hf).digest()
        okm += t
    return okm[:length]


def hkdf_expand_chunks(
    prk: Octets,
    info: Octets,
    count: int,
    chunk_size: int,
    hf: HashF = hashlib.sha256,
) -> List[bytes]:
    """Return count sequential chunk_size-byte chunks of the HKDF stream."""

    okm = hkdf_expand(prk, info, count * chunk_size, hf)
    return [okm[n : n + chunk_size] for n in range(0, len(okm), chunk_size)]
