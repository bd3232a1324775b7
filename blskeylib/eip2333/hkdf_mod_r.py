#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hashing input key material into the BLS12-381 scalar field.

KeyGen of the IETF BLS signature draft standard
(draft-irtf-cfrg-bls-signature-04, section 2.3),
as used by EIP-2333 for both master and child secret keys:

- salt = H("BLS-SIG-KEYGEN-SALT-")
- PRK = HKDF-Extract(salt, IKM || I2OSP(0, 1))
- OKM = HKDF-Expand(PRK, key_info || I2OSP(L, 2), L)
- SK = OS2IP(OKM) mod r

repeated, with salt = H(salt), while SK == 0.
"""

from blskeylib.alias import Octets
from blskeylib.bls12_381 import L, R
from blskeylib.exceptions import InvalidSeedError, StreamExhaustionError
from blskeylib.hashes import hkdf_expand, hkdf_extract, sha256
from blskeylib.utils import bytes_from_int, bytes_from_octets

KEYGEN_SALT = b"BLS-SIG-KEYGEN-SALT-"

# minimum seed length in bytes
SEED_SIZE = 32

# probability of a zero candidate is about 2^-255 per iteration
_MAX_ITERATIONS = 255


def hkdf_mod_r(ikm: Octets, key_info: Octets = b"") -> int:
    """Return a secret key in [1, r-1] from input key material."""

    ikm = bytes_from_octets(ikm) + b"\x00"
    key_info = bytes_from_octets(key_info) + bytes_from_int(L, 2)

    salt = KEYGEN_SALT
    for _ in range(_MAX_ITERATIONS):
        salt = sha256(salt)
        prk = hkdf_extract(salt, ikm)
        okm = hkdf_expand(prk, key_info, L)
        sk = int.from_bytes(okm, byteorder="big", signed=False) % R
        if sk != 0:
            return sk

    err_msg = f"no valid secret key after {_MAX_ITERATIONS} iterations"
    raise StreamExhaustionError(err_msg)


def derive_master_sk(seed: Octets) -> int:
    """Return the secret key of the master node of the tree.

    The seed is the source entropy for the entire tree,
    an octet string of at least 256 bits.
    """

    seed = bytes_from_octets(seed)
    if len(seed) < SEED_SIZE:
        bitlenght = len(seed) * 8
        raise InvalidSeedError(f"too few bits for seed: {bitlenght}")

    return hkdf_mod_r(seed)
