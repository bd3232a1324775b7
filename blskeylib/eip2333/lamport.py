#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Lamport one-time keys used as the EIP-2333 child derivation mixer.

The parent secret key never enters a hash that could also be computed
from public data: it is first expanded into two lamport secret keys
(one from the parent key, one from its 256-bit complement),
which are then compressed into a single 32-byte lamport public key.

https://eips.ethereum.org/EIPS/eip-2333
"""

from typing import List

from blskeylib.alias import Integer, Octets
from blskeylib.exceptions import BLSValueError
from blskeylib.hashes import hkdf_expand_chunks, hkdf_extract, sha256
from blskeylib.utils import bytes_from_int, int_from_integer

# number of chunks in a lamport secret key
KEY_CHUNK_COUNT = 255
# digest size of SHA256
KEY_CHUNK_SIZE = 32


def flip_bits(i: int, bitlen: int = 256) -> int:
    """Return the bitwise negation of i over a fixed bitlen-bit width."""

    if not 0 <= i < 1 << bitlen:
        raise BLSValueError(f"integer does not fit {bitlen} bits: {i}")
    return i ^ ((1 << bitlen) - 1)


def ikm_to_lamport_sk(ikm: Octets, salt: Octets) -> List[bytes]:
    "Return the 255 32-byte chunks of a lamport secret key."

    prk = hkdf_extract(salt, ikm)
    return hkdf_expand_chunks(prk, b"", KEY_CHUNK_COUNT, KEY_CHUNK_SIZE)


def _salt_from_index(index: int) -> bytes:
    if not 0 <= index <= 0xFFFFFFFF:
        raise BLSValueError(f"invalid index: {index}")
    return index.to_bytes(4, byteorder="big", signed=False)


def lamport_0(parent_sk: Integer, index: int) -> List[bytes]:
    "Return the lamport secret key derived from the parent key."

    ikm = bytes_from_int(int_from_integer(parent_sk))
    return ikm_to_lamport_sk(ikm, _salt_from_index(index))


def lamport_1(parent_sk: Integer, index: int) -> List[bytes]:
    "Return the lamport secret key derived from the flipped parent key."

    # the complement has 256 bits, but its encoding is still minimal
    ikm = bytes_from_int(flip_bits(int_from_integer(parent_sk), 256))
    return ikm_to_lamport_sk(ikm, _salt_from_index(index))


def compress_lamport_pk(lamport0: List[bytes], lamport1: List[bytes]) -> bytes:
    """Return the compressed lamport public key.

    Each chunk is hashed individually;
    all lamport0 digests come first, then all lamport1 digests,
    and the concatenation is hashed once more.
    """

    for lamport_sk in (lamport0, lamport1):
        if len(lamport_sk) != KEY_CHUNK_COUNT:
            err_msg = f"invalid lamport secret key: {len(lamport_sk)} chunks"
            err_msg += f" instead of {KEY_CHUNK_COUNT}"
            raise BLSValueError(err_msg)

    lamport_pk = [sha256(chunk) for chunk in lamport0]
    lamport_pk += [sha256(chunk) for chunk in lamport1]
    return sha256(b"".join(lamport_pk))


def parent_sk_to_lamport_pk(parent_sk: Integer, index: int) -> bytes:
    "Return the 32-byte compressed lamport public key for a child index."

    lamport0 = lamport_0(parent_sk, index)
    lamport1 = lamport_1(parent_sk, index)
    return compress_lamport_pk(lamport0, lamport1)
