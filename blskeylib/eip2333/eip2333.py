#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EIP-2333 BLS12-381 Key Generation.

A tree of BLS12-381 secret keys derived from a single seed,
which is the only element requiring backup.

Here, the key tree is implemented according to EIP-2333
https://eips.ethereum.org/EIPS/eip-2333,
with paths following EIP-2334
https://eips.ethereum.org/EIPS/eip-2334.

Only hardened derivation exists: each child secret key is
derived from its parent secret key through a compressed lamport
public key, so that a child key reveals nothing about
its parent or its siblings.
"""

from dataclasses import InitVar, dataclass, field
from typing import Sequence

from dataclasses_json import DataClassJsonMixin, config

from blskeylib.alias import Integer, Octets
from blskeylib.bls12_381 import R, bytes_from_prv_key, int_from_prv_key
from blskeylib.eip2333.der_path import (
    EIP2334DerPath,
    indexes_from_eip2334_path,
    str_from_eip2334_path,
)
from blskeylib.eip2333.hkdf_mod_r import derive_master_sk, hkdf_mod_r
from blskeylib.eip2333.lamport import parent_sk_to_lamport_pk
from blskeylib.exceptions import BLSValueError


def derive_child_sk(parent_sk: Integer, index: int) -> int:
    "Return the secret key of the child node at the given index."

    q = int_from_prv_key(parent_sk)
    lamport_pk = parent_sk_to_lamport_pk(q, index)
    return hkdf_mod_r(lamport_pk)


def derive(prv_key: Integer, der_path: EIP2334DerPath) -> int:
    """Derive a secret key across a path spanning multiple depth levels.

    Valid EIP2334DerPath examples:

    - string like "m/12381/3600/0/0/0"
    - iterable integer indexes
    - one single integer index

    The path is relative to prv_key, not to the master node.
    """

    indexes = indexes_from_eip2334_path(der_path)
    q = int_from_prv_key(prv_key)
    for index in indexes:
        q = derive_child_sk(q, index)
    return q


def derive_key(seed: Octets, der_path: EIP2334DerPath) -> int:
    """Return the secret key at der_path in the tree rooted at seed.

    The path is validated before any derivation work:
    a failure never leaves a partially derived key.
    """

    indexes = indexes_from_eip2334_path(der_path)
    q = derive_master_sk(seed)
    for index in indexes:
        q = derive_child_sk(q, index)
    return q


@dataclass(frozen=True)
class BLSKeyData(DataClassJsonMixin):
    der_path: Sequence[int] = field(
        metadata=config(
            field_name="path",
            encoder=str_from_eip2334_path,
            decoder=indexes_from_eip2334_path,
        ),
    )
    # decimal string in json, to avoid any precision loss
    prv_key: int = field(
        metadata=config(field_name="key", encoder=str, decoder=int),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(
            self, "der_path", indexes_from_eip2334_path(self.der_path)
        )
        if check_validity:
            self.assert_valid()

    @property
    def depth(self) -> int:
        return len(self.der_path)

    @property
    def index(self) -> int:
        return self.der_path[-1] if self.der_path else 0

    @property
    def description(self) -> str:
        return str_from_eip2334_path(self.der_path)

    def assert_valid(self) -> None:
        if not isinstance(self.prv_key, int):
            raise BLSValueError(f"invalid private key type: {type(self.prv_key)}")
        if not 0 < self.prv_key < R:
            raise BLSValueError("private key not in 1..r-1")
        if any(not 0 <= i <= 0xFFFFFFFF for i in self.der_path):
            raise BLSValueError("invalid der_path element")

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 32-byte big-endian secret key."

        if check_validity:
            self.assert_valid()

        return bytes_from_prv_key(self.prv_key)


def derive_key_data(seed: Octets, der_path: EIP2334DerPath) -> BLSKeyData:
    "Return the path and the secret key at der_path in the seed tree."

    indexes = indexes_from_eip2334_path(der_path)
    return BLSKeyData(indexes, derive_key(seed, indexes))
