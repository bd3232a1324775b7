#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `blskeylib.eip2333.eip2333` module."

import json
import secrets
from os import path

import pytest

from blskeylib.bls12_381 import R
from blskeylib.eip2333 import (
    BLSKeyData,
    derive,
    derive_child_sk,
    derive_key,
    derive_key_data,
    derive_master_sk,
    hkdf_mod_r,
    parent_sk_to_lamport_pk,
    signing_key_path,
    withdrawal_key_path,
)
from blskeylib.exceptions import (
    BLSValueError,
    IndexOverflowError,
    InvalidPathError,
    InvalidSeedError,
)

data_folder = path.join(path.dirname(__file__), "_data")


def _test_vectors():
    filename = path.join(data_folder, "eip2333_test_vectors.json")
    with open(filename, "r", encoding="ascii") as file_:
        return json.load(file_)


def test_eip2333_vectors() -> None:
    """EIP-2333 test cases #0, #1, #2, and #3

    https://eips.ethereum.org/EIPS/eip-2333#test-cases
    """

    for test_vector in _test_vectors():
        seed = bytes.fromhex(test_vector["seed"])
        master_sk = int(test_vector["master_SK"])
        index = test_vector["child_index"]
        child_sk = int(test_vector["child_SK"])

        assert derive_master_sk(seed) == master_sk
        assert derive_child_sk(master_sk, index) == child_sk

        assert derive_key(seed, "m") == master_sk
        assert derive_key(seed, f"m/{index}") == child_sk
        assert derive_key(seed, [index]) == child_sk
        assert derive_key(seed, index) == child_sk
        assert derive_key(test_vector["seed"], f" m / {index} ") == child_sk

        assert derive(master_sk, f"m/{index}") == child_sk
        assert derive(master_sk, "m") == master_sk


def test_child_sk_from_lamport_pk() -> None:

    seed = bytes.fromhex(_test_vectors()[0]["seed"])
    master_sk = derive_master_sk(seed)
    lamport_pk = parent_sk_to_lamport_pk(master_sk, 0)
    assert derive_child_sk(master_sk, 0) == hkdf_mod_r(lamport_pk)


def test_prefix_independence() -> None:

    seed = secrets.token_bytes(32)
    a, b = 12381, 3600
    master_sk = derive_master_sk(seed)
    child_sk = derive_child_sk(master_sk, a)
    grandchild_sk = derive_child_sk(child_sk, b)

    assert derive_key(seed, f"m/{a}/{b}") == grandchild_sk
    assert derive(master_sk, [a, b]) == grandchild_sk
    assert derive(child_sk, b) == grandchild_sk


def test_determinism_and_range() -> None:

    seed = secrets.token_bytes(32)
    der_path = signing_key_path(0)
    sk = derive_key(seed, der_path)
    assert 0 < sk < R
    assert sk == derive_key(seed, der_path)
    assert sk == derive_key(seed.hex(), der_path)

    withdrawal_sk = derive_key(seed, withdrawal_key_path(0))
    assert 0 < withdrawal_sk < R
    assert derive(withdrawal_sk, "m/0") == sk


def test_sibling_distinctness() -> None:

    master_sk = derive_master_sk(secrets.token_bytes(32))
    siblings = [derive_child_sk(master_sk, i) for i in (0, 1, 2, 0xFFFFFFFF)]
    assert len(set(siblings)) == len(siblings)
    assert master_sk not in siblings
    assert all(0 < sk < R for sk in siblings)


def test_derive_exceptions() -> None:

    seed = bytes(32)

    # path is checked before the seed
    with pytest.raises(InvalidPathError, match="invalid path: "):
        derive_key(seed[:31], "1/2")
    with pytest.raises(InvalidPathError, match="invalid path: "):
        derive_key(seed, "m//1")
    with pytest.raises(IndexOverflowError, match="invalid index: "):
        derive_key(seed, "m/4294967296")

    with pytest.raises(InvalidSeedError, match="too few bits for seed: 248"):
        derive_key(seed[:31], "m/0")
    assert 0 < derive_key(seed, "m/0") < R

    for prv_key in (0, R, -1):
        with pytest.raises(BLSValueError, match="private key not in 1..r-1: "):
            derive_child_sk(prv_key, 0)
        with pytest.raises(BLSValueError, match="private key not in 1..r-1: "):
            derive(prv_key, "m")

    with pytest.raises(BLSValueError, match="invalid size: 1 bytes instead of 32"):
        derive_child_sk(b"\x01", 0)

    with pytest.raises(BLSValueError, match="invalid index: "):
        derive_child_sk(1, 0xFFFFFFFF + 1)


def test_bls_key_data() -> None:

    test_vector = _test_vectors()[1]
    der_path = f"m/{test_vector['child_index']}"
    key_data = derive_key_data(test_vector["seed"], der_path)

    assert isinstance(key_data, BLSKeyData)
    key_data.assert_valid()
    assert key_data.prv_key == int(test_vector["child_SK"])
    assert key_data.der_path == [test_vector["child_index"]]
    assert key_data.description == der_path
    assert key_data.depth == 1
    with pytest.raises(TypeError):
        len(key_data)  # type: ignore
    assert key_data.index == test_vector["child_index"]

    serialized = key_data.serialize()
    assert len(serialized) == 32
    assert int.from_bytes(serialized, "big") == key_data.prv_key

    # BLSKeyData dataclass to dict
    key_data_dict = key_data.to_dict()
    assert key_data_dict == {"path": der_path, "key": test_vector["child_SK"]}

    # BLSKeyData dataclass from dict
    key_data2 = BLSKeyData.from_dict(key_data_dict)
    assert key_data2 == key_data

    # BLSKeyData json round trip
    assert BLSKeyData.from_json(key_data.to_json()) == key_data

    master_key_data = BLSKeyData("m", int(test_vector["master_SK"]))
    assert master_key_data.der_path == []
    assert master_key_data.depth == 0
    assert master_key_data.index == 0
    assert master_key_data.description == "m"


def test_bls_key_data_exceptions() -> None:

    with pytest.raises(BLSValueError, match="private key not in 1..r-1"):
        BLSKeyData("m/0", 0)
    with pytest.raises(BLSValueError, match="private key not in 1..r-1"):
        BLSKeyData([0], R)
    with pytest.raises(IndexOverflowError, match="invalid index: "):
        BLSKeyData([0xFFFFFFFF + 1], 1)
    with pytest.raises(InvalidPathError, match="invalid path: "):
        BLSKeyData("m//0", 1)

    key_data = BLSKeyData([0], 0, check_validity=False)
    with pytest.raises(BLSValueError, match="private key not in 1..r-1"):
        key_data.serialize()
    with pytest.raises(BLSValueError, match="private key not in 1..r-1: "):
        key_data.serialize(check_validity=False)
