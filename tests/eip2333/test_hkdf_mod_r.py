#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `blskeylib.eip2333.hkdf_mod_r` module."

import secrets

import pytest

from blskeylib.bls12_381 import R
from blskeylib.eip2333.hkdf_mod_r import (
    SEED_SIZE,
    derive_master_sk,
    hkdf_mod_r,
)
from blskeylib.exceptions import BLSValueError, InvalidSeedError


def test_hkdf_mod_r() -> None:

    for _ in range(8):
        ikm = secrets.token_bytes(32)
        sk = hkdf_mod_r(ikm)
        assert 0 < sk < R
        assert sk == hkdf_mod_r(ikm)
        assert sk == hkdf_mod_r(ikm.hex())
        # the empty key_info is the default
        assert sk == hkdf_mod_r(ikm, b"")
        assert sk != hkdf_mod_r(ikm, b"key_info")


def test_hkdf_mod_r_key_info() -> None:

    ikm = bytes(32)
    sk1 = hkdf_mod_r(ikm, b"\x01")
    sk2 = hkdf_mod_r(ikm, b"\x02")
    assert sk1 != sk2
    assert 0 < sk1 < R
    assert 0 < sk2 < R


def test_derive_master_sk() -> None:

    assert SEED_SIZE == 32

    seed = secrets.token_bytes(SEED_SIZE)
    assert derive_master_sk(seed) == hkdf_mod_r(seed)

    # longer seeds are fine
    seed = secrets.token_bytes(64)
    assert derive_master_sk(seed) == hkdf_mod_r(seed)


def test_seed_boundary() -> None:

    seed = bytes(range(32))
    assert 0 < derive_master_sk(seed) < R

    with pytest.raises(InvalidSeedError, match="too few bits for seed: 248"):
        derive_master_sk(seed[:31])

    with pytest.raises(BLSValueError, match="too few bits for seed: 0"):
        derive_master_sk(b"")

    with pytest.raises(InvalidSeedError, match="too few bits for seed: "):
        derive_master_sk(seed[:31].hex())
