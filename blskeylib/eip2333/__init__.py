#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module blskeylib.eip2333."""

from blskeylib.eip2333.der_path import (
    COIN_TYPE,
    PURPOSE,
    indexes_from_eip2334_path,
    int_from_index_str,
    parse_path,
    signing_key_path,
    str_from_eip2334_path,
    str_from_index_int,
    withdrawal_key_path,
)
from blskeylib.eip2333.eip2333 import (
    BLSKeyData,
    derive,
    derive_child_sk,
    derive_key,
    derive_key_data,
)
from blskeylib.eip2333.hkdf_mod_r import derive_master_sk, hkdf_mod_r
from blskeylib.eip2333.lamport import (
    compress_lamport_pk,
    flip_bits,
    ikm_to_lamport_sk,
    parent_sk_to_lamport_pk,
)

__all__ = [
    "BLSKeyData",
    "COIN_TYPE",
    "PURPOSE",
    "compress_lamport_pk",
    "derive",
    "derive_child_sk",
    "derive_key",
    "derive_key_data",
    "derive_master_sk",
    "flip_bits",
    "hkdf_mod_r",
    "ikm_to_lamport_sk",
    "indexes_from_eip2334_path",
    "int_from_index_str",
    "parent_sk_to_lamport_pk",
    "parse_path",
    "signing_key_path",
    "str_from_eip2334_path",
    "str_from_index_int",
    "withdrawal_key_path",
]
