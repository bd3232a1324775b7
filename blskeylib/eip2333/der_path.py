#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EIP-2334 derivation path.

An EIP-2334 derivation path can be represented as:

- "m/12381/3600/0/0/0" string
- sequence of integer indexes (even a single int)

All EIP-2333 derivations are hardened,
so there is no hardening marker:
every index is a plain 32-bit unsigned integer.

https://eips.ethereum.org/EIPS/eip-2334
"""

import re
from typing import List, Sequence, Union

from blskeylib.exceptions import IndexOverflowError, InvalidPathError

# BLS12-381
PURPOSE = 12381
# the coin number, separating the keys used for different chains
COIN_TYPE = 3600

_PATH_REGEX = re.compile(r"m(/[0-9]+)*")


def int_from_index_str(s: str) -> int:

    s = s.strip()
    # more than ten significant digits never fit 32 bits
    if len(s.lstrip("0")) > 10:
        raise IndexOverflowError(f"invalid index: {s}")
    index = int(s)
    if not 0 <= index <= 0xFFFFFFFF:
        raise IndexOverflowError(f"invalid index: {index}")
    return index


def str_from_index_int(i: int) -> str:

    if not 0 <= i <= 0xFFFFFFFF:
        raise IndexOverflowError(f"invalid index: {i}")
    return str(i)


def parse_path(path: str) -> List[int]:
    """Return the child indexes of a "m/i1/i2/.../in" path string.

    Blanks are ignored; the root marker "m" contributes no index.
    """

    stripped = "".join(path.split())
    if not _PATH_REGEX.fullmatch(stripped):
        raise InvalidPathError(f"invalid path: {path!r}")

    return [int_from_index_str(s) for s in stripped.split("/")[1:]]


EIP2334DerPath = Union[str, Sequence[int], int]


def indexes_from_eip2334_path(der_path: EIP2334DerPath) -> List[int]:

    if isinstance(der_path, str):
        return parse_path(der_path)

    if isinstance(der_path, int):
        der_path = [der_path]

    indexes = [int(i) for i in der_path]
    for i in indexes:
        if not 0 <= i <= 0xFFFFFFFF:
            raise IndexOverflowError(f"invalid index: {i}")
    return indexes


def str_from_eip2334_path(der_path: EIP2334DerPath) -> str:
    indexes = indexes_from_eip2334_path(der_path)
    return "/".join(["m"] + [str_from_index_int(i) for i in indexes])


def withdrawal_key_path(account: int) -> str:
    "Return the m/12381/3600/account/0 withdrawal key path."
    return str_from_eip2334_path([PURPOSE, COIN_TYPE, account, 0])


def signing_key_path(account: int) -> str:
    "Return the m/12381/3600/account/0/0 signing key path."
    return str_from_eip2334_path([PURPOSE, COIN_TYPE, account, 0, 0])
