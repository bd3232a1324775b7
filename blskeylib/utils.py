#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Big-endian conversions between integers and octet strings,
as in the I2OSP/OS2IP primitives of RFC 8017.
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from blskeylib.alias import Integer, Octets
from blskeylib.exceptions import BLSValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise BLSValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def bytes_from_int(i: int, size: Optional[int] = None) -> bytes:
    """Return the big-endian encoding of a non-negative integer.

    Without size, the minimal encoding is returned:
    no leading zero bytes, and zero is encoded as the empty string.
    With size, the encoding is fixed-width and left-padded with zeros.
    """

    if i < 0:
        raise BLSValueError(f"negative integer: {i}")
    if size is None:
        size = (i.bit_length() + 7) // 8
    elif i.bit_length() > size * 8:
        raise BLSValueError(f"integer too large for {size} bytes: {hex(i)}")
    return i.to_bytes(size, byteorder="big", signed=False)

