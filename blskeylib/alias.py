#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e5349553"
#
# use blskeylib.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for seeds, HKDF input key material and salts,
# lamport chunks (32 bytes), serialized secret keys (32 bytes), etc.
Octets = Union[bytes, str]

# Integer is an int or its big-endian representation
# as hex-string or bytes
#
# e.g.
# 6083874454709270928345386274498605044986640685124978867557563392430687146096
# "0x0d7359d57963ab8fbbde1852dcf553fedbc31f464d80ee7d40ae683122b45070"
# b"\x0d\x73..."
#
# use blskeylib.utils.int_from_integer to convert Integer to int
Integer = Union[int, str, bytes]

# hash function, e.g. hashlib.sha256
HashF = Callable[[], Any]
