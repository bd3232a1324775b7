#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by blskeylib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and RuntimeError
from which the blskeylib versions are derived.
"""


class BLSValueError(ValueError):
    pass


class InvalidSeedError(BLSValueError):
    pass


class InvalidPathError(BLSValueError):
    pass


class IndexOverflowError(InvalidPathError):
    pass


class BLSRuntimeError(RuntimeError):
    pass


class StreamExhaustionError(BLSRuntimeError):
    pass
