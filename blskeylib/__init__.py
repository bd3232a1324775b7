#!/usr/bin/env python3

# Copyright (C) 2024-2026 The blskeylib developers
#
# This file is part of blskeylib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of blskeylib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the blskeylib package."

name = "blskeylib"
__version__ = "2026.10.17"
__author__ = "The blskeylib developers"
__author_email__ = "devs@blskeylib.org"
__copyright__ = "Copyright (C) 2024-2026 The blskeylib developers"
__license__ = "MIT License"
