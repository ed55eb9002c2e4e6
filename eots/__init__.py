#!/usr/bin/env python3

# Copyright (C) 2024 The eots developers
#
# This file is part of eots. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eots including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eots package."

name = "eots"
__version__ = "2024.3.1"
__author__ = "The eots developers"
__author_email__ = "devs@eots.dev"
__copyright__ = "Copyright (C) 2024 The eots developers"
__license__ = "MIT License"
