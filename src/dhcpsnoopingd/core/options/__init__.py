# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Typed option keys and schema for the backend configuration.

Usage::

    from dhcpsnoopingd.core.options import BACKEND_DEFAULTS, BackendOption

    binary = raw.get(BackendOption.EBTABLES_BINARY, BACKEND_DEFAULTS.ebtables_binary)
"""

from dhcpsnoopingd.core.options._keys import (
    BackendOption,
    CommandLineFlag,
)
from dhcpsnoopingd.core.options._schemas import (
    BACKEND_DEFAULTS,
    BackendDefaults,
)

__all__ = [
    'BACKEND_DEFAULTS',
    'BackendDefaults',
    'BackendOption',
    'CommandLineFlag',
]
