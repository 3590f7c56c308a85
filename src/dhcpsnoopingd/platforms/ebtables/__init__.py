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

"""ebtables platform: rule printer and backend."""

from dhcpsnoopingd.platforms.ebtables._backend import Backend_ebt
from dhcpsnoopingd.platforms.ebtables._print_rule import PrintRule_ebt

__all__ = [
    'Backend_ebt',
    'PrintRule_ebt',
]
