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

"""nftables platform: legacy rule printer, element printer, and backend."""

from dhcpsnoopingd.platforms.nftables._backend import Backend_nft
from dhcpsnoopingd.platforms.nftables._print_element import PrintElement_nft
from dhcpsnoopingd.platforms.nftables._print_rule import PrintRule_nft

__all__ = [
    'Backend_nft',
    'PrintElement_nft',
    'PrintRule_nft',
]
