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

"""Typed option schema with shared defaults.

``BackendDefaults`` is the single source of truth for which options
exist, their types, and the values used when neither the configuration
file nor the command line sets them.
"""

from dataclasses import dataclass


@dataclass
class BackendDefaults:
    """Default values for the firewall backends."""

    ebtables_binary: str = 'ebtables'
    nftables_binary: str = 'nfts'

    chain_name: str = 'dhcpsnooping'
    set_name: str = 'leases'
    map_name: str = 'leases'

    # False builds the daemon without the nftables backend at all
    nftables_support: bool = True
    nftables_disabled: bool = False
    nftables_legacy: bool = False


BACKEND_DEFAULTS = BackendDefaults()
