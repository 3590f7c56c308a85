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

"""Canonical configuration key definitions using StrEnum.

The same keys are used in the YAML configuration file and in code
reading ``BackendConfig``, so a typo fails at import time instead of
silently falling back to a default.

Example:
    from dhcpsnoopingd.core.options import BackendOption

    config.set_option(BackendOption.CHAIN_NAME, 'snoop')
"""

from enum import StrEnum


class BackendOption(StrEnum):
    """Firewall backend option keys."""

    # Tool paths
    EBTABLES_BINARY = 'ebtables_binary'
    NFTABLES_BINARY = 'nftables_binary'

    # Object names in the firewall ruleset
    CHAIN_NAME = 'chain_name'
    SET_NAME = 'set_name'
    MAP_NAME = 'map_name'

    # nftables backend
    NFTABLES_SUPPORT = 'nftables_support'
    NFTABLES_DISABLED = 'nftables_disabled'
    NFTABLES_LEGACY = 'nftables_legacy'


class CommandLineFlag(StrEnum):
    """Long option names registered by the backends."""

    DISABLE_NFTABLES = 'disable-nftables'
    NFTABLES_LEGACY = 'nftables-legacy'
