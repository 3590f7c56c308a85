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

"""Backend_nft: the optional nftables backend.

Two independent switches, both set once at startup:

- ``--disable-nftables`` turns the backend off; it then renders nothing.
- ``--nftables-legacy`` selects per-rule commands (``PrintRule_nft``)
  instead of set/map elements (``PrintElement_nft``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.core.options import CommandLineFlag
from dhcpsnoopingd.driver._backend import Backend
from dhcpsnoopingd.platforms.nftables._print_element import PrintElement_nft
from dhcpsnoopingd.platforms.nftables._print_rule import PrintRule_nft

if TYPE_CHECKING:
    from dhcpsnoopingd.compiler import BasicRulePrinter
    from dhcpsnoopingd.driver._registry import OptionRegistry


class Backend_nft(Backend):
    """nftables backend in legacy (rule) or modern (element) mode."""

    name = 'nftables'

    def register_options(self, options: OptionRegistry) -> None:
        options.register_option(
            CommandLineFlag.DISABLE_NFTABLES,
            False,
            self.config.disable_nftables,
            help='do not mirror leases into nftables',
        )
        options.register_option(
            CommandLineFlag.NFTABLES_LEGACY,
            False,
            self.config.enable_nftables_legacy,
            help='add/delete nftables rules instead of set and map elements',
        )

    def is_active(self) -> bool:
        return not self.config.nftables_disabled

    def get_printer(self) -> BasicRulePrinter:
        if self.config.nftables_legacy:
            return PrintRule_nft(self.config)
        return PrintElement_nft(self.config)
