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

"""PrintElement_nft: nftables set/map element commands.

Modern mode never touches rules. The bridge ``filter`` table holds a
set keyed by ``ifname [. vlan] . mac . ip`` that accepts both IPv4 and
ARP traffic, and the bridge ``nat`` table holds a map from
``ifname [. vlan] . ip`` to the MAC ARP replies are rewritten to. Both,
with the rules that consult them, are created once when the ruleset is
loaded (see ``dhcpsnoop-ruleset``); lease events only add and delete
elements::

    nfts add element bridge filter leases { "br0" . 02:00:00:00:00:01 . 10.0.0.5 }
    nfts add element bridge nat leases { "br0" . 10.0.0.5 : 02:00:00:00:00:01 }
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.compiler import (
    BasicRulePrinter,
    ElementDescriptor,
    ElementKind,
    describe_elements,
)

if TYPE_CHECKING:
    from dhcpsnoopingd.core import LeaseBinding


class PrintElement_nft(BasicRulePrinter):
    """Generates nft ``add element`` / ``delete element`` commands."""

    def describe(self, binding: LeaseBinding) -> tuple[ElementDescriptor, ...]:
        return describe_elements(binding)

    def print_descriptor(self, descriptor: ElementDescriptor) -> str:
        if descriptor.kind is ElementKind.FilterSet:
            table, name = 'filter', self.config.set_name
        else:
            table, name = 'nat', self.config.map_name
        return (
            f'{self.config.nftables_binary} {descriptor.operation.value} element '
            f'bridge {table} {name} {{ {self._print_element(descriptor)} }}'
        )

    def _print_element(self, descriptor: ElementDescriptor) -> str:
        binding = descriptor.binding
        key = [f'"{binding.ifname}"']
        if binding.is_tagged:
            key.append(str(binding.vlan_id))
        if descriptor.kind is ElementKind.FilterSet:
            key += [binding.mac_str, binding.ip_str]
            return ' . '.join(key)
        key.append(binding.ip_str)
        return f'{" . ".join(key)} : {binding.mac_str}'
