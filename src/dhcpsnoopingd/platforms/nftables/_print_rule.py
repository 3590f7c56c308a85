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

"""PrintRule_nft: legacy nftables rule commands from rule descriptors.

Legacy mode mirrors the ebtables layout: three rules per binding, two
in the bridge ``filter`` table and the ARP dnat rule in the bridge
``nat`` table, e.g.::

    nfts add rule bridge filter dhcpsnooping ether saddr 02:00:00:00:00:01 \
        ip saddr 10.0.0.5 meta ibrname "br0" return

nft cannot delete a rule by its statement (only by handle), so the
``delete rule`` commands emitted on lease expiry are best effort and
typically fail; the failure is logged by the executor like any other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.compiler import (
    BasicRulePrinter,
    RuleDescriptor,
    TrafficClass,
    describe_rules,
)

if TYPE_CHECKING:
    from dhcpsnoopingd.core import LeaseBinding


class PrintRule_nft(BasicRulePrinter):
    """Generates legacy nft ``add rule`` / ``delete rule`` commands."""

    def describe(self, binding: LeaseBinding) -> tuple[RuleDescriptor, ...]:
        return describe_rules(binding)

    def print_descriptor(self, descriptor: RuleDescriptor) -> str:
        binding = descriptor.binding
        tc = descriptor.traffic_class
        table = 'nat' if tc.is_nat else 'filter'

        parts = [
            self.config.nftables_binary,
            descriptor.operation.value,
            'rule',
            'bridge',
            table,
            self.config.chain_name,
        ]
        if not tc.is_nat:
            parts += ['ether', 'saddr', binding.mac_str]
        if binding.is_tagged:
            parts += ['vlan', 'id', str(binding.vlan_id)]

        if tc is TrafficClass.IPv4Accept:
            parts += ['ip', 'saddr', binding.ip_str]
        elif tc is TrafficClass.ArpAccept:
            parts += ['arp', 'saddr', 'ip', binding.ip_str]
        else:
            parts += ['arp', 'daddr', 'ip', binding.ip_str]

        if tc.is_nat:
            parts += ['meta', 'ibrname', binding.ifname, 'dnat', binding.mac_str]
        else:
            parts += ['meta', 'ibrname', f'"{binding.ifname}"']
        parts.append('return')
        return ' '.join(parts)
