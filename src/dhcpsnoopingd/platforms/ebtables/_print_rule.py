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

"""PrintRule_ebt: ebtables command generation from rule descriptors.

Each descriptor becomes one ``ebtables`` invocation, e.g.::

    ebtables -A dhcpsnooping -s 02:00:00:00:00:01 --proto ipv4 \
        --ip-source 10.0.0.5 --logical-in br0 -j ACCEPT

The ARP dnat rule goes to the ``nat`` table and uses
``--dnat-target CONTINUE`` so that later rules are still evaluated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.compiler import (
    BasicRulePrinter,
    Operation,
    RuleDescriptor,
    TrafficClass,
    describe_rules,
)

if TYPE_CHECKING:
    from dhcpsnoopingd.core import LeaseBinding

_OP_FLAGS = {
    Operation.Add: '-A',
    Operation.Delete: '-D',
}

_IP_MATCH = {
    TrafficClass.IPv4Accept: '--ip-source',
    TrafficClass.ArpAccept: '--arp-ip-src',
    TrafficClass.ArpDnat: '--arp-ip-dst',
}


class PrintRule_ebt(BasicRulePrinter):
    """Generates ebtables commands for the three rules of a binding."""

    def describe(self, binding: LeaseBinding) -> tuple[RuleDescriptor, ...]:
        return describe_rules(binding)

    def print_descriptor(self, descriptor: RuleDescriptor) -> str:
        binding = descriptor.binding
        tc = descriptor.traffic_class

        parts = [self.config.ebtables_binary]
        if tc.is_nat:
            parts += ['-t', 'nat']
        parts += [_OP_FLAGS[descriptor.operation], self.config.chain_name]

        # the dnat rule matches on the ARP target, not on the sender
        if not tc.is_nat:
            parts += ['-s', binding.mac_str]

        parts += self._print_proto(descriptor)
        parts += [_IP_MATCH[tc], binding.ip_str]
        parts += ['--logical-in', binding.ifname]
        parts += self._print_target(descriptor)
        return ' '.join(parts)

    def _print_proto(self, descriptor: RuleDescriptor) -> list[str]:
        """Protocol match, with the 802.1Q qualifier for tagged bindings."""
        binding = descriptor.binding
        encap = descriptor.traffic_class.encapsulated_protocol
        if not binding.is_tagged:
            return ['--proto', encap]
        return [
            '--proto',
            '802_1Q',
            '--vlan-id',
            str(binding.vlan_id),
            '--vlan-encap',
            encap,
        ]

    def _print_target(self, descriptor: RuleDescriptor) -> list[str]:
        if descriptor.traffic_class.is_nat:
            return [
                '-j',
                'dnat',
                '--to-destination',
                descriptor.binding.mac_str,
                '--dnat-target',
                'CONTINUE',
            ]
        return ['-j', 'ACCEPT']
