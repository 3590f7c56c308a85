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

"""Structured rule descriptors.

A lease binding expands into descriptors before any text is produced:

- three ``RuleDescriptor`` objects for rule based backends (ebtables,
  legacy nftables), always in the order IPv4 accept, ARP accept,
  ARP dnat;
- two ``ElementDescriptor`` objects for set/map based backends (modern
  nftables), filter set element first, NAT map element second.

Teardown uses the same descriptors in the same order; only the
operation differs.
"""

from __future__ import annotations

import dataclasses
import enum

from dhcpsnoopingd.core import LeaseAction, LeaseBinding


class Operation(enum.Enum):
    """Firewall mutation requested by a lease transition."""

    Add = 'add'
    Delete = 'delete'

    @classmethod
    def for_action(cls, action: LeaseAction) -> Operation:
        return cls.Add if action == LeaseAction.Start else cls.Delete


class TrafficClass(enum.Enum):
    """The three logical rules every binding maps to."""

    IPv4Accept = 'ipv4'
    ArpAccept = 'arp'
    ArpDnat = 'arp-dnat'

    @property
    def is_nat(self) -> bool:
        return self is TrafficClass.ArpDnat

    @property
    def encapsulated_protocol(self) -> str:
        """Inner frame type: ``ipv4`` or ``arp``."""
        return 'ipv4' if self is TrafficClass.IPv4Accept else 'arp'


class ElementKind(enum.Enum):
    """Pre-provisioned nftables objects that receive elements."""

    FilterSet = 'filter'
    NatMap = 'nat'


RULE_ORDER = (
    TrafficClass.IPv4Accept,
    TrafficClass.ArpAccept,
    TrafficClass.ArpDnat,
)

ELEMENT_ORDER = (
    ElementKind.FilterSet,
    ElementKind.NatMap,
)


@dataclasses.dataclass(frozen=True)
class RuleDescriptor:
    traffic_class: TrafficClass
    binding: LeaseBinding

    @property
    def operation(self) -> Operation:
        return Operation.for_action(self.binding.action)


@dataclasses.dataclass(frozen=True)
class ElementDescriptor:
    kind: ElementKind
    binding: LeaseBinding

    @property
    def operation(self) -> Operation:
        return Operation.for_action(self.binding.action)


def describe_rules(binding: LeaseBinding) -> tuple[RuleDescriptor, ...]:
    return tuple(RuleDescriptor(tc, binding) for tc in RULE_ORDER)


def describe_elements(binding: LeaseBinding) -> tuple[ElementDescriptor, ...]:
    return tuple(ElementDescriptor(kind, binding) for kind in ELEMENT_ORDER)
