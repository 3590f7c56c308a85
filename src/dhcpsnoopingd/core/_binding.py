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

"""Lease binding: the unit of work handed in by the lease manager.

Also holds the canonical textual forms used in every rendered command:
MAC addresses as six lowercase hex octets joined by colons, IPv4
addresses in dotted-quad notation.
"""

from __future__ import annotations

import dataclasses
import enum
import ipaddress
import re

MAC_LENGTH = 6
MAX_VLAN_ID = 4094

_MAC_RE = re.compile(r'^[0-9A-Fa-f]{1,2}([:-][0-9A-Fa-f]{1,2}){5}$')


class LeaseAction(enum.IntEnum):
    """Lease lifecycle transition."""

    Stop = 0
    Start = 1


def parse_mac(value: bytes | bytearray | str) -> bytes:
    """Return the 6-byte hardware address for *value*.

    Accepts raw bytes or text in ``aa:bb:cc:dd:ee:ff`` / ``aa-bb-...``
    notation. Single-digit octets (``2:0:0:0:0:1``) are accepted as
    printed by ``ether_ntoa``.
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != MAC_LENGTH:
            msg = f'MAC address must be {MAC_LENGTH} bytes, got {len(value)}'
            raise ValueError(msg)
        return bytes(value)
    if isinstance(value, str):
        if not _MAC_RE.match(value):
            msg = f'invalid MAC address: {value!r}'
            raise ValueError(msg)
        return bytes(int(octet, 16) for octet in re.split(r'[:-]', value))
    msg = f'MAC address must be bytes or str, not {type(value).__name__}'
    raise ValueError(msg)


def parse_ip(value) -> ipaddress.IPv4Address:
    """Return *value* as an IPv4 address.

    Accepts 4 packed bytes (network order), dotted-quad text, an
    integer, or an ``IPv4Address``.
    """
    if value is None:
        msg = 'IP address is required'
        raise ValueError(msg)
    if isinstance(value, bool):
        msg = 'IP address must not be a bool'
        raise ValueError(msg)
    if isinstance(value, (bytes, bytearray)) and len(value) != 4:
        msg = f'IPv4 address must be 4 bytes, got {len(value)}'
        raise ValueError(msg)
    try:
        return ipaddress.IPv4Address(bytes(value) if isinstance(value, bytearray) else value)
    except ipaddress.AddressValueError as e:
        raise ValueError(f'invalid IPv4 address: {value!r}') from e


def format_mac(mac: bytes) -> str:
    return ':'.join(f'{octet:02x}' for octet in mac)


def format_ip(ip: ipaddress.IPv4Address) -> str:
    return str(ip)


@dataclasses.dataclass(frozen=True)
class LeaseBinding:
    """One DHCP lease: who (MAC), what (IP), where (bridge, VLAN).

    ``vlan_id`` 0 means untagged traffic. Construction validates the
    preconditions the renderers rely on and raises ``ValueError`` on
    violation; ``ifname`` is opaque apart from rejecting NUL and is not
    checked for shell safety.
    """

    ifname: str
    vlan_id: int
    mac: bytes
    ip: ipaddress.IPv4Address
    action: LeaseAction = LeaseAction.Start

    def __post_init__(self) -> None:
        if not isinstance(self.ifname, str) or not self.ifname:
            msg = 'interface name is required'
            raise ValueError(msg)
        if '\x00' in self.ifname:
            msg = f'interface name contains a NUL byte: {self.ifname!r}'
            raise ValueError(msg)
        if isinstance(self.vlan_id, bool) or not isinstance(self.vlan_id, int):
            msg = f'VLAN id must be an int, not {type(self.vlan_id).__name__}'
            raise ValueError(msg)
        if not 0 <= self.vlan_id <= MAX_VLAN_ID:
            msg = f'VLAN id must be in 0..{MAX_VLAN_ID}, got {self.vlan_id}'
            raise ValueError(msg)
        # normalise so that equality and hashing work on canonical values
        object.__setattr__(self, 'mac', parse_mac(self.mac))
        object.__setattr__(self, 'ip', parse_ip(self.ip))
        object.__setattr__(self, 'action', LeaseAction(self.action))

    @classmethod
    def from_event(cls, ifname, vlan_id, mac, ip, is_start) -> LeaseBinding:
        """Build a binding from the lease-hook callback arguments."""
        action = LeaseAction.Start if is_start else LeaseAction.Stop
        return cls(ifname=ifname, vlan_id=vlan_id, mac=mac, ip=ip, action=action)

    @property
    def is_tagged(self) -> bool:
        return self.vlan_id != 0

    @property
    def mac_str(self) -> str:
        return format_mac(self.mac)

    @property
    def ip_str(self) -> str:
        return format_ip(self.ip)

    def with_action(self, action: LeaseAction) -> LeaseBinding:
        return dataclasses.replace(self, action=action)

    def __str__(self) -> str:
        return f'MAC: {self.mac_str} IP: {self.ip_str} BRIDGE: {self.ifname} VLAN: {self.vlan_id}'
