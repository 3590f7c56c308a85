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

"""Provisioning ruleset for the objects lease events write into.

The engine only appends/deletes rules (ebtables, legacy nftables) or
adds/deletes set and map elements (modern nftables). The chains, sets
and maps themselves, and the rules consulting them, have to exist
before the first lease event; this module renders them once from the
same ``BackendConfig`` the backends use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.driver._jinja2_template import Jinja2Template

if TYPE_CHECKING:
    from dhcpsnoopingd.core import BackendConfig

TEMPLATES = {
    'ebtables': 'ruleset.sh.j2',
    'nftables': 'ruleset.nft.j2',
}


def render_ruleset(platform: str, config: BackendConfig, vlan: bool = False) -> str:
    """Render the provisioning ruleset for *platform*.

    *vlan* selects set/map keys with a VLAN component; a deployment
    uses either tagged or untagged keys, since one nft set has exactly
    one key type.
    """
    try:
        template_name = TEMPLATES[platform]
    except KeyError:
        msg = f'unknown platform: {platform}'
        raise ValueError(msg) from None

    context = {
        'ebtables': config.ebtables_binary,
        'nft': config.nftables_binary,
        'chain': config.chain_name,
        'set_name': config.set_name,
        'map_name': config.map_name,
        'legacy': config.nftables_legacy,
        'vlan': vlan,
    }
    return Jinja2Template(platform, template_name).render(context)
