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

"""Explicit startup wiring.

Replaces load-time self-registration: the caller decides which
backends exist, each backend registers its flags, and one dispatcher
is registered as the lease hook. Must run before the command line is
parsed and before the first lease event.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dhcpsnoopingd.driver._dispatcher import BackendDispatcher
from dhcpsnoopingd.driver._executor import CommandExecutor

if TYPE_CHECKING:
    from dhcpsnoopingd.core import BackendConfig
    from dhcpsnoopingd.driver._backend import Backend
    from dhcpsnoopingd.driver._registry import LeaseHookRegistry, OptionRegistry

logger = logging.getLogger(__name__)


def build_backends(config: BackendConfig) -> list[Backend]:
    """ebtables always, nftables only when built with nftables support."""
    from dhcpsnoopingd.platforms.ebtables import Backend_ebt
    from dhcpsnoopingd.platforms.nftables import Backend_nft

    backends: list[Backend] = [Backend_ebt(config)]
    if config.nftables_support:
        backends.append(Backend_nft(config))
    return backends


def setup(
    config: BackendConfig,
    options: OptionRegistry,
    hooks: LeaseHookRegistry,
    executor: CommandExecutor | None = None,
) -> BackendDispatcher:
    """Wire the backends into *options* and *hooks*; return the dispatcher."""
    backends = build_backends(config)
    for backend in backends:
        backend.register_options(options)

    dispatcher = BackendDispatcher(backends, executor or CommandExecutor())
    hooks.register_lease_hook(dispatcher)
    logger.debug('Active backends: %s', ', '.join(b.name for b in backends))
    return dispatcher
