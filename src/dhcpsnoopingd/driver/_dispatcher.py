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

"""BackendDispatcher: the lease hook that feeds every backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dhcpsnoopingd.core import LeaseBinding, RenderError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dhcpsnoopingd.driver._backend import Backend
    from dhcpsnoopingd.driver._executor import CommandExecutor

logger = logging.getLogger(__name__)


class BackendDispatcher:
    """Renders a lease event for each backend and runs the commands.

    Backends are visited in the order given (ebtables first), commands
    are executed strictly one after the other on the calling thread.
    """

    def __init__(self, backends: Sequence[Backend], executor: CommandExecutor) -> None:
        self.backends: list[Backend] = list(backends)
        self.executor: CommandExecutor = executor

    def __call__(self, ifname, vlan_id, mac, ip, is_start) -> None:
        """Lease-hook entry point.

        A malformed event (missing interface name, bad address) is a
        caller bug; the ``ValueError`` from ``LeaseBinding`` propagates.
        """
        self.dispatch(LeaseBinding.from_event(ifname, vlan_id, mac, ip, is_start))

    def dispatch(self, binding: LeaseBinding) -> None:
        for backend in self.backends:
            try:
                commands = backend.render(binding)
            except RenderError as e:
                logger.error('%s: cannot render rules for %s: %s', backend.name, binding, e)
                continue
            for cmd in commands:
                self.executor.run(cmd)

