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

"""Registries the backends are wired into at startup.

``OptionRegistry`` collects long command-line flags together with the
callback to invoke when a flag is given, and hands them to an
``argparse`` parser. ``LeaseHookRegistry`` collects the functions that
are called on every lease start and stop.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import argparse
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class RegisteredOption:
    long_name: str
    has_arg: bool
    callback: Callable
    help: str = ''

    @property
    def dest(self) -> str:
        return 'OPT_' + self.long_name.replace('-', '_').upper()


class OptionRegistry:
    """Long options contributed by the backends."""

    def __init__(self) -> None:
        self._options: dict[str, RegisteredOption] = {}

    def __contains__(self, long_name: str) -> bool:
        return str(long_name) in self._options

    def __iter__(self):
        return iter(self._options.values())

    def register_option(
        self,
        long_name: str,
        has_arg: bool,
        callback: Callable,
        help: str = '',
    ) -> None:
        """Register ``--long_name``.

        *callback* is called without arguments when a flag option is
        present, or with the value for an option taking an argument.
        """
        long_name = str(long_name)
        if long_name in self._options:
            msg = f'option --{long_name} is already registered'
            raise ValueError(msg)
        self._options[long_name] = RegisteredOption(long_name, has_arg, callback, help)

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        for opt in self._options.values():
            if opt.has_arg:
                parser.add_argument(
                    f'--{opt.long_name}',
                    default=None,
                    dest=opt.dest,
                    help=opt.help,
                )
            else:
                parser.add_argument(
                    f'--{opt.long_name}',
                    action='store_true',
                    dest=opt.dest,
                    help=opt.help,
                )

    def dispatch(self, args: argparse.Namespace) -> None:
        """Invoke the callback of every registered option present in *args*."""
        for opt in self._options.values():
            value = getattr(args, opt.dest, None)
            if opt.has_arg:
                if value is not None:
                    logger.debug('Option --%s=%s', opt.long_name, value)
                    opt.callback(value)
            elif value:
                logger.debug('Option --%s', opt.long_name)
                opt.callback()


class LeaseHookRegistry:
    """Functions called as ``fn(ifname, vlan_id, mac, ip, is_start)``."""

    def __init__(self) -> None:
        self._hooks: list[Callable] = []

    def __len__(self) -> int:
        return len(self._hooks)

    def register_lease_hook(self, fn: Callable) -> None:
        self._hooks.append(fn)

    def lease_start_stop(self, ifname, vlan_id, mac, ip, is_start) -> None:
        for hook in self._hooks:
            hook(ifname, vlan_id, mac, ip, is_start)

    def lease_start(self, ifname, vlan_id, mac, ip) -> None:
        self.lease_start_stop(ifname, vlan_id, mac, ip, True)

    def lease_stop(self, ifname, vlan_id, mac, ip) -> None:
        self.lease_start_stop(ifname, vlan_id, mac, ip, False)
