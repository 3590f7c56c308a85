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

"""Base class for backend rule printers.

A printer turns descriptors into command lines. Subclasses implement
``describe()`` (which descriptors a binding expands into) and
``print_descriptor()`` (the text of one command); ``render()`` ties
both together and enforces the command length limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dhcpsnoopingd.core import CommandTooLongError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dhcpsnoopingd.core import BackendConfig, LeaseBinding

# The daemon this engine replaces formatted into a 64 KiB buffer.
MAX_COMMAND_LENGTH = 65534


class BasicRulePrinter:
    """Renders the command lines for one lease binding."""

    def __init__(self, config: BackendConfig) -> None:
        self.config = config

    def describe(self, binding: LeaseBinding) -> Sequence:
        raise NotImplementedError

    def print_descriptor(self, descriptor) -> str:
        raise NotImplementedError

    def render(self, binding: LeaseBinding) -> list[str]:
        """Return the ordered command lines for *binding*.

        Raises ``CommandTooLongError`` if any command exceeds
        ``MAX_COMMAND_LENGTH`` bytes once encoded.
        """
        commands = []
        for descriptor in self.describe(binding):
            cmd = self.print_descriptor(descriptor)
            if len(cmd.encode()) > MAX_COMMAND_LENGTH:
                raise CommandTooLongError(cmd, MAX_COMMAND_LENGTH)
            commands.append(cmd)
        return commands
