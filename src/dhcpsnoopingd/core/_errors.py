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

"""Error types shared across the rule synchronization engine.

Only ``RenderError`` and ``ConfigError`` are ever raised.
``CommandExecutionFailure`` is a plain record handed to the executor's
failure sink; command failures never propagate to the caller.
"""

from __future__ import annotations

import dataclasses


class RenderError(Exception):
    """A binding could not be turned into command text."""


class CommandTooLongError(RenderError):
    """Rendered command exceeds the maximum command length."""

    def __init__(self, command: str, limit: int) -> None:
        super().__init__(
            f'rendered command is {len(command.encode())} bytes long, limit is {limit}',
        )
        self.command = command
        self.limit = limit


class ConfigError(Exception):
    """The configuration file is unreadable or holds invalid values."""


@dataclasses.dataclass(frozen=True)
class CommandExecutionFailure:
    """A privileged command exited with a non-zero status."""

    command: str
    exit_status: int

    def __str__(self) -> str:
        return f'cmd "{self.command}" failed (exit status {self.exit_status})'
