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

"""Command executor: run one privileged command line, log the outcome.

The policy is fire-and-log. ``run()`` blocks until the command exits
(there is no timeout, a hung firewall tool stalls all further lease
processing), never raises, and returns nothing. A non-zero exit is
handed to the failure sink as a ``CommandExecutionFailure``; the
default sink logs it at error level and drops it. Neither retry nor
rollback is attempted, and "rule already present/absent" cannot be
told apart from a genuine failure.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from dhcpsnoopingd.core import CommandExecutionFailure

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def system(command: str) -> int:
    """Run *command* through the shell and return its exit status."""
    return subprocess.run(command, shell=True, check=False).returncode


def log_failure(failure: CommandExecutionFailure) -> None:
    logger.error('cmd "%s" failed (exit status %d)', failure.command, failure.exit_status)


class CommandExecutor:
    """Runs rendered commands one at a time, in call order."""

    def __init__(
        self,
        runner: Callable[[str], int] | None = None,
        failure_sink: Callable[[CommandExecutionFailure], None] | None = None,
    ) -> None:
        self.runner: Callable[[str], int] = runner or system
        self.failure_sink: Callable[[CommandExecutionFailure], None] = failure_sink or log_failure

    def run(self, command: str) -> None:
        logger.info('run "%s"', command)
        try:
            status = self.runner(command)
        except (OSError, ValueError) as e:
            logger.debug('cannot spawn "%s": %s', command, e)
            status = -1
        if status:
            self.failure_sink(CommandExecutionFailure(command, status))
        else:
            logger.info('cmd "%s" ok', command)
