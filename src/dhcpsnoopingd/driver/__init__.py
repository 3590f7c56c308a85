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

"""Driver infrastructure: backends, dispatch, execution, and wiring."""

from ._backend import Backend
from ._dispatcher import BackendDispatcher
from ._executor import CommandExecutor, log_failure, system
from ._registry import LeaseHookRegistry, OptionRegistry
from ._ruleset import render_ruleset
from ._startup import build_backends, setup

__all__ = [
    'Backend',
    'BackendDispatcher',
    'CommandExecutor',
    'LeaseHookRegistry',
    'OptionRegistry',
    'build_backends',
    'log_failure',
    'render_ruleset',
    'setup',
    'system',
]
