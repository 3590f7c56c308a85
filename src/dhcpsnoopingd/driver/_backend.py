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

"""Backend base class: one firewall family the lease events are mirrored to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dhcpsnoopingd.compiler import Operation

if TYPE_CHECKING:
    from dhcpsnoopingd.compiler import BasicRulePrinter
    from dhcpsnoopingd.core import BackendConfig, LeaseBinding
    from dhcpsnoopingd.driver._registry import OptionRegistry

logger = logging.getLogger(__name__)


class Backend:
    """Renders lease bindings for one firewall family.

    Subclasses pick the rule printer; ``is_active()`` lets a backend
    switch itself off at runtime, in which case ``render()`` returns
    no commands at all.
    """

    name: str = ''

    def __init__(self, config: BackendConfig) -> None:
        self.config: BackendConfig = config

    def register_options(self, options: OptionRegistry) -> None:
        """Register command-line flags. Override in subclasses."""

    def is_active(self) -> bool:
        return True

    def get_printer(self) -> BasicRulePrinter:
        """Platform-specific printer. Override in subclasses."""
        raise NotImplementedError

    def render(self, binding: LeaseBinding) -> list[str]:
        if not self.is_active():
            return []
        op = Operation.for_action(binding.action)
        logger.debug('%s %s rule: %s', op.value, self.name, binding)
        return self.get_printer().render(binding)
