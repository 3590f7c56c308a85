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

"""Backend_ebt: the always-active ebtables backend."""

from __future__ import annotations

from dhcpsnoopingd.driver._backend import Backend
from dhcpsnoopingd.platforms.ebtables._print_rule import PrintRule_ebt


class Backend_ebt(Backend):
    """ebtables backend. Has no flags and cannot be disabled."""

    name = 'ebtables'

    def get_printer(self) -> PrintRule_ebt:
        return PrintRule_ebt(self.config)
