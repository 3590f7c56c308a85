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

"""Jinja2 template lookup for the provisioning rulesets.

Templates are looked up per platform, first in the user's
``~/dhcpsnoopingd/templates/<platform>/`` and then in the package's
``resources/templates/<platform>/``, so a site can replace a ruleset
without touching the installed package.
"""

from __future__ import annotations

import importlib.resources
import logging
from pathlib import Path

import jinja2

logger = logging.getLogger(__name__)


def template_search_path(platform: str) -> list[str]:
    """Directories searched for *platform* templates, highest priority first."""
    paths = []
    user_dir = Path.home() / 'dhcpsnoopingd' / 'templates' / platform
    if user_dir.is_dir():
        paths.append(str(user_dir))
    package_dir = importlib.resources.files('dhcpsnoopingd') / 'resources' / 'templates' / platform
    paths.append(str(package_dir))
    return paths


class Jinja2Template:
    """One ruleset template, resolved once at construction."""

    def __init__(self, platform: str, template_name: str) -> None:
        self.platform = platform
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_search_path(platform)),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._template = env.get_template(template_name)

    @property
    def filename(self) -> str | None:
        return self._template.filename

    def render(self, context: dict) -> str:
        logger.debug('Rendering %s template %s', self.platform, self.filename)
        return self._template.render(context)
