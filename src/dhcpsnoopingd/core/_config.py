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

"""Backend configuration: process-wide, written during startup only.

``BackendConfig`` starts out with the ``BackendDefaults`` values, is
updated from the optional YAML configuration file and then by the
command-line option callbacks, and is read-only once the first lease
event has been dispatched. No locking is done; all writes happen before
the lease manager starts delivering events.
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib

import yaml

from ._errors import ConfigError
from .options import BACKEND_DEFAULTS, BackendDefaults, BackendOption

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(option.value for option in BackendOption)


@dataclasses.dataclass
class BackendConfig(BackendDefaults):
    """Configuration shared by the dispatcher and all renderers."""

    def disable_nftables(self) -> None:
        self.nftables_disabled = True

    def enable_nftables_legacy(self) -> None:
        # nft cannot delete a rule by its statement, only by handle, and
        # no handle cache is kept here; legacy teardown is best effort
        self.nftables_legacy = True

    def set_option(self, key: str | BackendOption, value) -> None:
        """Set one option, checking the value against the default's type."""
        try:
            option = BackendOption(key)
        except ValueError:
            msg = f'unknown option: {key}'
            raise ConfigError(msg) from None

        expected = type(getattr(BACKEND_DEFAULTS, option.value))
        if expected is bool:
            if not isinstance(value, bool):
                msg = f'{option}: expected true/false, got {value!r}'
                raise ConfigError(msg)
        elif not isinstance(value, str) or not value.strip():
            msg = f'{option}: expected a non-empty string, got {value!r}'
            raise ConfigError(msg)
        else:
            value = value.strip()
        setattr(self, option.value, value)

    def update(self, data: dict) -> None:
        """Apply a mapping of option keys; unknown keys are ignored."""
        for key, value in data.items():
            if key not in _KNOWN_KEYS:
                logger.warning('Ignoring unknown configuration key: %s', key)
                continue
            self.set_option(key, value)


def load_config(path: str | pathlib.Path | None = None) -> BackendConfig:
    """Return a ``BackendConfig``, optionally updated from a YAML file."""
    config = BackendConfig()
    if path is None:
        return config

    path = pathlib.Path(path)
    logger.debug('Loading configuration from %s', path)
    try:
        with path.open(encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f'cannot read {path}: {e.strerror}'
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f'cannot parse {path}: {e}'
        raise ConfigError(msg) from e

    if data is None:
        return config
    if not isinstance(data, dict):
        msg = f'{path}: expected a mapping at the top level'
        raise ConfigError(msg)
    config.update(data)
    return config
