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

"""Shared pytest fixtures for the rule printer and driver tests."""

from pathlib import Path

import pytest

from dhcpsnoopingd.core import BackendConfig, LeaseAction, LeaseBinding
from dhcpsnoopingd.driver import CommandExecutor

EXPECTED_OUTPUT_DIR = Path(__file__).parent / 'expected-output'

MAC = '02:00:00:00:00:01'
IP = '10.0.0.5'

# Scenario name -> LeaseBinding arguments. Expected output for each
# platform lives in expected-output/<platform>/<scenario>.cmds
SCENARIOS = {
    'untagged_start': {'ifname': 'br0', 'vlan_id': 0, 'action': LeaseAction.Start},
    'untagged_stop': {'ifname': 'br0', 'vlan_id': 0, 'action': LeaseAction.Stop},
    'vlan100_start': {'ifname': 'br0', 'vlan_id': 100, 'action': LeaseAction.Start},
    'vlan100_stop': {'ifname': 'br0', 'vlan_id': 100, 'action': LeaseAction.Stop},
}


def scenario_binding(name: str) -> LeaseBinding:
    return LeaseBinding(mac=MAC, ip=IP, **SCENARIOS[name])


def discover_test_cases(platform: str) -> list[str]:
    """Return the scenario names that have an expected output file."""
    platform_dir = EXPECTED_OUTPUT_DIR / platform
    if not platform_dir.exists():
        return []
    return [p.stem for p in sorted(platform_dir.glob('*.cmds')) if p.stem in SCENARIOS]


def read_expected(platform: str, scenario: str) -> list[str]:
    path = EXPECTED_OUTPUT_DIR / platform / f'{scenario}.cmds'
    return path.read_text(encoding='utf-8').splitlines()


class RecordingRunner:
    """Stand-in for the shell: records commands, returns canned statuses.

    *statuses* maps a command index (0-based, in call order) to the exit
    status to return for it; all other commands succeed.
    """

    def __init__(self, statuses: dict[int, int] | None = None) -> None:
        self.commands: list[str] = []
        self.statuses = statuses or {}

    def __call__(self, command: str) -> int:
        self.commands.append(command)
        return self.statuses.get(len(self.commands) - 1, 0)


@pytest.fixture()
def config():
    return BackendConfig()


@pytest.fixture()
def binding():
    return scenario_binding('untagged_start')


@pytest.fixture()
def vlan_binding():
    return scenario_binding('vlan100_start')


@pytest.fixture()
def runner():
    return RecordingRunner()


@pytest.fixture()
def failures():
    return []


@pytest.fixture()
def executor(runner, failures):
    """Executor that records commands and collects failures instead of logging."""
    return CommandExecutor(runner=runner, failure_sink=failures.append)
