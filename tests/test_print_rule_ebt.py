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

"""Tests for the ebtables rule printer."""

import pytest

from dhcpsnoopingd.compiler import MAX_COMMAND_LENGTH, TrafficClass, describe_rules
from dhcpsnoopingd.core import CommandTooLongError, LeaseAction, LeaseBinding
from dhcpsnoopingd.driver import OptionRegistry
from dhcpsnoopingd.platforms.ebtables import Backend_ebt, PrintRule_ebt

from .conftest import discover_test_cases, read_expected, scenario_binding

_CASES = discover_test_cases('ebtables')


@pytest.mark.parametrize('scenario', _CASES)
def test_ebtables_expected_output(scenario, config):
    """Render a scenario and compare to the expected command list."""
    commands = PrintRule_ebt(config).render(scenario_binding(scenario))
    assert commands == read_expected('ebtables', scenario)


class TestPrintRuleEbt:
    def test_untagged_has_no_vlan_qualifier(self, config, binding):
        commands = PrintRule_ebt(config).render(binding)
        assert len(commands) == 3
        for cmd in commands:
            assert '802_1Q' not in cmd
            assert '--vlan-id' not in cmd
            assert '--vlan-encap' not in cmd

    @pytest.mark.parametrize('vlan_id', [1, 100, 4094])
    def test_tagged_carries_tag_and_encap(self, config, vlan_id):
        b = LeaseBinding('br0', vlan_id, '02:00:00:00:00:01', '10.0.0.5')
        commands = PrintRule_ebt(config).render(b)
        assert len(commands) == 3
        for cmd, encap in zip(commands, ('ipv4', 'arp', 'arp'), strict=True):
            assert f'--proto 802_1Q --vlan-id {vlan_id} --vlan-encap {encap} ' in cmd

    def test_rule_order(self, config, binding):
        ipv4, arp, dnat = PrintRule_ebt(config).render(binding)
        assert '--ip-source' in ipv4
        assert '--arp-ip-src' in arp
        assert dnat.startswith('ebtables -t nat ')
        assert dnat.endswith('--dnat-target CONTINUE')

    def test_stop_differs_only_in_operation(self, config, vlan_binding):
        printer = PrintRule_ebt(config)
        start = printer.render(vlan_binding)
        stop = printer.render(vlan_binding.with_action(LeaseAction.Stop))
        assert [cmd.replace(' -A ', ' -D ', 1) for cmd in start] == stop

    def test_configured_names(self, config, binding):
        config.ebtables_binary = '/usr/sbin/ebtables'
        config.chain_name = 'snoop'
        commands = PrintRule_ebt(config).render(binding)
        assert commands[0].startswith('/usr/sbin/ebtables -A snoop -s ')
        assert commands[2].startswith('/usr/sbin/ebtables -t nat -A snoop --proto arp ')

    def test_single_descriptor(self, config, binding):
        dnat = describe_rules(binding)[2]
        assert dnat.traffic_class is TrafficClass.ArpDnat
        assert PrintRule_ebt(config).print_descriptor(dnat) == (
            'ebtables -t nat -A dhcpsnooping --proto arp --arp-ip-dst 10.0.0.5 '
            '--logical-in br0 -j dnat --to-destination 02:00:00:00:00:01 --dnat-target CONTINUE'
        )

    def test_command_too_long(self, config):
        b = LeaseBinding('x' * MAX_COMMAND_LENGTH, 0, '02:00:00:00:00:01', '10.0.0.5')
        with pytest.raises(CommandTooLongError) as excinfo:
            PrintRule_ebt(config).render(b)
        assert excinfo.value.limit == MAX_COMMAND_LENGTH

    def test_command_length_counts_bytes(self, config):
        # 2 bytes per character: under the limit in characters, over it in bytes
        b = LeaseBinding('\u00fc' * (MAX_COMMAND_LENGTH // 2), 0, '02:00:00:00:00:01', '10.0.0.5')
        with pytest.raises(CommandTooLongError, match='bytes long'):
            PrintRule_ebt(config).render(b)


class TestBackendEbt:
    def test_always_active(self, config, binding):
        config.disable_nftables()
        assert len(Backend_ebt(config).render(binding)) == 3

    def test_registers_no_options(self, config):
        options = OptionRegistry()
        Backend_ebt(config).register_options(options)
        assert list(options) == []
