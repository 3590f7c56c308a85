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

"""Tests for the nftables rule and element printers and the backend switches."""

import pytest

from dhcpsnoopingd.compiler import ElementKind, describe_elements
from dhcpsnoopingd.core import LeaseAction, LeaseBinding
from dhcpsnoopingd.platforms.nftables import Backend_nft, PrintElement_nft, PrintRule_nft

from .conftest import discover_test_cases, read_expected, scenario_binding

_LEGACY_CASES = discover_test_cases('nftables-legacy')
_CASES = discover_test_cases('nftables')


@pytest.mark.parametrize('scenario', _LEGACY_CASES)
def test_nftables_legacy_expected_output(scenario, config):
    commands = PrintRule_nft(config).render(scenario_binding(scenario))
    assert commands == read_expected('nftables-legacy', scenario)


@pytest.mark.parametrize('scenario', _CASES)
def test_nftables_expected_output(scenario, config):
    commands = PrintElement_nft(config).render(scenario_binding(scenario))
    assert commands == read_expected('nftables', scenario)


class TestPrintRuleNft:
    def test_three_rules_filter_filter_nat(self, config, binding):
        commands = PrintRule_nft(config).render(binding)
        assert len(commands) == 3
        assert [cmd.split()[4] for cmd in commands] == ['filter', 'filter', 'nat']
        assert all(cmd.split()[1:3] == ['add', 'rule'] for cmd in commands)

    def test_vlan_match(self, config, vlan_binding):
        for cmd in PrintRule_nft(config).render(vlan_binding):
            assert ' vlan id 100 ' in cmd

    def test_stop_uses_delete(self, config, binding):
        printer = PrintRule_nft(config)
        start = printer.render(binding)
        stop = printer.render(binding.with_action(LeaseAction.Stop))
        assert [cmd.replace(' add rule ', ' delete rule ', 1) for cmd in start] == stop

    def test_configured_names(self, config, binding):
        config.nftables_binary = 'nft'
        config.chain_name = 'snoop'
        cmd = PrintRule_nft(config).render(binding)[0]
        assert cmd.startswith('nft add rule bridge filter snoop ether saddr ')


class TestPrintElementNft:
    def test_two_elements(self, config, binding):
        commands = PrintElement_nft(config).render(binding)
        assert len(commands) == 2
        assert all(cmd.split()[1:3] == ['add', 'element'] for cmd in commands)

    def test_set_and_map_names(self, config, binding):
        config.set_name = 'snoop_set'
        config.map_name = 'snoop_map'
        filter_cmd, nat_cmd = PrintElement_nft(config).render(binding)
        assert ' bridge filter snoop_set { ' in filter_cmd
        assert ' bridge nat snoop_map { ' in nat_cmd

    def test_element_order(self, binding):
        kinds = [d.kind for d in describe_elements(binding)]
        assert kinds == [ElementKind.FilterSet, ElementKind.NatMap]

    def test_stop_uses_delete(self, config, vlan_binding):
        printer = PrintElement_nft(config)
        start = printer.render(vlan_binding)
        stop = printer.render(vlan_binding.with_action(LeaseAction.Stop))
        assert [cmd.replace(' add element ', ' delete element ', 1) for cmd in start] == stop

    def test_ifname_quoted_verbatim(self, config):
        b = LeaseBinding('br-lan.5', 0, 'aa:bb:cc:dd:ee:ff', '192.168.1.10')
        filter_cmd, _ = PrintElement_nft(config).render(b)
        assert filter_cmd == (
            'nfts add element bridge filter leases '
            '{ "br-lan.5" . aa:bb:cc:dd:ee:ff . 192.168.1.10 }'
        )


class TestBackendNft:
    @pytest.mark.parametrize('legacy', [False, True])
    def test_disabled_renders_nothing(self, config, binding, legacy):
        config.nftables_legacy = legacy
        config.disable_nftables()
        backend = Backend_nft(config)
        assert not backend.is_active()
        assert backend.render(binding) == []

    def test_modern_by_default(self, config, binding):
        backend = Backend_nft(config)
        assert isinstance(backend.get_printer(), PrintElement_nft)
        assert len(backend.render(binding)) == 2

    def test_legacy_switch(self, config, binding):
        config.enable_nftables_legacy()
        backend = Backend_nft(config)
        assert isinstance(backend.get_printer(), PrintRule_nft)
        assert len(backend.render(binding)) == 3

    def test_toggling_legacy_between_events(self, config, binding):
        """The mode is read on every event, not fixed at construction."""
        backend = Backend_nft(config)
        modern = backend.render(binding)
        config.nftables_legacy = True
        legacy = backend.render(binding)
        assert len(modern) == 2
        assert len(legacy) == 3
        assert all(' element ' in cmd for cmd in modern)
        assert all(' rule ' in cmd for cmd in legacy)
