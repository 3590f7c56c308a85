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

"""CLI entry point applying one lease event to the firewall.

Suitable as a DHCP server lease script: called with ``add`` when a
lease is granted and ``del`` when it ends.
"""

import argparse
import logging
import sys

import dhcpsnoopingd
from dhcpsnoopingd.core import ConfigError, load_config
from dhcpsnoopingd.driver import (
    CommandExecutor,
    LeaseHookRegistry,
    OptionRegistry,
    setup,
)

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Mirror one DHCP lease start or stop into ebtables and nftables. Only traffic
from the leased MAC/IP pair is accepted on the bridge, and ARP for the leased IP
is answered with the leased MAC."""

ACTIONS = {
    'add': True,
    'del': False,
}


def configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-c',
        '--config',
        default=None,
        dest='CONFIG',
        help='path to a YAML configuration file',
    )


def parse_args(argv=None, options=None):
    parser = argparse.ArgumentParser(
        prog='dhcpsnoop-lease',
        description=DESCRIPTION,
    )

    parser.add_argument(
        'ACTION',
        choices=sorted(ACTIONS),
        help='"add" when a lease starts, "del" when it ends',
    )

    parser.add_argument(
        'IFNAME',
        help='bridge the lease was seen on',
    )

    parser.add_argument(
        'VLAN',
        type=int,
        help='802.1Q tag, 0 for untagged traffic',
    )

    parser.add_argument(
        'MAC',
        help='client hardware address',
    )

    parser.add_argument(
        'IP',
        help='leased IPv4 address',
    )

    _add_config_argument(parser)

    parser.add_argument(
        '-n',
        '--dry-run',
        action='store_true',
        dest='DRY_RUN',
        help='print the commands instead of running them',
    )

    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='VERBOSE',
        help='verbose output (repeat for higher verbosity)',
    )

    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s: v{dhcpsnoopingd.__version__} by {__author__}',
    )

    if options is not None:
        options.add_arguments(parser)

    return parser.parse_args(argv)


def _print_command(command: str) -> int:
    print(command)
    return 0


def main(argv=None):
    # The config file decides which backends exist, and thereby which
    # flags the full parser accepts.
    pre = argparse.ArgumentParser(add_help=False)
    _add_config_argument(pre)
    known, _ = pre.parse_known_args(argv)

    try:
        config = load_config(known.CONFIG)
    except ConfigError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    options = OptionRegistry()
    hooks = LeaseHookRegistry()
    executor = CommandExecutor()
    setup(config, options, hooks, executor)

    args = parse_args(argv, options)
    configure_logging(args.VERBOSE)
    options.dispatch(args)

    if args.DRY_RUN:
        executor.runner = _print_command

    try:
        hooks.lease_start_stop(args.IFNAME, args.VLAN, args.MAC, args.IP, ACTIONS[args.ACTION])
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
