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

"""CLI entry point printing the provisioning ruleset for a platform."""

import argparse
import sys

import dhcpsnoopingd
from dhcpsnoopingd.cli.dhcpsnoop_lease import configure_logging
from dhcpsnoopingd.core import ConfigError, load_config
from dhcpsnoopingd.driver import OptionRegistry, build_backends, render_ruleset
from dhcpsnoopingd.driver._ruleset import TEMPLATES

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Print the chains, sets and maps dhcpsnoop-lease writes into. Load the output
once, before the first lease event."""


def parse_args(argv=None, options=None):
    parser = argparse.ArgumentParser(
        prog='dhcpsnoop-ruleset',
        description=DESCRIPTION,
    )

    parser.add_argument(
        'PLATFORM',
        choices=sorted(TEMPLATES),
        help='firewall platform to generate the ruleset for',
    )

    parser.add_argument(
        '-c',
        '--config',
        default=None,
        dest='CONFIG',
        help='path to a YAML configuration file',
    )

    parser.add_argument(
        '--vlan',
        action='store_true',
        dest='VLAN',
        help='generate set/map keys and hooks for 802.1Q tagged traffic',
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


def main(argv=None):
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument('-c', '--config', default=None, dest='CONFIG')
    known, _ = pre.parse_known_args(argv)

    try:
        config = load_config(known.CONFIG)
    except ConfigError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    options = OptionRegistry()
    for backend in build_backends(config):
        backend.register_options(options)

    args = parse_args(argv, options)
    configure_logging(args.VERBOSE)
    options.dispatch(args)

    if args.PLATFORM == 'nftables' and not config.nftables_support:
        print('Error: built without nftables support', file=sys.stderr)
        return 1

    sys.stdout.write(render_ruleset(args.PLATFORM, config, vlan=args.VLAN))
    return 0


if __name__ == '__main__':
    sys.exit(main())
