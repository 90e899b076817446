#
# DiveCalc - recreational dive planning library.
#
# Copyright (C) 2026 by DiveCalc Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
DiveCalc command line tools.
"""

import argparse
import logging
import sys

from .planner import plan, Status
from .units import Units
from . import diag


def _parser(description):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        '-v', '--verbose', action='store_true', default=False,
        help='explain what is being done'
    )
    return parser


def _logging(args):
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level)


def plan_main(argv=None, out=sys.stdout):
    """
    Plan repetitive dive with dive planner tables.

    :param argv: Command line arguments.
    :param out: Output file object.
    """
    parser = _parser('DiveCalc - plan repetitive dive with RDP tables')
    parser.add_argument('depth', type=float, help='first dive depth')
    parser.add_argument('time', type=float, help='first dive bottom time [min]')
    parser.add_argument(
        '-s', '--interval', type=float, default=60.0,
        help='surface interval [min] (default 60)'
    )
    parser.add_argument(
        '-r', '--repetitive', dest='depth2', type=float, default=None,
        help='repetitive dive depth (default first dive depth)'
    )
    parser.add_argument(
        '--imperial', action='store_true', default=False,
        help='depth in feet'
    )
    args = parser.parse_args(argv)
    _logging(args)

    units = Units.IMPERIAL if args.imperial else Units.METRIC
    unit = 'ft' if args.imperial else 'm'
    depth2 = args.depth if args.depth2 is None else args.depth2

    p = plan(args.depth, args.time, args.interval, depth2, units=units)

    if p.ndl is not None:
        print('NDL at {}{}: {}min'.format(args.depth, unit, p.ndl), file=out)
    if p.pg1 is not None:
        print('Pressure group after dive: {}'.format(p.pg1), file=out)
    if p.pg2 is not None:
        print('Pressure group after {}min: {}'.format(args.interval, p.pg2), file=out)
    if p.status == Status.OK:
        print('Residual nitrogen time: {}min'.format(p.rnt), file=out)
        print('Adjusted NDL: {}min'.format(p.andl), file=out)
        print('Maximum bottom time at {}{}: {}min'.format(
            depth2, unit, p.max_time
        ), file=out)
    else:
        print(Status.message(p.status), file=out)

    return 0 if p.status == Status.OK else 1


def diag_main(argv=None, out=sys.stdout):
    """
    Run calculation integrity self test.

    :param argv: Command line arguments.
    :param out: Output file object.
    """
    parser = _parser('DiveCalc - calculation integrity self test')
    args = parser.parse_args(argv)
    _logging(args)

    results = diag.run()
    for r in results:
        print('{:<4} {:<28} {}'.format(
            'ok' if r.passed else 'FAIL', r.label, r.message
        ), file=out)
    return 0 if all(r.passed for r in results) else 1


# vim: sw=4:et:ai
