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
Recreational Dive Planner table lookups.

The lookups implement three steps of repetitive dive planning with the
dive planner tables

#. Find pressure group after first dive with :func:`pressure_group`.
#. Find pressure group after surface interval with
   :func:`surface_interval`.
#. Find residual nitrogen time and adjusted no decompression limit of a
   repetitive dive with :func:`repetitive_dive`.

Dive depth is always rounded up to deeper table depth and bottom time is
rounded up to longer table time. The lookups return `None` for a dive,
which cannot be planned with the tables, i.e. a dive deeper than 42m or
longer than no decompression limit.

Usage

>>> from divecalc import rdp
>>> rdp.ndl(17)
56
>>> rdp.pressure_group(17, 20)
'F'
>>> rdp.surface_interval('C', 30)
'B'
>>> rdp.repetitive_dive('B', 11)
Repetitive(rnt=11, andl=136)
"""

import logging

from .tables import NDL_TABLE, SURFACE_INTERVAL_TABLE, \
    REPETITIVE_DIVE_TABLE, PRESSURE_GROUPS, Repetitive
from .ft import ceil_find, floor_find, ceil_depth
from .error import TableError
from .const import FULL_CLEARANCE_TIME

logger = logging.getLogger(__name__)


def is_pg(pg):
    """
    Check if value is a pressure group.

    :param pg: Value to check.
    """
    return isinstance(pg, str) and pg in PRESSURE_GROUPS


def pg_index(pg):
    """
    Get position of a pressure group, i.e. 0 for A and 25 for Z.

    :param pg: Pressure group.
    """
    return PRESSURE_GROUPS.index(pg)


def ndl(depth):
    """
    Find no decompression limit [min] for a dive depth.

    :param depth: Dive depth [m].
    """
    d = ceil_depth(depth)
    return None if d is None else NDL_TABLE[d].ndl


def pressure_group(depth, time):
    """
    Find pressure group after a dive.

    `None` is returned if the dive is too deep or the bottom time is
    longer than no decompression limit.

    :param depth: Dive depth [m].
    :param time: Bottom time [min].
    """
    d = ceil_depth(depth)
    if d is None:
        return None

    entry = NDL_TABLE[d]
    if time > entry.ndl:
        return None

    t = ceil_find(entry.times, time, key=lambda v: v[0])
    assert t is not None
    return t[1]


def surface_interval(pg, time):
    """
    Find pressure group after a surface interval.

    Surface interval is rounded down to a range of the pressure group.
    Pressure group A is returned if surface interval is longer than any
    range of the pressure group and the pressure group is unchanged if
    surface interval is shorter than its first range.

    If there is no table data for a pressure group, then it is assumed all
    nitrogen is cleared after 24h, otherwise the pressure group is
    unchanged.

    :param pg: Pressure group after previous dive.
    :param time: Surface interval [min].
    """
    if not is_pg(pg) or time < 0:
        return None

    intervals = SURFACE_INTERVAL_TABLE.get(pg)
    if intervals is None:
        return 'A' if time > FULL_CLEARANCE_TIME else pg

    i = floor_find(intervals, time, key=lambda i: i.start)
    if i is None:
        return pg # no surface interval credit yet
    if i is intervals[-1] and time > i.end:
        return 'A'
    return i.pg


def repetitive_dive(pg, depth):
    """
    Find residual nitrogen time and adjusted no decompression limit of
    a repetitive dive.

    `None` is returned if repetitive dive is not recommended for the
    pressure group and depth.

    :param pg: Pressure group after surface interval.
    :param depth: Repetitive dive depth [m].
    """
    if not is_pg(pg):
        return None

    d = ceil_depth(depth)
    if d is None:
        return None
    return REPETITIVE_DIVE_TABLE.get(pg, {}).get(d)


def max_bottom_time(times):
    """
    Calculate maximum actual bottom time [min] of a repetitive dive.

    :param times: Repetitive dive times, see :func:`repetitive_dive`.
    """
    return max(0, times.andl - times.rnt)


def validate_tables():
    """
    Verify consistency of dive planner tables data.

    :class:`TableError` exception is raised on first inconsistency found.
    """
    for depth, entry in sorted(NDL_TABLE.items()):
        times = [t for t, _ in entry.times]
        groups = [pg_index(pg) for _, pg in entry.times]
        if times != sorted(set(times)):
            raise TableError('Table 1: times not ascending at {}m'.format(depth))
        if groups != sorted(set(groups)):
            raise TableError(
                'Table 1: pressure groups not ascending at {}m'.format(depth)
            )
        if times[-1] != entry.ndl:
            raise TableError(
                'Table 1: last time {} not equal to ndl {} at {}m'
                .format(times[-1], entry.ndl, depth)
            )
        logger.debug('table 1: {}m ok'.format(depth))

    for pg, intervals in sorted(SURFACE_INTERVAL_TABLE.items()):
        for i in intervals:
            if i.start > i.end or not is_pg(i.pg):
                raise TableError('Table 2: invalid range {} of {}'.format(i, pg))
        for i1, i2 in zip(intervals, intervals[1:]):
            if i2.start != i1.end + 1:
                raise TableError(
                    'Table 2: ranges {} and {} of {} not contiguous'
                    .format(i1, i2, pg)
                )
        logger.debug('table 2: {} ok'.format(pg))

    for pg, row in sorted(REPETITIVE_DIVE_TABLE.items()):
        for depth, times in row.items():
            if depth not in NDL_TABLE or times.rnt < 0 or times.andl < 0:
                raise TableError(
                    'Table 3: invalid entry {} of {} at {}m'
                    .format(times, pg, depth)
                )
        logger.debug('table 3: {} ok'.format(pg))

    logger.info('dive planner tables ok')


__all__ = [
    'ndl', 'pressure_group', 'surface_interval', 'repetitive_dive',
    'max_bottom_time', 'validate_tables', 'is_pg', 'pg_index', 'Repetitive',
]

# vim: sw=4:et:ai
