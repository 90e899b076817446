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
Repetitive dive planner.

The planner runs all three steps of dive planning with the dive planner
tables - first dive, surface interval and repetitive dive - and reports
at which step, and why, the planning stopped.

>>> from divecalc.planner import plan
>>> p = plan(18, 15, 30, 12)
>>> p.status
'ok'
>>> p.pg1, p.pg2
('C', 'B')
>>> p.rnt, p.andl, p.max_time
(11, 136, 125)
>>> p = plan(16, 20, 60, 12)
>>> p.status
'not_recommended'
"""

from collections import namedtuple
import logging

from . import rdp
from .units import Units, to_meter

logger = logging.getLogger(__name__)


class Status(object):
    """
    Dive plan status enumeration.

    OK
        Repetitive dive can be planned with the tables.
    INVALID
        Invalid input, i.e. negative depth or time.
    TOO_DEEP
        First dive is deeper than deepest table depth.
    EXCEEDS_NDL
        First dive is longer than no decompression limit.
    NOT_RECOMMENDED
        Repetitive dive is not recommended for the pressure group and
        depth.
    """
    OK = 'ok'
    INVALID = 'invalid'
    TOO_DEEP = 'too_deep'
    EXCEEDS_NDL = 'exceeds_ndl'
    NOT_RECOMMENDED = 'not_recommended'

    MESSAGES = {
        OK: 'Repetitive dive within no decompression limits.',
        INVALID: 'Invalid input, depth and time cannot be negative.',
        TOO_DEEP: 'Dive is deeper than the deepest table depth. Plan the'
            ' dive with technical dive planning.',
        EXCEEDS_NDL: 'Warning: Dive exceeds No-Decompression Limit. This'
            ' requires a decompression dive plan, which is outside the'
            ' scope of this recreational planner.',
        NOT_RECOMMENDED: 'Repetitive dive not recommended for this'
            ' pressure group and depth combination.',
    }

    @staticmethod
    def message(status):
        """
        Get user message for dive plan status.

        :param status: Dive plan status.
        """
        return Status.MESSAGES[status]


Plan = namedtuple('Plan', 'status ndl pg1 pg2 rnt andl max_time')
Plan.__doc__ = """
Repetitive dive plan.

The values of the steps after the step, which stopped dive planning, are
`None`.

:var status: Dive plan status, see :class:`Status`.
:var ndl: No decompression limit of first dive [min].
:var pg1: Pressure group after first dive.
:var pg2: Pressure group after surface interval.
:var rnt: Residual nitrogen time of repetitive dive [min].
:var andl: Adjusted no decompression limit of repetitive dive [min].
:var max_time: Maximum bottom time of repetitive dive [min].
"""


def plan(depth1, time1, interval, depth2, units=Units.METRIC):
    """
    Plan repetitive dive.

    :param depth1: Depth of first dive [m or ft].
    :param time1: Bottom time of first dive [min].
    :param interval: Surface interval [min].
    :param depth2: Depth of repetitive dive [m or ft].
    :param units: Unit system of depth values, see :class:`Units`.
    """
    if any(v < 0 for v in (depth1, time1, interval, depth2)):
        return Plan(Status.INVALID, None, None, None, None, None, None)

    depth1 = to_meter(depth1, units)
    depth2 = to_meter(depth2, units)

    ndl = rdp.ndl(depth1)
    if ndl is None:
        logger.debug('first dive at {:.1f}m too deep'.format(depth1))
        return Plan(Status.TOO_DEEP, None, None, None, None, None, None)

    pg1 = rdp.pressure_group(depth1, time1)
    if pg1 is None:
        logger.debug('first dive {}min over ndl {}min'.format(time1, ndl))
        return Plan(Status.EXCEEDS_NDL, ndl, None, None, None, None, None)

    pg2 = rdp.surface_interval(pg1, interval)
    assert pg2 is not None
    logger.debug('pressure group {} -> {} after {}min'.format(pg1, pg2, interval))

    times = rdp.repetitive_dive(pg2, depth2)
    if times is None:
        logger.debug(
            'repetitive dive not recommended for {} at {:.1f}m'
            .format(pg2, depth2)
        )
        return Plan(Status.NOT_RECOMMENDED, ndl, pg1, pg2, None, None, None)

    max_time = rdp.max_bottom_time(times)
    return Plan(Status.OK, ndl, pg1, pg2, times.rnt, times.andl, max_time)


# vim: sw=4:et:ai
