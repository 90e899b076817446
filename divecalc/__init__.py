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
Basic Usage
-----------

The DiveCalc recreational dive planning library consists of two parts

- dive physics calculator in :mod:`divecalc.calc` module
- Recreational Dive Planner table lookups in :mod:`divecalc.rdp` module

The calculator functions accept depth in meters, pressure in bar and
oxygen content as percentage. For example, maximum operating depth of
EAN32 at PPO2 limit 1.4 is::

    >>> import divecalc
    >>> divecalc.mod(32, 1.4)     # doctest:+ELLIPSIS
    33.7...

and surface air consumption of a dive at 10m for 10 minutes, which used
50 bar of 12l tank is::

    >>> divecalc.sac_rate(200, 150, 12, 10, 10)
    SAC(sac=30.0, rmv=30.0)

A calculator function returns `None` if its input is invalid::

    >>> divecalc.mod(0, 1.4) is None
    True

Dive Planner Tables
-------------------
Pressure group after dive to 18m for 15 minutes is::

    >>> divecalc.pressure_group(18, 15)
    'C'

After 30 minutes of surface interval, the pressure group is::

    >>> divecalc.surface_interval('C', 30)
    'B'

and repetitive dive to 12m has the following residual nitrogen time and
adjusted no decompression limit::

    >>> divecalc.repetitive_dive('B', 12)
    Repetitive(rnt=11, andl=136)

The lookups return `None` when a dive cannot be planned with the tables,
i.e. it is too deep or too long::

    >>> divecalc.ndl(43) is None
    True
    >>> divecalc.pressure_group(10, 220) is None
    True

All three steps can be performed at once with the planner, which also
tells why a dive cannot be planned::

    >>> p = divecalc.plan(18, 15, 30, 12)
    >>> p.status, p.max_time
    ('ok', 125)
    >>> divecalc.plan(18, 60, 30, 12).status
    'exceeds_ndl'
"""

from .calc import ambient_pressure, sac_rate, gas_consumption, mod, ead, \
    best_mix, ppo2, weighting, freshwater_depth, boyles_law, \
    time_remaining, nitrox_blend, Suit, Water
from .rdp import ndl, pressure_group, surface_interval, repetitive_dive, \
    max_bottom_time
from .planner import plan, Status
from .units import Units

__version__ = '0.1.0'

__all__ = [
    'ambient_pressure', 'sac_rate', 'gas_consumption', 'mod', 'ead',
    'best_mix', 'ppo2', 'weighting', 'freshwater_depth', 'boyles_law',
    'time_remaining', 'nitrox_blend', 'Suit', 'Water', 'ndl',
    'pressure_group', 'surface_interval', 'repetitive_dive',
    'max_bottom_time', 'plan', 'Status', 'Units',
]

# vim: sw=4:et:ai
