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
Recreational dive physics calculations.

All depths are in meters, pressures in bar (or ATA for ambient pressure)
and oxygen content is percentage, i.e. 32 for EAN32.

Every function validates its input and returns `None` if a value cannot
be calculated for it, i.e. for negative pressure or zero dive duration.
"""

from collections import namedtuple
import math

from .const import METER_TO_ATA, SURFACE_ATA, AIR_N2, SALT_TO_FRESH, \
    FRESHWATER_WEIGHT_OFFSET, WEIGHT_RANGE, PPO2_WORKING


SAC = namedtuple('SAC', 'sac rmv')
SAC.__doc__ = """
Surface air consumption.

Both values are the same, the names are used interchangeably by divers.

:var sac: Surface air consumption [l/min].
:var rmv: Respiratory minute volume [l/min].
"""

GasConsumption = namedtuple(
    'GasConsumption', 'gas_needed pressure_used end_pressure'
)
GasConsumption.__doc__ = """
Gas consumption of a planned dive.

:var gas_needed: Volume of gas needed for the dive [l].
:var pressure_used: Tank pressure used during the dive [bar].
:var end_pressure: Tank pressure at the end of the dive [bar].
"""

Weighting = namedtuple('Weighting', 'min_kg max_kg')
Weighting.__doc__ = """
Recommended range of diver's weight.

:var min_kg: Lower bound of the weight range [kg].
:var max_kg: Upper bound of the weight range [kg].
"""


class Suit(object):
    """
    Exposure suit enumeration.
    """
    NONE = 'none'
    WETSUIT_3MM = '3mm'
    WETSUIT_5MM = '5mm'
    WETSUIT_7MM = '7mm'
    DRYSUIT = 'drysuit'


class Water(object):
    """
    Water type enumeration.
    """
    SALT = 'salt'
    FRESH = 'fresh'


# suit -> (fraction of body weight, extra weight [kg])
SUIT_WEIGHT = {
    Suit.NONE: (0.01, 1),
    Suit.WETSUIT_3MM: (0.05, 0),
    Suit.WETSUIT_5MM: (0.08, 0),
    Suit.WETSUIT_7MM: (0.10, 0),
    Suit.DRYSUIT: (0.10, 4), # undergarments
}


def ambient_pressure(depth):
    """
    Calculate ambient pressure [ATA] at depth.

    :param depth: Depth [m].
    """
    return depth * METER_TO_ATA + SURFACE_ATA


def sac_rate(start_p, end_p, tank, duration, depth):
    """
    Calculate surface air consumption of a dive.

    :param start_p: Tank pressure at the start of the dive [bar].
    :param end_p: Tank pressure at the end of the dive [bar].
    :param tank: Tank volume [l].
    :param duration: Dive duration [min].
    :param depth: Average depth of the dive [m].
    """
    if duration <= 0 or tank <= 0 or start_p < end_p:
        return None

    volume = (start_p - end_p) * tank
    rmv = volume / (duration * ambient_pressure(depth))
    return SAC(rmv, rmv)


def gas_consumption(sac, tank, duration, depth, start_p):
    """
    Calculate gas consumption of a planned dive.

    The end pressure can be negative, which means the tank runs out of
    gas before the end of the dive.

    :param sac: Surface air consumption [l/min].
    :param tank: Tank volume [l].
    :param duration: Planned dive duration [min].
    :param depth: Planned dive depth [m].
    :param start_p: Tank pressure at the start of the dive [bar].
    """
    if any(v < 0 for v in (sac, tank, duration, depth, start_p)):
        return None
    if any(v == 0 for v in (sac, tank, duration, start_p)):
        return None

    gas = sac * duration * ambient_pressure(depth)
    used = gas / tank
    return GasConsumption(gas, used, start_p - used)


def mod(o2, po2=PPO2_WORKING):
    """
    Calculate maximum operating depth [m] of a gas mix.

    :param o2: O2 percentage of the gas mix.
    :param po2: Partial pressure of oxygen limit [ATA], i.e. 1.4.
    """
    if o2 <= 0 or po2 <= 0:
        return None
    return (po2 / (o2 / 100) - 1) * 10


def ead(depth, o2):
    """
    Calculate equivalent air depth [m] of a nitrox dive.

    The result is never negative.

    :param depth: Depth of the dive [m].
    :param o2: O2 percentage of the nitrox mix (21-100).
    """
    if depth < 0 or o2 < 21 or o2 > 100:
        return None
    n2 = 1 - o2 / 100
    return max(0, n2 / AIR_N2 * (depth + 10) - 10)


def best_mix(depth, po2=PPO2_WORKING):
    """
    Calculate best nitrox mix for a depth.

    The O2 percentage is rounded down to whole percent, as gas is blended
    to whole percentages, and is never above 100%.

    :param depth: Planned depth [m].
    :param po2: Partial pressure of oxygen limit [ATA].
    """
    if depth < 0 or po2 <= 0:
        return None
    o2 = po2 / ambient_pressure(depth) * 100
    return math.floor(min(100, o2))


def ppo2(depth, o2):
    """
    Calculate partial pressure of oxygen [ATA] at depth.

    :param depth: Depth [m].
    :param o2: O2 percentage of the gas mix (21-100).
    """
    if depth < 0 or o2 < 21 or o2 > 100:
        return None
    return ambient_pressure(depth) * o2 / 100


def weighting(body_weight, suit, water):
    """
    Estimate weight range required by a diver.

    It is a rule of thumb estimate only, starting point of a buoyancy
    check.

    :param body_weight: Diver's body weight [kg].
    :param suit: Exposure suit, see :class:`Suit`.
    :param water: Water type, see :class:`Water`.
    """
    if body_weight <= 0 or suit not in SUIT_WEIGHT:
        return None
    if water not in (Water.SALT, Water.FRESH):
        return None

    pct, extra = SUIT_WEIGHT[suit]
    weight = body_weight * pct + extra
    if water == Water.FRESH:
        weight -= FRESHWATER_WEIGHT_OFFSET

    return Weighting(max(0, weight - WEIGHT_RANGE), weight + WEIGHT_RANGE)


def freshwater_depth(depth):
    """
    Correct saltwater calibrated gauge reading for freshwater.

    :param depth: Depth reading of the gauge [m].
    """
    return depth / SALT_TO_FRESH


def boyles_law(volume, start_depth, end_depth):
    """
    Calculate volume of a gas space after depth change.

    :param volume: Volume at start depth (any unit).
    :param start_depth: Start depth [m].
    :param end_depth: End depth [m].
    """
    if volume < 0 or start_depth < 0 or end_depth < 0:
        return None
    return volume * ambient_pressure(start_depth) / ambient_pressure(end_depth)


def time_remaining(sac, tank, current_p, reserve_p, depth):
    """
    Estimate time [min] left until tank pressure drops to reserve pressure.

    Zero is returned when tank pressure is already below reserve
    pressure. Infinity is returned for zero gas consumption.

    :param sac: Surface air consumption [l/min].
    :param tank: Tank volume [l].
    :param current_p: Current tank pressure [bar].
    :param reserve_p: Reserve tank pressure [bar].
    :param depth: Current depth [m].
    """
    if any(v < 0 for v in (sac, tank, current_p, reserve_p, depth)):
        return None
    if current_p < reserve_p:
        return 0
    if sac == 0:
        return math.inf

    gas = (current_p - reserve_p) * tank
    return gas / (sac * ambient_pressure(depth))


def nitrox_blend(start_p, start_o2, end_p, top_up_o2):
    """
    Calculate O2 percentage of a tank topped up with another gas.

    :param start_p: Tank pressure before top up.
    :param start_o2: O2 percentage of the gas in the tank.
    :param end_p: Tank pressure after top up (same unit as `start_p`).
    :param top_up_o2: O2 percentage of the top up gas.
    """
    if any(v < 0 for v in (start_p, start_o2, end_p, top_up_o2)):
        return None
    if end_p <= start_p:
        return None

    o2 = start_p * start_o2 / 100 + (end_p - start_p) * top_up_o2 / 100
    return o2 / end_p * 100


# vim: sw=4:et:ai
