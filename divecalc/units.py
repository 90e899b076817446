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
Metric and imperial unit conversions.
"""

from .const import FEET_PER_METER, PSI_PER_BAR, LBS_PER_KG


class Units(object):
    """
    Unit system enumeration.

    METRIC
        Depth in meters, pressure in bar, weight in kilograms.
    IMPERIAL
        Depth in feet, pressure in psi, weight in pounds.
    """
    METRIC = 'metric'
    IMPERIAL = 'imperial'


def meter_to_feet(meters):
    return meters * FEET_PER_METER


def feet_to_meter(feet):
    return feet / FEET_PER_METER


def bar_to_psi(bar):
    return bar * PSI_PER_BAR


def psi_to_bar(psi):
    return psi / PSI_PER_BAR


def kg_to_lbs(kg):
    return kg * LBS_PER_KG


def lbs_to_kg(lbs):
    return lbs / LBS_PER_KG


def celsius_to_fahrenheit(celsius):
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit):
    return (fahrenheit - 32) * 5 / 9


def to_meter(depth, units):
    """
    Convert depth given in unit system `units` to meters.

    :param depth: Depth in meters or feet.
    :param units: Unit system, see :class:`Units`.
    """
    return feet_to_meter(depth) if units == Units.IMPERIAL else depth


# vim: sw=4:et:ai
