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
Unit conversion tests.
"""

from divecalc.units import meter_to_feet, feet_to_meter, bar_to_psi, \
    psi_to_bar, kg_to_lbs, lbs_to_kg, celsius_to_fahrenheit, \
    fahrenheit_to_celsius, to_meter, Units

import unittest


class ConversionTestCase(unittest.TestCase):
    """
    Unit conversion tests.
    """
    def test_depth(self):
        """
        Test depth conversion
        """
        self.assertAlmostEqual(32.8084, meter_to_feet(10))
        self.assertAlmostEqual(10, feet_to_meter(32.8084))


    def test_pressure(self):
        """
        Test pressure conversion
        """
        self.assertAlmostEqual(2900.76, bar_to_psi(200))
        self.assertAlmostEqual(200, psi_to_bar(2900.76))


    def test_weight(self):
        """
        Test weight conversion
        """
        self.assertAlmostEqual(22.0462, kg_to_lbs(10))
        self.assertAlmostEqual(10, lbs_to_kg(22.0462))


    def test_temperature(self):
        """
        Test temperature conversion
        """
        self.assertAlmostEqual(212, celsius_to_fahrenheit(100))
        self.assertAlmostEqual(32, celsius_to_fahrenheit(0))
        self.assertAlmostEqual(-40, fahrenheit_to_celsius(-40))
        self.assertAlmostEqual(20, fahrenheit_to_celsius(68))


    def test_round_trip(self):
        """
        Test depth and pressure conversion round trip
        """
        for v in (-12.5, 0, 0.1, 18, 42, 232.7, 1e6):
            self.assertAlmostEqual(v, feet_to_meter(meter_to_feet(v)))
            self.assertAlmostEqual(v, psi_to_bar(bar_to_psi(v)))


    def test_to_meter(self):
        """
        Test depth conversion to meters for unit system
        """
        self.assertEqual(18, to_meter(18, Units.METRIC))
        self.assertAlmostEqual(18, to_meter(59.05512, Units.IMPERIAL))


# vim: sw=4:et:ai
