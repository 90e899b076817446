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
Dive planner tables data tests.
"""

from divecalc.tables import PRESSURE_GROUPS, DEPTHS, NDL_TABLE, \
    SURFACE_INTERVAL_TABLE, REPETITIVE_DIVE_TABLE

import unittest


class TablesTestCase(unittest.TestCase):
    """
    Dive planner tables data tests.
    """
    def test_pressure_groups(self):
        """
        Test pressure groups are letters A to Z
        """
        self.assertEqual(26, len(PRESSURE_GROUPS))
        self.assertEqual('A', PRESSURE_GROUPS[0])
        self.assertEqual('Z', PRESSURE_GROUPS[-1])
        self.assertEqual(sorted(PRESSURE_GROUPS), list(PRESSURE_GROUPS))


    def test_depths(self):
        """
        Test table depths
        """
        expected = (10, 12, 14, 16, 18, 20, 22, 25, 30, 35, 40, 42)
        self.assertEqual(expected, DEPTHS)


    def test_ndl(self):
        """
        Test no decompression limits of table 1
        """
        expected = (219, 147, 95, 72, 56, 45, 37, 29, 20, 12, 9, 8)
        self.assertEqual(expected, tuple(NDL_TABLE[d].ndl for d in DEPTHS))


    def test_last_pressure_group(self):
        """
        Test pressure group at no decompression limit of table 1
        """
        groups = ''.join(NDL_TABLE[d].times[-1][1] for d in DEPTHS)
        self.assertEqual('ZYVTSRQOMIGF', groups)


    def test_partial_tables(self):
        """
        Test pressure groups available in tables 2 and 3
        """
        self.assertEqual('ABCDZ', ''.join(sorted(SURFACE_INTERVAL_TABLE)))
        self.assertEqual('ABCZ', ''.join(sorted(REPETITIVE_DIVE_TABLE)))


# vim: sw=4:et:ai
