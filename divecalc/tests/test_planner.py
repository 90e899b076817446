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
Repetitive dive planner tests.
"""

from divecalc.planner import plan, Plan, Status
from divecalc.units import Units

import unittest
from unittest import mock


class PlanTestCase(unittest.TestCase):
    """
    Repetitive dive planner tests.
    """
    def test_plan(self):
        """
        Test planning repetitive dive
        """
        p = plan(18, 15, 30, 12)
        self.assertEqual(Plan(Status.OK, 56, 'C', 'B', 11, 136, 125), p)


    def test_plan_imperial(self):
        """
        Test planning repetitive dive with depth in feet
        """
        p = plan(59, 15, 30, 39, units=Units.IMPERIAL)
        self.assertEqual(Plan(Status.OK, 56, 'C', 'B', 11, 136, 125), p)


    def test_no_bottom_time_left(self):
        """
        Test planning repetitive dive with residual nitrogen time over ANDL
        """
        p = plan(10, 200, 0, 10)
        self.assertEqual(Status.OK, p.status)
        self.assertEqual(('Z', 'Z'), (p.pg1, p.pg2))
        self.assertEqual(0, p.max_time)


    def test_invalid(self):
        """
        Test planning repetitive dive with negative input
        """
        for args in ((-1, 10, 60, 10), (18, -1, 60, 10), (18, 10, -1, 10),
                (18, 10, 60, -1)):
            p = plan(*args)
            self.assertEqual(Status.INVALID, p.status)
            self.assertEqual((None,) * 6, p[1:])


    def test_too_deep(self):
        """
        Test planning first dive deeper than table depths
        """
        p = plan(45, 5, 60, 10)
        self.assertEqual(Plan(Status.TOO_DEEP, *(None,) * 6), p)


    def test_exceeds_ndl(self):
        """
        Test planning first dive longer than NDL
        """
        p = plan(18, 57, 60, 10)
        self.assertEqual(Status.EXCEEDS_NDL, p.status)
        self.assertEqual(56, p.ndl)
        self.assertEqual((None,) * 5, p[2:])


    def test_not_recommended(self):
        """
        Test planning repetitive dive without table data
        """
        p = plan(18, 50, 60, 10)
        self.assertEqual(
            Plan(Status.NOT_RECOMMENDED, 56, 'Q', 'Q', None, None, None), p
        )


    def test_repetitive_too_deep(self):
        """
        Test planning repetitive dive deeper than table depths
        """
        p = plan(18, 15, 30, 50)
        self.assertEqual(Status.NOT_RECOMMENDED, p.status)
        self.assertEqual('B', p.pg2)


    @mock.patch('divecalc.planner.rdp.repetitive_dive')
    def test_stage_inputs(self, f):
        """
        Test repetitive dive lookup receives depth in meters
        """
        f.return_value = None
        plan(59, 15, 30, 39, units=Units.IMPERIAL)
        pg, depth = f.call_args[0]
        self.assertEqual('B', pg)
        self.assertAlmostEqual(11.8872, depth, 4)



class StatusTestCase(unittest.TestCase):
    """
    Dive plan status tests.
    """
    def test_messages(self):
        """
        Test each dive plan status has a message
        """
        statuses = (
            Status.OK, Status.INVALID, Status.TOO_DEEP, Status.EXCEEDS_NDL,
            Status.NOT_RECOMMENDED,
        )
        for s in statuses:
            self.assertTrue(Status.message(s))


    def test_warnings(self):
        """
        Test dive plan warnings
        """
        msg = Status.message(Status.EXCEEDS_NDL)
        self.assertIn('No-Decompression Limit', msg)
        msg = Status.message(Status.NOT_RECOMMENDED)
        self.assertIn('not recommended', msg)


# vim: sw=4:et:ai
