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
Command line tools tests.
"""

import io

from divecalc.cli import plan_main, diag_main

import unittest
from unittest import mock


class PlanCommandTestCase(unittest.TestCase):
    """
    Repetitive dive planner command tests.
    """
    def test_plan(self):
        """
        Test planning repetitive dive from command line
        """
        out = io.StringIO()
        code = plan_main(['18', '15', '-s', '30', '-r', '12'], out=out)
        lines = out.getvalue().split('\n')

        self.assertEqual(0, code)
        self.assertEqual('NDL at 18.0m: 56min', lines[0])
        self.assertEqual('Pressure group after dive: C', lines[1])
        self.assertEqual('Pressure group after 30.0min: B', lines[2])
        self.assertEqual('Residual nitrogen time: 11min', lines[3])
        self.assertEqual('Adjusted NDL: 136min', lines[4])
        self.assertEqual('Maximum bottom time at 12.0m: 125min', lines[5])


    def test_plan_imperial(self):
        """
        Test planning repetitive dive in feet from command line
        """
        out = io.StringIO()
        code = plan_main(
            ['59', '15', '-s', '30', '-r', '39', '--imperial'], out=out
        )
        self.assertEqual(0, code)
        self.assertIn('NDL at 59.0ft: 56min', out.getvalue())


    def test_exceeds_ndl(self):
        """
        Test planning dive longer than NDL from command line
        """
        out = io.StringIO()
        code = plan_main(['18', '60'], out=out)
        v = out.getvalue()

        self.assertEqual(1, code)
        self.assertIn('NDL at 18.0m: 56min', v)
        self.assertIn('exceeds No-Decompression Limit', v)
        self.assertNotIn('Pressure group', v)


    def test_not_recommended(self):
        """
        Test planning not recommended repetitive dive from command line
        """
        out = io.StringIO()
        code = plan_main(['18', '50', '-r', '10'], out=out)
        v = out.getvalue()

        self.assertEqual(1, code)
        self.assertIn('Pressure group after 60.0min: Q', v)
        self.assertIn('not recommended', v)


    @mock.patch('logging.basicConfig')
    def test_verbose(self, f):
        """
        Test enabling debug logging from command line
        """
        plan_main(['18', '15', '-v'], out=io.StringIO())
        f.assert_called_once_with(level=10)



class DiagCommandTestCase(unittest.TestCase):
    """
    Self test command tests.
    """
    def test_diag(self):
        """
        Test running self test from command line
        """
        out = io.StringIO()
        code = diag_main([], out=out)
        lines = out.getvalue().strip().split('\n')

        self.assertEqual(0, code)
        self.assertEqual(5, len(lines))
        self.assertTrue(all(l.startswith('ok') for l in lines))


    @mock.patch('divecalc.calc.ead')
    def test_diag_failure(self, f):
        """
        Test self test command failure
        """
        f.return_value = 31
        out = io.StringIO()
        code = diag_main([], out=out)

        self.assertEqual(1, code)
        self.assertIn('FAIL', out.getvalue())


# vim: sw=4:et:ai
