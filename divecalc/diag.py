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
Calculation integrity self test.

Each check calls a calculation function with known input and verifies
the result. The checks never raise, an exception makes a check fail.
"""

from collections import namedtuple
import logging

from . import calc
from .rdp import validate_tables

logger = logging.getLogger(__name__)


Check = namedtuple('Check', 'name label passed message')
Check.__doc__ = """
Result of a self test check.

:var name: Check identifier.
:var label: Check description.
:var passed: True if the check passed.
:var message: Check result message.
"""


def check_mod():
    v = calc.mod(32, 1.4)
    passed = v is not None and abs(v - 33.75) < 0.1
    return passed, 'EAN32 MOD {:.1f}m'.format(v) if passed else 'calc error'


def check_sac():
    v = calc.sac_rate(200, 150, 12, 10, 10)
    passed = v is not None and abs(v.sac - 30) < 0.1
    return passed, 'SAC {:.0f}l/min'.format(v.sac) if passed else 'calc error'


def check_ead():
    v = calc.ead(30, 32)
    passed = v is not None and v < 30
    return passed, 'EAD {:.1f}m'.format(v) if passed else 'calc error'


def check_boyles_law():
    v = calc.boyles_law(10, 0, 10)
    passed = v is not None and abs(v - 5) < 0.1
    return passed, 'volume {:.1f}'.format(v) if passed else 'physics error'


def check_tables():
    validate_tables()
    return True, 'tables ok'


CHECKS = (
    ('mod', 'MOD / O2 toxicity', check_mod),
    ('sac', 'Gas consumption', check_sac),
    ('ead', 'Nitrox EAD', check_ead),
    ('boyles_law', 'Pressure/volume physics', check_boyles_law),
    ('rdp_tables', 'Dive planner tables', check_tables),
)


def run(checks=CHECKS):
    """
    Run self test checks.

    :param checks: Collection of (name, label, check function) tuples.
    """
    results = []
    for name, label, f in checks:
        try:
            passed, msg = f()
        except Exception as ex:
            logger.warning('check {} failed: {}'.format(name, ex))
            passed, msg = False, 'system exception'

        logger.info('check {}: {} ({})'.format(
            name, 'pass' if passed else 'fail', msg
        ))
        results.append(Check(name, label, passed, msg))
    return tuple(results)


# vim: sw=4:et:ai
