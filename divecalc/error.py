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
DiveCalc exceptions.

Invalid user input is never reported with an exception, calculation
functions return `None` instead.
"""

class DiveCalcError(Exception):
    """
    Base class for DiveCalc exceptions.
    """


class TableError(DiveCalcError):
    """
    Dive planner table data is inconsistent.
    """


# vim: sw=4:et:ai
