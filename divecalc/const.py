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
DiveCalc constants.
"""

# 10m of sea water is 1 atmosphere
METER_TO_ATA = 0.1
SURFACE_ATA = 1.0

# fraction of nitrogen in air, used by EAD calculation
AIR_N2 = 0.79

# saltwater to freshwater density ratio
SALT_TO_FRESH = 1.03

FEET_PER_METER = 3.28084
PSI_PER_BAR = 14.5038
LBS_PER_KG = 2.20462

# default PPO2 limit [ATA]
PPO2_WORKING = 1.4

# weighting estimate
FRESHWATER_WEIGHT_OFFSET = 2.5
WEIGHT_RANGE = 1.0

# surface interval after which nitrogen is considered cleared [min]
FULL_CLEARANCE_TIME = 1440

# vim: sw=4:et:ai
