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
Recreational Dive Planner tables.

The data is transcribed from PADI Recreational Dive Planner (metric
version). It is compatibility data - divers cross-check results with
printed tables, so values shall not be recalculated.

Table 1
    No decompression limit and pressure group after a dive for each
    table depth.
Table 2
    Surface interval credit. Partial table - only pressure groups A, B, C,
    D and Z are available.
Table 3
    Repetitive dive timetable. Partial table - only pressure groups A, B,
    C and Z are available.
"""

from collections import namedtuple

PRESSURE_GROUPS = tuple('ABCDEFGHIJKLMNOPQRSTUVWXYZ')

NdlEntry = namedtuple('NdlEntry', 'ndl times')
NdlEntry.__doc__ = """
Table 1 entry for a depth.

:var ndl: No decompression limit [min].
:var times: Ascending collection of (time [min], pressure group) pairs.
"""

Interval = namedtuple('Interval', 'start end pg')
Interval.__doc__ = """
Table 2 surface interval range.

:var start: Start of surface interval range, inclusive [min].
:var end: End of surface interval range, inclusive [min].
:var pg: Pressure group after the surface interval.
"""

Repetitive = namedtuple('Repetitive', 'rnt andl')
Repetitive.__doc__ = """
Table 3 repetitive dive times.

:var rnt: Residual nitrogen time [min].
:var andl: Adjusted no decompression limit [min].
"""

# table 1, depth [m] -> entry
NDL_TABLE = {
    10: NdlEntry(219, (
        (10, 'A'), (19, 'B'), (25, 'C'), (29, 'D'), (32, 'E'), (36, 'F'),
        (40, 'G'), (44, 'H'), (48, 'I'), (52, 'J'), (57, 'K'), (62, 'L'),
        (67, 'M'), (73, 'N'), (79, 'O'), (85, 'P'), (92, 'Q'), (100, 'R'),
        (108, 'S'), (117, 'T'), (127, 'U'), (139, 'V'), (152, 'W'), (168, 'X'),
        (188, 'Y'), (219, 'Z'),
    )),
    12: NdlEntry(147, (
        (9, 'A'), (16, 'B'), (22, 'C'), (25, 'D'), (29, 'E'), (32, 'F'),
        (35, 'G'), (39, 'H'), (42, 'I'), (46, 'J'), (50, 'K'), (54, 'L'),
        (58, 'M'), (63, 'N'), (68, 'O'), (73, 'P'), (79, 'Q'), (85, 'R'),
        (92, 'S'), (99, 'T'), (107, 'U'), (116, 'V'), (125, 'W'), (136, 'X'),
        (147, 'Y'),
    )),
    14: NdlEntry(95, (
        (8, 'A'), (14, 'B'), (19, 'C'), (22, 'D'), (25, 'E'), (28, 'F'),
        (31, 'G'), (34, 'H'), (37, 'I'), (40, 'J'), (44, 'K'), (47, 'L'),
        (51, 'M'), (55, 'N'), (59, 'O'), (63, 'P'), (67, 'Q'), (72, 'R'),
        (77, 'S'), (82, 'T'), (87, 'U'), (95, 'V'),
    )),
    16: NdlEntry(72, (
        (7, 'A'), (12, 'B'), (17, 'C'), (19, 'D'), (22, 'E'), (24, 'F'),
        (27, 'G'), (29, 'H'), (32, 'I'), (35, 'J'), (38, 'K'), (41, 'L'),
        (44, 'M'), (48, 'N'), (51, 'O'), (54, 'P'), (58, 'Q'), (62, 'R'),
        (66, 'S'), (72, 'T'),
    )),
    18: NdlEntry(56, (
        (6, 'A'), (11, 'B'), (15, 'C'), (17, 'D'), (19, 'E'), (21, 'F'),
        (23, 'G'), (25, 'H'), (28, 'I'), (30, 'J'), (33, 'K'), (35, 'L'),
        (38, 'M'), (41, 'N'), (44, 'O'), (47, 'P'), (50, 'Q'), (53, 'R'),
        (56, 'S'),
    )),
    20: NdlEntry(45, (
        (5, 'A'), (10, 'B'), (13, 'C'), (15, 'D'), (17, 'E'), (19, 'F'),
        (21, 'G'), (22, 'H'), (24, 'I'), (26, 'J'), (28, 'K'), (31, 'L'),
        (33, 'M'), (35, 'N'), (38, 'O'), (40, 'P'), (42, 'Q'), (45, 'R'),
    )),
    22: NdlEntry(37, (
        (5, 'A'), (9, 'B'), (12, 'C'), (13, 'D'), (15, 'E'), (17, 'F'),
        (18, 'G'), (20, 'H'), (22, 'I'), (24, 'J'), (26, 'K'), (27, 'L'),
        (29, 'M'), (31, 'N'), (33, 'O'), (35, 'P'), (37, 'Q'),
    )),
    25: NdlEntry(29, (
        (4, 'A'), (8, 'B'), (10, 'C'), (11, 'D'), (13, 'E'), (14, 'F'),
        (16, 'G'), (17, 'H'), (19, 'I'), (20, 'J'), (22, 'K'), (23, 'L'),
        (25, 'M'), (26, 'N'), (29, 'O'),
    )),
    30: NdlEntry(20, (
        (4, 'A'), (6, 'B'), (8, 'C'), (9, 'D'), (10, 'E'), (12, 'F'),
        (13, 'G'), (14, 'H'), (15, 'I'), (16, 'J'), (18, 'K'), (19, 'L'),
        (20, 'M'),
    )),
    35: NdlEntry(12, (
        (3, 'A'), (5, 'B'), (6, 'C'), (7, 'D'), (8, 'E'), (9, 'F'),
        (10, 'G'), (11, 'H'), (12, 'I'),
    )),
    40: NdlEntry(9, (
        (3, 'A'), (4, 'B'), (5, 'C'), (6, 'D'), (7, 'E'), (8, 'F'),
        (9, 'G'),
    )),
    42: NdlEntry(8, (
        (3, 'A'), (4, 'B'), (5, 'C'), (6, 'D'), (7, 'E'), (8, 'F'),
    )),
}

DEPTHS = tuple(sorted(NDL_TABLE))

# table 2, pressure group -> surface interval ranges
SURFACE_INTERVAL_TABLE = {
    'A': (Interval(0, 9999, 'A'),),
    'B': (Interval(0, 47, 'B'), Interval(48, 1440, 'A')),
    'C': (
        Interval(0, 21, 'C'), Interval(22, 70, 'B'), Interval(71, 1440, 'A'),
    ),
    'D': (
        Interval(0, 12, 'D'), Interval(13, 37, 'C'), Interval(38, 79, 'B'),
        Interval(80, 1440, 'A'),
    ),
    'Z': (
        Interval(10, 48, 'Y'), Interval(49, 88, 'X'), Interval(89, 129, 'W'),
        Interval(130, 171, 'V'), Interval(172, 213, 'U'),
        Interval(214, 256, 'T'), Interval(257, 299, 'S'),
        Interval(300, 342, 'R'), Interval(343, 386, 'Q'),
        Interval(387, 433, 'P'),
    ),
}

# table 3, pressure group -> depth [m] -> repetitive dive times
REPETITIVE_DIVE_TABLE = {
    'A': {
        10: Repetitive(7, 212), 12: Repetitive(6, 141), 18: Repetitive(4, 52),
    },
    'B': {
        10: Repetitive(13, 206), 12: Repetitive(11, 136),
        18: Repetitive(7, 49),
    },
    'C': {
        10: Repetitive(25, 194), 12: Repetitive(21, 126),
        18: Repetitive(15, 41),
    },
    'Z': {
        10: Repetitive(219, 0),
    },
}


# vim: sw=4:et:ai
