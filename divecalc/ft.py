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
Search functions used to round values to dive planner table entries.

Dive planning always uses table entry for deeper or longer dive than
performed, so depth and bottom time are rounded up. Surface interval is
rounded down, so no surface interval credit is given for time not spent
at the surface.
"""

from .tables import DEPTHS


def bisect_find(n, f, *args, **kw):
    """
    Find largest `k` for which `f(k)` is true.

    The k is integer in range 1 <= k <= n.  If there is no `k` for which
    `f(k)` is true, then return `0`.

    :param n: Range for `k`, so :math:`1 <= k <= n`.
    :param f: Invariant function accepting `k`.
    :param *args: Additional positional parameters of `f`.
    :param **kw: Additional named parameters of `f`.
    """
    lo = 1
    hi = n + 1

    while lo < hi:
        k = (lo + hi) // 2
        assert lo <= k <= hi, 'bisect range: {} <= {} <= {}'.format(lo, k, hi)

        if f(k, *args, **kw):
            lo = k + 1
        else:
            hi = k

    return hi - 1 # hi is first k for which f(k) is not true, so f(hi - 1) is true


def ceil_find(values, x, key=None):
    """
    Find first value of ascending sequence, which is greater or equal to
    `x`.

    If `x` is greater than all values, then `None` is returned.

    :param values: Ascending sequence of values.
    :param x: Value to round up.
    :param key: Optional function to extract comparison key of a value.
    """
    if key is None:
        key = lambda v: v
    n = len(values)
    k = bisect_find(n, lambda k: key(values[k - 1]) < x)
    return values[k] if k < n else None


def floor_find(values, x, key=None):
    """
    Find last value of ascending sequence, which is less or equal to `x`.

    If `x` is less than all values, then `None` is returned.

    :param values: Ascending sequence of values.
    :param x: Value to round down.
    :param key: Optional function to extract comparison key of a value.
    """
    if key is None:
        key = lambda v: v
    k = bisect_find(len(values), lambda k: key(values[k - 1]) <= x)
    return values[k - 1] if k > 0 else None


def ceil_depth(depth):
    """
    Round depth up to dive planner table depth.

    If depth is deeper than deepest table depth, then `None` is returned.

    :param depth: Dive depth [m].
    """
    return ceil_find(DEPTHS, depth)


# vim: sw=4:et:ai
