# Statistical utilities for olympstats package.

# Copyright 2015-2018 Joseph Samuel Myers.

# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program.  If not, see
# <https://www.gnu.org/licenses/>.

# Additional permission under GNU GPL version 3 section 7:

# If you modify this program, or any covered work, by linking or
# combining it with the OpenSSL project's OpenSSL library (or a
# modified version of that library), containing parts covered by the
# terms of the OpenSSL or SSLeay licenses, the licensors of this
# program grant you additional permission to convey the resulting
# work.  Corresponding Source for a non-source form of such a
# combination shall include the source code for the parts of OpenSSL
# used as well as that of the covered work.

"""
This module provides statistics support for olympstats use: award
tallies, means, standard deviations, correlation coefficients and
rounding as shown to users.
"""

import math

from olympstats.data import AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE, \
    AWARD_HONOURABLE_MENTION, source_list

__all__ = ['new_award_counts', 'add_award', 'new_source_counts',
           'mean_std_dev', 'corr_coeff', 'problem_mean_std_dev',
           'correlation', 'round_half_up', 'rank_percentile']

_award_keys = {AWARD_GOLD: 'gold',
               AWARD_SILVER: 'silver',
               AWARD_BRONZE: 'bronze',
               AWARD_HONOURABLE_MENTION: 'hm'}


def new_award_counts():
    """Return a new dict of award counts, all zero."""
    return {'gold': 0, 'silver': 0, 'bronze': 0, 'hm': 0}


def add_award(counts, award):
    """
    Count one instance of the given award (or None, for no award) in a
    dict of award counts, modifying it in place.  No award leaves the
    counts unchanged; callers wanting a count of contestants without
    medals must derive it from their own total.
    """
    if award is not None:
        counts[_award_keys[award]] += 1


def new_source_counts():
    """Return a new dict mapping each source to zero."""
    return {s: 0 for s in source_list}


# These functions do everything with integers before the final
# division and square root, to reduce the chance of floating-point
# rounding affecting the final textual output.

def _sum_sq(data):
    return sum([x * x for x in data])

def mean_std_dev(data):
    """
    Return the mean and (population) standard deviation of a list of
    integers, or None for an empty list.  Values of None in the list
    are ignored.
    """
    data = [x for x in data if x is not None]
    n = len(data)
    if n == 0:
        return None
    s = sum(data)
    s2 = _sum_sq(data)
    mean = float(s) / float(n)
    std_dev = math.sqrt(max(float(n * s2 - s * s), 0.0) / float(n * n))
    return (mean, std_dev)

def corr_coeff(data):
    """
    Return the correlation coefficient of a list of pairs of integers,
    or None if either variable is constant.  Pairs containing a value
    None are ignored.
    """
    data = [x for x in data if x[0] is not None and x[1] is not None]
    n = len(data)
    if n == 0:
        return None
    xdata = [d[0] for d in data]
    ydata = [d[1] for d in data]
    sx = sum(xdata)
    sx2 = _sum_sq(xdata)
    sy = sum(ydata)
    sy2 = _sum_sq(ydata)
    sxy = sum([d[0] * d[1] for d in data])
    num = n * sxy - sx * sy
    den2 = (n * sx2 - sx * sx) * (n * sy2 - sy * sy)
    if den2 <= 0:
        return None
    return float(num) / math.sqrt(float(den2))


def problem_mean_std_dev(data):
    """
    Return the mean, maximum and standard deviation of the known
    values in a list, as shown in problem statistics: all three are 0
    when no value is known.
    """
    known = [x for x in data if x is not None]
    ms = mean_std_dev(known)
    if ms is None:
        return (0.0, 0, 0.0)
    return (ms[0], max(known), ms[1])


def correlation(data):
    """
    Return the correlation coefficient of a list of pairs as shown to
    users: 0.0 where it is undefined because there is no data or a
    variable is constant.
    """
    r = corr_coeff(data)
    if r is None:
        return 0.0
    return r


def round_half_up(value, digits=0):
    """
    Round a number to the given number of decimal places, with halves
    rounded upwards rather than to even.  An integer is returned when
    digits is 0.
    """
    scale = 10 ** digits
    r = math.floor(value * scale + 0.5)
    if digits == 0:
        return int(r)
    return r / scale


def rank_percentile(rank, total):
    """
    Return the percentile for a 1-based rank out of total entrants,
    where first place is 100 and last place is 0.  A lone entrant is
    at 100, whatever rank is recorded for it.
    """
    if total <= 1:
        return 100
    return round_half_up((1 - (rank - 1) / (total - 1)) * 100)
