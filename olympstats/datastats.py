# Database summary statistics for olympstats package.

# Copyright 2014-2022 Joseph Samuel Myers.

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
This module provides summary statistics about a whole database
snapshot: how many records of each kind it contains, and which years
each competition source covers.
"""

from olympstats.data import award_list
from olympstats.stats import new_source_counts

__all__ = ['count_participations_by_source', 'collect_years_by_source',
           'format_year_ranges', 'format_years_by_source', 'count_awards',
           'year_range', 'data_stats']


def count_participations_by_source(participations, competition_map,
                                   team_participations=None):
    """
    Return the number of individual and team participations at known
    competitions from each source.
    """
    r = new_source_counts()
    for p in list(participations) + list(team_participations or []):
        comp = competition_map.get(p.competition_id)
        if comp is not None:
            r[comp.source] += 1
    return r


def collect_years_by_source(competitions):
    """Return a mapping from each source to the set of its years."""
    r = {}
    for c in competitions:
        r.setdefault(c.source, set()).add(c.year)
    return r


def _format_range(start, end):
    if start == end:
        return '%d' % start
    return '%d-%d' % (start, end)


def format_year_ranges(years):
    """
    Return a description of a collection of years, with runs of
    consecutive years shown as ranges, e.g. '2016-2018, 2020-2021'.
    """
    years = sorted(set(years))
    if not years:
        return ''
    ranges = []
    start = years[0]
    end = years[0]
    for y in years[1:]:
        if y == end + 1:
            end = y
        else:
            ranges.append(_format_range(start, end))
            start = y
            end = y
    ranges.append(_format_range(start, end))
    return ', '.join(ranges)


def format_years_by_source(years_by_source):
    """Return a mapping from each source to a description of its years."""
    return {source: format_year_ranges(years)
            for source, years in years_by_source.items()}


def count_awards(participations):
    """
    Return a mapping from each award to the number of participations
    with that award, and the number of participations without an
    award.
    """
    awards = {a: 0 for a in award_list}
    no_award = 0
    for p in participations:
        if p.award:
            awards[p.award] += 1
        else:
            no_award += 1
    return (awards, no_award)


def year_range(competitions):
    """
    Return the earliest and latest years of competitions, and the
    difference between them (so 0 for a single year).  All are 0 if
    there are no competitions.
    """
    years = [c.year for c in competitions]
    if not years:
        return {'min_year': 0, 'max_year': 0, 'year_span': 0}
    min_year = min(years)
    max_year = max(years)
    return {'min_year': min_year,
            'max_year': max_year,
            'year_span': max_year - min_year}


def data_stats(database):
    """Return the summary statistics for a Database."""
    participations = database.participation_list
    competitions = database.competition_list
    by_olympiad = count_participations_by_source(
        participations, database.competition_map,
        database.team_participation_list)
    years_by_olympiad = format_years_by_source(
        collect_years_by_source(competitions))
    years = year_range(competitions)
    awards, no_award = count_awards(participations)
    return {'countries': len(database.country_map),
            'competitions': len(database.competition_map),
            'people': len(database.person_map),
            'participations': len(participations),
            'by_olympiad': by_olympiad,
            'years_by_olympiad': years_by_olympiad,
            'min_year': years['min_year'],
            'max_year': years['max_year'],
            'year_span': years['year_span'],
            'awards': awards,
            'no_award': no_award,
            'last_updated': database.last_updated}
