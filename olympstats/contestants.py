# Contestant statistics for olympstats package.

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
This module provides statistics for individual contestants: their
results at each competition and their ranking among all contestants
over time.
"""

from olympstats.data import SOURCE_IMO
from olympstats.stats import new_award_counts, add_award

__all__ = ['is_redacted_name', 'contestant_rows', 'participation_rows',
           'ranking_chart_data', 'person_sources', 'max_problems',
           'contestant_info']


def is_redacted_name(name):
    """Return whether a name has been redacted in the source data."""
    return name.startswith('(') or name.startswith('*')


def contestant_rows(people, country_map):
    """Return rows for the list of contestants, omitting redacted names."""
    r = []
    for person in people:
        if is_redacted_name(person.name):
            continue
        c = country_map.get(person.country_id)
        r.append({'id': person.id,
                  'name': person.name,
                  'country_id': person.country_id,
                  'country_code': None if c is None else c.code,
                  'country_name': person.country_id if c is None else c.name})
    return r


def participation_rows(participations, competition_map):
    """
    Return rows for a person's results.  If the competition is not
    known, its id is shown in place of its name, and the source, year
    and number of problems default to IMO, 0 and 0.
    """
    r = []
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None:
            name = p.competition_id
            source = SOURCE_IMO
            year = 0
            num_problems = 0
        else:
            name = comp.name
            source = comp.source
            year = comp.year
            num_problems = comp.num_problems
        r.append({'id': p.id,
                  'competition_id': p.competition_id,
                  'competition_name': name,
                  'source': source,
                  'year': year,
                  'rank': p.rank,
                  'problem_scores': p.problem_scores,
                  'num_problems': num_problems,
                  'total': p.total,
                  'award': p.award})
    return r


def ranking_chart_data(all_participations, person_participations,
                       competition_map, chart_source):
    """
    Return, for each year of competitions from the given source, the
    numbers of contestants with each medal and without a medal, and
    the rank of the given person.  The person's position counts up
    from the bottom of the field; it is not adjusted if the rank given
    exceeds the number of contestants.  Years without results are
    omitted.
    """
    by_year = {}
    for p in all_participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != chart_source:
            continue
        by_year.setdefault(comp.year, []).append(p)

    person_rank = {}
    for p in person_participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != chart_source:
            continue
        person_rank[comp.year] = p.rank

    r = []
    for year in sorted(by_year):
        year_participations = by_year[year]
        total = len(year_participations)
        counts = new_award_counts()
        for p in year_participations:
            add_award(counts, p.award)
        rank = person_rank.get(year)
        r.append({'year': year,
                  'no_medal': (total - counts['gold'] - counts['silver']
                               - counts['bronze']),
                  'bronze': counts['bronze'],
                  'silver': counts['silver'],
                  'gold': counts['gold'],
                  'total_participants': total,
                  'person_rank': rank,
                  'person_position': (None if rank is None
                                      else total - rank + 1)})
    return r


def person_sources(participations, competition_map):
    """Return the set of sources of the competitions in participations."""
    r = set()
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is not None:
            r.add(comp.source)
    return r


def max_problems(rows, source_filter=None):
    """
    Return the largest number of problems for the given participation
    rows, optionally only those for one source.
    """
    if source_filter:
        rows = [row for row in rows if row['source'] == source_filter]
    return max([row['num_problems'] for row in rows], default=0)


def contestant_info(person, country_map):
    """Return the name and country details to show for a person, or None."""
    if person is None:
        return None
    c = country_map.get(person.country_id)
    return {'name': person.name,
            'country_code': None if c is None else c.code,
            'country_name': person.country_id if c is None else c.name}
