# Hall of Fame for olympstats package.

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
This module provides the Hall of Fame: contestants ranked by the
medals they have won.
"""

from olympstats.stats import new_award_counts, add_award

__all__ = ['ALL', 'hall_of_fame']

ALL = 'all'
"""Filter value selecting all sources or all countries."""


def _sort_key_hall_of_fame(row):
    return (-row['gold'], -row['silver'], -row['bronze'], -row['hm'])


def hall_of_fame(participations, competition_map, person_map, country_map,
                 selected_source=ALL, selected_country=ALL):
    """
    Return the Hall of Fame rows for contestants with at least one
    medal, optionally counting only competitions from one source and
    listing only people registered with one country.  Rows are sorted
    by gold, then silver, then bronze medals, then Honourable
    Mentions; ranks are consecutive positions in that order, even for
    equal medal counts.
    """
    person_stats = {}
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None:
            continue
        if selected_source != ALL and comp.source != selected_source:
            continue
        if p.person_id not in person_stats:
            s = new_award_counts()
            s['participations'] = 0
            person_stats[p.person_id] = s
        s = person_stats[p.person_id]
        s['participations'] += 1
        add_award(s, p.award)

    r = []
    for person_id, s in person_stats.items():
        person = person_map.get(person_id)
        if person is None:
            continue
        total_medals = s['gold'] + s['silver'] + s['bronze']
        if total_medals == 0:
            continue
        # The country filter uses the country a person is registered
        # with, not the country of each participation.
        if selected_country != ALL and person.country_id != selected_country:
            continue
        c = country_map.get(person.country_id)
        r.append({'rank': 0,
                  'person_id': person_id,
                  'person_name': person.name,
                  'country_id': person.country_id,
                  'country_code': None if c is None else c.code,
                  'country_name': person.country_id if c is None else c.name,
                  'gold': s['gold'],
                  'silver': s['silver'],
                  'bronze': s['bronze'],
                  'hm': s['hm'],
                  'total_medals': total_medals,
                  'participations': s['participations']})

    r.sort(key=_sort_key_hall_of_fame)
    for n, row in enumerate(r):
        row['rank'] = n + 1
    return r
