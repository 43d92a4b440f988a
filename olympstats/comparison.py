# Country comparison statistics for olympstats package.

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
This module provides statistics comparing the results of two
countries, year by year, at competitions from a common source.

Per-year statistics are keyed by (year, source) tuples.
"""

from olympstats.data import source_list
from olympstats.stats import new_award_counts, add_award, \
    new_source_counts, round_half_up

__all__ = ['country_stats', 'filter_stats_by_source', 'team_ranks',
           'team_ranks_from_team_participations', 'shared_available_sources',
           'individual_comparison_series', 'team_comparison_series',
           'medal_rate_text']


def country_stats(participations, competition_map, country_id):
    """
    Return the individual results of a country, in total and by year
    and source.  The total number of participations includes those at
    competitions that are not known, but awards and per-year figures
    are only counted for known competitions.
    """
    stats = new_award_counts()
    stats['total'] = 0
    stats['by_year_and_source'] = {}
    stats['by_source'] = new_source_counts()
    for p in participations:
        if p.country_id != country_id:
            continue
        stats['total'] += 1
        comp = competition_map.get(p.competition_id)
        if comp is None:
            continue
        stats['by_source'][comp.source] += 1
        key = (comp.year, comp.source)
        if key not in stats['by_year_and_source']:
            year_stats = new_award_counts()
            year_stats['participants'] = 0
            year_stats['total_score'] = 0
            year_stats['source'] = comp.source
            stats['by_year_and_source'][key] = year_stats
        year_stats = stats['by_year_and_source'][key]
        year_stats['participants'] += 1
        year_stats['total_score'] += p.total
        add_award(stats, p.award)
        add_award(year_stats, p.award)
    return stats


def filter_stats_by_source(stats, source):
    """Return the award counts and participations of a country for a source."""
    r = new_award_counts()
    r['total'] = 0
    if stats is None:
        return r
    for year_stats in stats['by_year_and_source'].values():
        if year_stats['source'] == source:
            for k in ('gold', 'silver', 'bronze', 'hm'):
                r[k] += year_stats[k]
            r['total'] += year_stats['participants']
    return r


def team_ranks(participations, competition_map):
    """
    Return, for each (year, source), a mapping from country id to the
    rank of that country by the sum of its contestants' totals.
    """
    by_competition = {}
    for p in participations:
        by_competition.setdefault(p.competition_id, []).append(p)

    r = {}
    for competition_id, comp_participations in by_competition.items():
        comp = competition_map.get(competition_id)
        if comp is None:
            continue
        totals = {}
        for p in comp_participations:
            totals[p.country_id] = totals.get(p.country_id, 0) + p.total
        ranking = sorted(totals, key=lambda cid: totals[cid], reverse=True)
        r[(comp.year, comp.source)] = {cid: n + 1
                                       for n, cid in enumerate(ranking)}
    return r


def team_ranks_from_team_participations(team_participations, competition_map):
    """
    Return, for each (year, source), a mapping from country id to the
    recorded rank of that country's team.  Unranked teams are omitted.
    """
    r = {}
    for tp in team_participations:
        comp = competition_map.get(tp.competition_id)
        if comp is None:
            continue
        ranks = r.setdefault((comp.year, comp.source), {})
        if tp.rank is not None:
            ranks[tp.country_id] = tp.rank
    return r


def _sources(stats, team_stats):
    r = {year_stats['source']
         for year_stats in stats['by_year_and_source'].values()}
    if team_stats is not None:
        r.update(team_year_stats['source']
                 for team_year_stats
                 in team_stats['by_year_and_source'].values())
    return r


def shared_available_sources(stats1, stats2, team_stats1=None,
                             team_stats2=None, source_options=source_list):
    """
    Return the sources at which both countries have results, in the
    order of source_options.  Team results are considered only if
    given for both countries.
    """
    if stats1 is None or stats2 is None:
        return []
    if team_stats1 is None or team_stats2 is None:
        team_stats1 = None
        team_stats2 = None
    sources1 = _sources(stats1, team_stats1)
    sources2 = _sources(stats2, team_stats2)
    return [s for s in source_options if s in sources1 and s in sources2]


def _years(stats1, stats2, source):
    years = set()
    for stats in (stats1, stats2):
        for year, year_source in stats['by_year_and_source']:
            if year_source == source:
                years.add(year)
    return sorted(years)


def individual_comparison_series(stats1, stats2, country1_id, country2_id,
                                 source, ranks):
    """
    Return, for each year in which either country competed at the
    given source, both countries' medal counts (excluding Honourable
    Mentions), average and total scores and team ranks, where ranks
    is as returned by team_ranks.
    """
    if stats1 is None or stats2 is None:
        return []
    r = []
    for year in _years(stats1, stats2, source):
        key = (year, source)
        row = {'year': year}
        year_ranks = ranks.get(key, {})
        for n, stats, cid in ((1, stats1, country1_id),
                              (2, stats2, country2_id)):
            s = stats['by_year_and_source'].get(key)
            if s is None:
                row['medals_%d' % n] = 0
                row['avg_score_%d' % n] = None
                row['total_points_%d' % n] = None
            else:
                row['medals_%d' % n] = s['gold'] + s['silver'] + s['bronze']
                row['avg_score_%d' % n] = (
                    round_half_up(s['total_score'] / s['participants'], 1)
                    if s['participants'] > 0
                    else None)
                row['total_points_%d' % n] = s['total_score']
            row['team_rank_%d' % n] = year_ranks.get(cid)
        r.append(row)
    return r


def team_comparison_series(team_stats1, team_stats2, country1_id,
                           country2_id, source, ranks):
    """
    Return, for each year in which either country's team competed at
    the given source, both teams' scores and ranks, where ranks is as
    returned by team_ranks_from_team_participations.
    """
    if team_stats1 is None or team_stats2 is None:
        return []
    r = []
    for year in _years(team_stats1, team_stats2, source):
        key = (year, source)
        row = {'year': year}
        year_ranks = ranks.get(key, {})
        for n, stats, cid in ((1, team_stats1, country1_id),
                              (2, team_stats2, country2_id)):
            s = stats['by_year_and_source'].get(key)
            row['score_%d' % n] = None if s is None else s['total_score']
            row['team_rank_%d' % n] = year_ranks.get(cid)
        r.append(row)
    return r


def medal_rate_text(filtered_stats):
    """
    Return a description of the proportion of participations that
    received a medal, as returned by filter_stats_by_source.
    """
    total = filtered_stats['total']
    if total == 0:
        return 'No participations'
    medals = (filtered_stats['gold'] + filtered_stats['silver']
              + filtered_stats['bronze'])
    return '%.1f%% medal rate' % round_half_up(medals / total * 100, 1)
