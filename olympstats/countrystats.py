# Country statistics for olympstats package.

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
This module provides statistics for a single country: medal counts,
medal progression over the years and the rank of the country's team
at each competition.
"""

from olympstats.data import AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE, \
    AWARD_HONOURABLE_MENTION, source_list
from olympstats.stats import new_award_counts, add_award, \
    new_source_counts, round_half_up, rank_percentile

__all__ = ['country_stats_map', 'country_rows', 'medals_by_source',
           'team_rank_over_time', 'team_rank_from_team_participations',
           'medal_progression', 'country_available_sources',
           'team_score_over_time', 'team_stats',
           'filter_team_stats_by_source', 'country_participation_rows']


def _new_country_stats():
    s = new_award_counts()
    s['participations'] = 0
    s['total_medals'] = 0
    return s


def country_stats_map(participations):
    """
    Return a mapping from country id to the number of participations
    and awards for that country.  The total number of medals does not
    include Honourable Mentions.
    """
    r = {}
    for p in participations:
        if p.country_id not in r:
            r[p.country_id] = _new_country_stats()
        s = r[p.country_id]
        s['participations'] += 1
        add_award(s, p.award)
        s['total_medals'] = s['gold'] + s['silver'] + s['bronze']
    return r


def country_rows(countries, participations):
    """Return rows for the list of countries, with their statistics."""
    stats_map = country_stats_map(participations)
    r = []
    for c in countries:
        s = stats_map.get(c.id) or _new_country_stats()
        r.append({'id': c.id,
                  'code': c.code,
                  'name': c.name,
                  'participations': s['participations'],
                  'gold': s['gold'],
                  'silver': s['silver'],
                  'bronze': s['bronze'],
                  'hm': s['hm'],
                  'total_medals': s['total_medals']})
    return r


def medals_by_source(participations, competition_map, source):
    """
    Return the number of each award in participations at competitions
    from the given source, keyed by award.
    """
    r = {AWARD_GOLD: 0,
         AWARD_SILVER: 0,
         AWARD_BRONZE: 0,
         AWARD_HONOURABLE_MENTION: 0}
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != source:
            continue
        if p.award is not None:
            r[p.award] += 1
    return r


def _group_by_competition(participations, competition_map, source):
    r = {}
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != source:
            continue
        if p.competition_id not in r:
            r[p.competition_id] = (comp.year, [])
        r[p.competition_id][1].append(p)
    return r


def _team_totals_ranking(participations):
    """
    Return a list of country ids at a competition, ordered by the sum
    of their contestants' totals, highest first.
    """
    totals = {}
    for p in participations:
        totals[p.country_id] = totals.get(p.country_id, 0) + p.total
    return sorted(totals, key=lambda cid: totals[cid], reverse=True)


def team_rank_over_time(all_participations, competition_map, country_id,
                        source):
    """
    Return, for each competition from a source, the rank of a country
    by the sum of its contestants' totals, the number of countries and
    the corresponding percentile.  The rank and percentile are None
    for competitions where the country had no contestants.
    """
    r = []
    groups = _group_by_competition(all_participations, competition_map,
                                   source)
    for year, participations in groups.values():
        ranking = _team_totals_ranking(participations)
        total_teams = len(ranking)
        if country_id in ranking:
            rank = ranking.index(country_id) + 1
            percentile = rank_percentile(rank, total_teams)
        else:
            rank = None
            percentile = None
        r.append({'year': year,
                  'team_rank': rank,
                  'total_teams': total_teams,
                  'percentile': percentile})
    r.sort(key=lambda row: row['year'])
    return r


def team_rank_from_team_participations(all_team_participations,
                                       competition_map, country_id, source):
    """
    Return, for each team competition from a source, the recorded rank
    of a country's team, the number of teams and the corresponding
    percentile.
    """
    r = []
    groups = _group_by_competition(all_team_participations, competition_map,
                                   source)
    for year, team_participations in groups.values():
        total_teams = len(team_participations)
        rank = None
        for tp in team_participations:
            if tp.country_id == country_id:
                rank = tp.rank
                break
        r.append({'year': year,
                  'team_rank': rank,
                  'total_teams': total_teams,
                  'percentile': (None if rank is None
                                 else rank_percentile(rank, total_teams))})
    r.sort(key=lambda row: row['year'])
    return r


def medal_progression(participations, competition_map, source,
                      mode='yearly'):
    """
    Return the number of each award in each year at competitions from
    the given source, either for that year ('yearly') or in total up
    to and including that year ('cumulative').  The total here
    includes Honourable Mentions.
    """
    if mode not in ('yearly', 'cumulative'):
        raise ValueError('unknown medal progression mode %s' % mode)
    by_year = {}
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != source:
            continue
        if comp.year not in by_year:
            by_year[comp.year] = new_award_counts()
        add_award(by_year[comp.year], p.award)

    r = []
    running = new_award_counts()
    for year in sorted(by_year):
        counts = by_year[year]
        if mode == 'cumulative':
            for k in running:
                running[k] += counts[k]
            counts = running
        r.append({'year': year,
                  'gold': counts['gold'],
                  'silver': counts['silver'],
                  'bronze': counts['bronze'],
                  'hm': counts['hm'],
                  'total': (counts['gold'] + counts['silver']
                            + counts['bronze'] + counts['hm'])})
    return r


def country_available_sources(participations, competition_map,
                              team_participations=None):
    """
    Return the sources of competitions at which a country has
    individual or team results, in the canonical order.
    """
    sources = set()
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is not None:
            sources.add(comp.source)
    for tp in team_participations or []:
        comp = competition_map.get(tp.competition_id)
        if comp is not None:
            sources.add(comp.source)
    return [s for s in source_list if s in sources]


def team_score_over_time(team_participations, competition_map, source):
    """Return a country's team total and rank for each year of a source."""
    r = []
    for tp in team_participations:
        comp = competition_map.get(tp.competition_id)
        if comp is None or comp.source != source:
            continue
        r.append({'year': comp.year, 'total': tp.total, 'rank': tp.rank})
    r.sort(key=lambda row: row['year'])
    return r


def team_stats(team_participations, competition_map, country_id):
    """
    Return the team results of a country, keyed by (year, source), and
    the number of team participations from each source.
    """
    by_year_and_source = {}
    by_source = new_source_counts()
    for tp in team_participations:
        if tp.country_id != country_id:
            continue
        comp = competition_map.get(tp.competition_id)
        if comp is None:
            continue
        by_source[comp.source] += 1
        by_year_and_source[(comp.year, comp.source)] = {
            'total_score': tp.total,
            'rank': tp.rank,
            'source': comp.source}
    return {'by_year_and_source': by_year_and_source,
            'by_source': by_source}


def filter_team_stats_by_source(stats, source):
    """
    Return summary statistics of a country's team results from one
    source: the number of participations, the best and average rank,
    and the average score.  Values are None where there are no results
    to summarise.
    """
    r = {'participations': 0,
         'best_rank': None,
         'avg_rank': None,
         'avg_score': None}
    if stats is None:
        return r
    entries = [e for e in stats['by_year_and_source'].values()
               if e['source'] == source]
    if not entries:
        return r
    ranks = [e['rank'] for e in entries if e['rank'] is not None]
    r['participations'] = len(entries)
    if ranks:
        r['best_rank'] = min(ranks)
        r['avg_rank'] = round_half_up(sum(ranks) / len(ranks), 1)
    r['avg_score'] = round_half_up(
        sum([e['total_score'] for e in entries]) / len(entries), 1)
    return r


def country_participation_rows(participations, competition_map, person_map,
                               source):
    """
    Return rows for the individual results of a country at
    competitions from the given source.
    """
    r = []
    for p in participations:
        comp = competition_map.get(p.competition_id)
        if comp is None or comp.source != source:
            continue
        person = person_map.get(p.person_id)
        r.append({'id': p.id,
                  'person_id': p.person_id,
                  'person_name': (p.person_id if person is None
                                  else person.name),
                  'competition_id': p.competition_id,
                  'competition_name': comp.name,
                  'source': comp.source,
                  'year': comp.year,
                  'rank': p.rank,
                  'problem_scores': p.problem_scores,
                  'num_problems': comp.num_problems,
                  'total': p.total,
                  'award': p.award})
    return r
