# Competition statistics for olympstats package.

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
This module provides statistics for a single competition: country
standings derived from individual results, the distribution of total
scores, per-problem statistics and the rows of results tables.
"""

from olympstats.stats import new_award_counts, add_award, \
    problem_mean_std_dev, correlation

__all__ = ['country_standings', 'score_distribution', 'problem_statistics',
           'competition_rows', 'participation_rows', 'team_result_rows',
           'team_score_distribution', 'country_filter_options']


def _country_code(country_map, country_id):
    c = country_map.get(country_id)
    return None if c is None else c.code


def _country_name(country_map, country_id):
    c = country_map.get(country_id)
    return country_id if c is None else c.name


def country_standings(participations, country_map, num_problems):
    """
    Return the standings of countries at a competition, derived by
    summing the results of their contestants.  Countries are ranked
    by total score, with ties left in the order in which the
    countries were first seen.
    """
    stats = {}
    for p in participations:
        if not p.country_id:
            continue
        if p.country_id not in stats:
            s = new_award_counts()
            s['problem_totals'] = [0 for n in range(num_problems)]
            s['total_score'] = 0
            s['participants'] = 0
            stats[p.country_id] = s
        s = stats[p.country_id]
        s['total_score'] += p.total
        s['participants'] += 1
        for n, score in enumerate(p.problem_scores):
            if score is not None and n < num_problems:
                s['problem_totals'][n] += score
        add_award(s, p.award)

    r = []
    for country_id, s in stats.items():
        r.append({'country_id': country_id,
                  'country_code': _country_code(country_map, country_id),
                  'country_name': _country_name(country_map, country_id),
                  'rank': 0,
                  'problem_totals': s['problem_totals'],
                  'total_score': s['total_score'],
                  'participants': s['participants'],
                  'gold': s['gold'],
                  'silver': s['silver'],
                  'bronze': s['bronze'],
                  'hm': s['hm']})
    r.sort(key=lambda row: row['total_score'], reverse=True)
    for n, row in enumerate(r):
        row['rank'] = n + 1
    return r


def score_distribution(participations, competition):
    """
    Return, for every possible total score at a competition, the
    number of contestants with that total, by award.  Every score
    from 0 to the maximum is present, even if no contestant received
    it.
    """
    max_score = competition.num_problems * competition.max_score_per_problem
    r = []
    bins = {}
    for score in range(max_score + 1):
        row = new_award_counts()
        row['score'] = score
        row['none'] = 0
        r.append(row)
        bins[score] = row
    for p in participations:
        # Totals outside the possible range are ignored.
        row = bins.get(p.total)
        if row is not None:
            if p.award is None:
                row['none'] += 1
            else:
                add_award(row, p.award)
    for row in r:
        row['total'] = (row['gold'] + row['silver'] + row['bronze']
                        + row['hm'] + row['none'])
    return [{k: row[k] for k in ('score', 'gold', 'silver', 'bronze', 'hm',
                                 'none', 'total')}
            for row in r]


def _problem_score(p, n):
    if n < len(p.problem_scores):
        return p.problem_scores[n]
    return None


def problem_statistics(participations, competition):
    """
    Return statistics for each problem at a competition, or None if
    there is no competition or no results.  Means, maxima and standard
    deviations only consider contestants with a known score on a
    problem; correlations only consider contestants with known scores
    on both problems.  The correlation of a problem with itself is
    NaN, since it is not meaningful.
    """
    if competition is None or not participations:
        return None
    num_problems = competition.num_problems
    max_score = competition.max_score_per_problem

    distributions = []
    means = []
    max_scores = []
    std_devs = []
    correlations_with_total = []
    for n in range(num_problems):
        scores = [_problem_score(p, n) for p in participations]
        dist = [0 for s in range(max_score + 1)]
        for s in scores:
            if s is not None and 0 <= s <= max_score:
                dist[s] += 1
        distributions.append(dist)
        mean, max_s, std_dev = problem_mean_std_dev(scores)
        means.append(mean)
        max_scores.append(max_s)
        std_devs.append(std_dev)
        correlations_with_total.append(
            correlation([(_problem_score(p, n), p.total)
                         for p in participations]))

    problem_correlations = [
        [(float('nan')
          if n1 == n2
          else correlation([(_problem_score(p, n1), _problem_score(p, n2))
                            for p in participations]))
         for n2 in range(num_problems)]
        for n1 in range(num_problems)]

    max_count = max([c for dist in distributions for c in dist], default=0)

    return {'num_problems': num_problems,
            'max_score': max_score,
            'distributions': distributions,
            'means': means,
            'max_scores': max_scores,
            'std_devs': std_devs,
            'correlations_with_total': correlations_with_total,
            'problem_correlations': problem_correlations,
            'max_count': max_count}


def competition_rows(competitions, source=None):
    """Return rows for a list of competitions, optionally for one source."""
    return [{'id': c.id,
             'source': c.source,
             'edition': c.edition,
             'year': c.year}
            for c in competitions
            if source is None or c.source == source]


def participation_rows(participations, person_map, country_map,
                       num_problems):
    """Return rows for the individual results table of a competition."""
    r = []
    for p in participations:
        person = person_map.get(p.person_id)
        r.append({'id': p.id,
                  'person_id': p.person_id,
                  'person_name': (p.person_id if person is None
                                  else person.name),
                  'country_id': p.country_id,
                  'country_code': _country_code(country_map, p.country_id),
                  'country_name': _country_name(country_map, p.country_id),
                  'rank': p.rank,
                  'problem_scores': p.problem_scores,
                  'num_problems': num_problems,
                  'total': p.total,
                  'award': p.award})
    return r


def team_result_rows(team_participations, country_map):
    """
    Return rows for the results table of a team competition, in rank
    order with unranked teams last.
    """
    r = [{'id': tp.id,
          'country_id': tp.country_id,
          'country_code': _country_code(country_map, tp.country_id),
          'country_name': _country_name(country_map, tp.country_id),
          'rank': tp.rank,
          'problem_scores': tp.problem_scores,
          'total': tp.total}
         for tp in team_participations]
    r.sort(key=lambda row: (row['rank'] is None, row['rank'] or 0))
    return r


def team_score_distribution(team_participations):
    """
    Return the number of teams with each total score achieved at a
    team competition, in increasing order of score.
    """
    counts = {}
    for tp in team_participations:
        counts[tp.total] = counts.get(tp.total, 0) + 1
    return [{'score': score, 'count': counts[score]}
            for score in sorted(counts)]


def country_filter_options(participations, country_map):
    """
    Return options for filtering results by country, one for each
    country with results, sorted by name.
    """
    seen = set()
    country_ids = []
    for p in participations:
        if p.country_id and p.country_id not in seen:
            seen.add(p.country_id)
            country_ids.append(p.country_id)
    r = [{'value': cid, 'label': _country_name(country_map, cid)}
         for cid in country_ids]
    r.sort(key=lambda o: o['label'].casefold())
    return r
