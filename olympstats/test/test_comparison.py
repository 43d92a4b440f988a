# Tests for olympstats.comparison module.

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
Tests for olympstats.comparison module.
"""

import unittest

from olympstats.comparison import country_stats, filter_stats_by_source, \
    team_ranks, team_ranks_from_team_participations, \
    shared_available_sources, individual_comparison_series, \
    team_comparison_series, medal_rate_text
from olympstats.countrystats import team_stats
from olympstats.data import AWARD_GOLD, SOURCE_IMO, SOURCE_EGMO, \
    SOURCE_BALTICWAY
from olympstats.test.testutil import make_competition, make_participation, \
    make_team_participation, sample_database

__all__ = ['CountryComparisonTestCase']


class CountryComparisonTestCase(unittest.TestCase):

    """Test statistics comparing two countries."""

    def setUp(self):
        self.d = sample_database()
        cmap = self.d.competition_map
        participations = self.d.participation_list
        self.stats_abc = country_stats(participations, cmap, 'country-abc')
        self.stats_def = country_stats(participations, cmap, 'country-def')
        team = self.d.team_participation_list
        self.team_abc = team_stats(team, cmap, 'country-abc')
        self.team_def = team_stats(team, cmap, 'country-def')

    def test_country_stats(self):
        """Test a country's results by year and source."""
        s = self.stats_abc
        self.assertEqual((s['gold'], s['silver'], s['bronze'], s['hm']),
                         (1, 0, 1, 1))
        self.assertEqual(s['total'], 4)
        self.assertEqual(s['by_year_and_source'][(2019, SOURCE_IMO)],
                         {'gold': 1, 'silver': 0, 'bronze': 0, 'hm': 1,
                          'participants': 2, 'total_score': 40,
                          'source': SOURCE_IMO})
        self.assertEqual(
            s['by_year_and_source'][(2020, SOURCE_EGMO)]['bronze'], 1)
        self.assertEqual(s['by_source'][SOURCE_IMO], 3)
        self.assertEqual(s['by_source'][SOURCE_EGMO], 1)
        self.assertEqual(len(s['by_year_and_source']), 3)

    def test_missing_competition(self):
        """
        Test that results at unknown competitions count in the total,
        but not in awards or per-year figures.
        """
        c = make_competition(1900)
        p = make_participation(c, 'a1', 'ABC', [7], AWARD_GOLD)
        stats = country_stats(self.d.participation_list + [p],
                              self.d.competition_map, 'country-abc')
        self.assertEqual(stats['total'], 5)
        self.assertEqual(stats['gold'], 1)
        self.assertEqual(len(stats['by_year_and_source']), 3)
        self.assertEqual(stats['by_source'][SOURCE_IMO], 3)

    def test_filter_stats_by_source(self):
        """Test awards and participations for one source."""
        self.assertEqual(filter_stats_by_source(self.stats_abc, SOURCE_IMO),
                         {'gold': 1, 'silver': 0, 'bronze': 0, 'hm': 1,
                          'total': 3})
        self.assertEqual(filter_stats_by_source(None, SOURCE_IMO),
                         {'gold': 0, 'silver': 0, 'bronze': 0, 'hm': 0,
                          'total': 0})

    def test_team_ranks(self):
        """Test derived and recorded team ranks."""
        ranks = team_ranks(self.d.participation_list,
                           self.d.competition_map)
        self.assertEqual(ranks[(2019, SOURCE_IMO)],
                         {'country-abc': 1, 'country-def': 2,
                          'country-ghi': 3})
        self.assertEqual(ranks[(2020, SOURCE_IMO)],
                         {'country-def': 1, 'country-ghi': 2,
                          'country-jkl': 3, 'country-abc': 4})
        self.assertEqual(ranks[(2020, SOURCE_EGMO)], {'country-abc': 1})
        team = self.d.team_participation_list
        c = self.d.competition_map['BALTICWAY-2022']
        team.append(make_team_participation(c, 'GHI', 10, None))
        ranks = team_ranks_from_team_participations(team,
                                                    self.d.competition_map)
        self.assertEqual(ranks,
                         {(2021, SOURCE_BALTICWAY): {'country-abc': 2,
                                                     'country-def': 1,
                                                     'country-ghi': 3},
                          (2022, SOURCE_BALTICWAY): {'country-abc': 1,
                                                     'country-def': 2}})

    def test_shared_sources(self):
        """Test the sources at which both countries have results."""
        self.assertEqual(shared_available_sources(self.stats_abc,
                                                  self.stats_def),
                         [SOURCE_IMO])
        self.assertEqual(shared_available_sources(self.stats_abc,
                                                  self.stats_def,
                                                  self.team_abc,
                                                  self.team_def),
                         [SOURCE_IMO, SOURCE_BALTICWAY])
        self.assertEqual(shared_available_sources(self.stats_abc,
                                                  self.stats_def,
                                                  self.team_abc),
                         [SOURCE_IMO])
        self.assertEqual(shared_available_sources(self.stats_abc, None), [])

    def test_individual_series(self):
        """Test year-by-year comparison of individual results."""
        ranks = team_ranks(self.d.participation_list,
                           self.d.competition_map)
        series = individual_comparison_series(
            self.stats_abc, self.stats_def, 'country-abc', 'country-def',
            SOURCE_IMO, ranks)
        self.assertEqual(series,
                         [{'year': 2019,
                           'medals_1': 1, 'avg_score_1': 20.0,
                           'total_points_1': 40, 'team_rank_1': 1,
                           'medals_2': 1, 'avg_score_2': 25.0,
                           'total_points_2': 25, 'team_rank_2': 2},
                          {'year': 2020,
                           'medals_1': 0, 'avg_score_1': 5.0,
                           'total_points_1': 5, 'team_rank_1': 4,
                           'medals_2': 1, 'avg_score_2': 30.0,
                           'total_points_2': 30, 'team_rank_2': 1}])
        series = individual_comparison_series(
            self.stats_abc, self.stats_def, 'country-abc', 'country-def',
            SOURCE_EGMO, ranks)
        self.assertEqual(series,
                         [{'year': 2020,
                           'medals_1': 1, 'avg_score_1': 10.0,
                           'total_points_1': 10, 'team_rank_1': 1,
                           'medals_2': 0, 'avg_score_2': None,
                           'total_points_2': None, 'team_rank_2': None}])
        self.assertEqual(individual_comparison_series(
            None, self.stats_def, 'country-abc', 'country-def', SOURCE_IMO,
            ranks), [])

    def test_team_series(self):
        """Test year-by-year comparison of team results."""
        ranks = team_ranks_from_team_participations(
            self.d.team_participation_list, self.d.competition_map)
        series = team_comparison_series(self.team_abc, self.team_def,
                                        'country-abc', 'country-def',
                                        SOURCE_BALTICWAY, ranks)
        self.assertEqual(series,
                         [{'year': 2021, 'score_1': 50, 'team_rank_1': 2,
                           'score_2': 60, 'team_rank_2': 1},
                          {'year': 2022, 'score_1': 70, 'team_rank_1': 1,
                           'score_2': 40, 'team_rank_2': 2}])
        self.assertEqual(team_comparison_series(self.team_abc, None,
                                                'country-abc', 'country-def',
                                                SOURCE_BALTICWAY, ranks), [])

    def test_medal_rate_text(self):
        """Test the description of the medal rate."""
        abc = filter_stats_by_source(self.stats_abc, SOURCE_IMO)
        self.assertEqual(medal_rate_text(abc), '33.3% medal rate')
        def_ = filter_stats_by_source(self.stats_def, SOURCE_IMO)
        self.assertEqual(medal_rate_text(def_), '100.0% medal rate')
        none = filter_stats_by_source(self.stats_abc, SOURCE_BALTICWAY)
        self.assertEqual(medal_rate_text(none), 'No participations')
        stats = {'gold': 1, 'silver': 1, 'bronze': 0, 'hm': 5, 'total': 3}
        self.assertEqual(medal_rate_text(stats), '66.7% medal rate')
