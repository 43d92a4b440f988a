# Tests for olympstats.datastats module.

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
Tests for olympstats.datastats module.
"""

import unittest

from olympstats.data import AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE, \
    AWARD_HONOURABLE_MENTION, SOURCE_IMO, SOURCE_EGMO, SOURCE_BALTICWAY
from olympstats.datastats import count_participations_by_source, \
    collect_years_by_source, format_year_ranges, format_years_by_source, \
    count_awards, year_range, data_stats
from olympstats.test.testutil import make_competition, make_participation, \
    make_database, sample_database

__all__ = ['YearRangesTestCase', 'DataStatsTestCase']


class YearRangesTestCase(unittest.TestCase):

    """Test descriptions of ranges of years."""

    def test_format_year_ranges(self):
        """Test compressing years to ranges."""
        self.assertEqual(format_year_ranges({2020}), '2020')
        self.assertEqual(format_year_ranges({2020, 2021, 2022}), '2020-2022')
        self.assertEqual(format_year_ranges({2016, 2017, 2018, 2020, 2021}),
                         '2016-2018, 2020-2021')
        self.assertEqual(format_year_ranges(set()), '')

    def test_order_independent(self):
        """Test that the order of the years given does not matter."""
        self.assertEqual(format_year_ranges([2021, 2016, 2020, 2018, 2017]),
                         '2016-2018, 2020-2021')
        self.assertEqual(format_year_ranges([2003, 2001, 2001]),
                         '2001, 2003')

    def test_year_range(self):
        """Test the span of years, which is 0 for a single year."""
        self.assertEqual(year_range([make_competition(2020)]),
                         {'min_year': 2020, 'max_year': 2020,
                          'year_span': 0})
        self.assertEqual(year_range([make_competition(2020),
                                     make_competition(1959, SOURCE_EGMO)]),
                         {'min_year': 1959, 'max_year': 2020,
                          'year_span': 61})
        self.assertEqual(year_range([]),
                         {'min_year': 0, 'max_year': 0, 'year_span': 0})


class DataStatsTestCase(unittest.TestCase):

    """Test summary statistics for a database."""

    def setUp(self):
        self.d = sample_database()

    def test_by_source(self):
        """Test counts and years for each source."""
        d = self.d
        counts = count_participations_by_source(
            d.participation_list, d.competition_map,
            d.team_participation_list)
        self.assertEqual(counts[SOURCE_IMO], 8)
        self.assertEqual(counts[SOURCE_EGMO], 1)
        self.assertEqual(counts[SOURCE_BALTICWAY], 5)
        self.assertEqual(counts['APMO'], 0)
        years = collect_years_by_source(d.competition_list)
        self.assertEqual(years, {SOURCE_IMO: {2019, 2020},
                                 SOURCE_EGMO: {2020},
                                 SOURCE_BALTICWAY: {2021, 2022}})
        self.assertEqual(format_years_by_source(years),
                         {SOURCE_IMO: '2019-2020',
                          SOURCE_EGMO: '2020',
                          SOURCE_BALTICWAY: '2021-2022'})

    def test_count_awards(self):
        """Test counting awards over all results."""
        self.assertEqual(count_awards(self.d.participation_list),
                         ({AWARD_GOLD: 2, AWARD_SILVER: 2, AWARD_BRONZE: 3,
                           AWARD_HONOURABLE_MENTION: 1}, 1))

    def test_missing_competition(self):
        """
        Test that results at unknown competitions are counted in
        award totals but not by source.
        """
        p = make_participation(make_competition(1900), 'a1', 'ABC',
                               award=AWARD_GOLD)
        participations = self.d.participation_list + [p]
        counts = count_participations_by_source(participations,
                                                self.d.competition_map)
        self.assertEqual(counts[SOURCE_IMO], 8)
        awards, no_award = count_awards(participations)
        self.assertEqual(awards[AWARD_GOLD], 3)
        self.assertEqual(no_award, 1)

    def test_data_stats(self):
        """Test the complete summary."""
        stats = data_stats(self.d)
        self.assertEqual(stats['countries'], 5)
        self.assertEqual(stats['competitions'], 5)
        self.assertEqual(stats['people'], 6)
        self.assertEqual(stats['participations'], 9)
        self.assertEqual(stats['by_olympiad'][SOURCE_BALTICWAY], 5)
        self.assertEqual(stats['years_by_olympiad'][SOURCE_IMO], '2019-2020')
        self.assertEqual((stats['min_year'], stats['max_year'],
                          stats['year_span']), (2019, 2022, 3))
        self.assertEqual(stats['no_award'], 1)
        self.assertEqual(stats['last_updated'], '2024-07-20')

    def test_data_stats_empty(self):
        """Test the summary of an empty database."""
        stats = data_stats(make_database())
        self.assertEqual(stats['participations'], 0)
        self.assertEqual(stats['years_by_olympiad'], {})
        self.assertEqual(stats['year_span'], 0)
        self.assertEqual(stats['awards'][AWARD_GOLD], 0)
