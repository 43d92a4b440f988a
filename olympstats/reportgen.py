# Report generation for olympstats package.

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
This module provides report generation: CSV files summarising the
statistics derived from a database snapshot.
"""

import logging
import math
import os.path

from olympstats.competitions import country_standings, \
    score_distribution, problem_statistics, team_result_rows, \
    team_score_distribution
from olympstats.contestants import contestant_rows
from olympstats.countrystats import country_rows
from olympstats.data import AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE, \
    AWARD_HONOURABLE_MENTION, source_list
from olympstats.datastats import data_stats
from olympstats.fileutil import read_config, write_utf8_csv
from olympstats.halloffame import hall_of_fame

__all__ = ['read_report_config', 'ReportGenerator']

logger = logging.getLogger(__name__)

_award_names = {AWARD_GOLD: 'Gold Medal',
                AWARD_SILVER: 'Silver Medal',
                AWARD_BRONZE: 'Bronze Medal',
                AWARD_HONOURABLE_MENTION: 'Honourable Mention'}


def read_report_config(top_directory):
    """Read the configuration file for report generation."""
    cfg_file_name = os.path.join(top_directory, 'olympstats.cfg')
    cfg_str_keys = ['data_file', 'output_dir']
    cfg_int_keys = []
    cfg_int_none_keys = ['cache_ttl']
    cfg_bool_keys = ['include_competitions']
    cfg_data = read_config(cfg_file_name, 'olympstats.report',
                           cfg_str_keys, cfg_int_keys, cfg_int_none_keys,
                           cfg_bool_keys)
    return cfg_data


def _str_or_empty(value):
    return '' if value is None else str(value)


def _float_text(value):
    if value is None or math.isnan(value):
        return ''
    return '%.3f' % value


def _group_by_competition(participations):
    """Group participations into lists by competition id."""
    ret = {}
    for p in participations:
        ret.setdefault(p.competition_id, []).append(p)
    return ret


class ReportGenerator:

    """
    A ReportGenerator writes CSV reports for a Database, with
    configuration data describing options for how the reports are
    generated.
    """

    def __init__(self, cfg, database, out_dir):
        """
        Initialise a ReportGenerator from the given configuration
        information and Database.
        """
        self._cfg = cfg
        self._data = database
        self._out_dir = out_dir

    def write_csv_to_file(self, csv_file_path, rows, keys):
        """Write a CSV file in the output directory."""
        csv_file_name = os.path.join(self._out_dir, *csv_file_path)
        logger.debug('writing %s (%d rows)', csv_file_name, len(rows))
        write_utf8_csv(csv_file_name, rows, keys)

    def pn_csv_header(self, num_problems):
        """Return list of Pn headers for CSV file."""
        return [('P%d' % (i + 1)) for i in range(num_problems)]

    def pn_csv_data(self, problem_scores, num_problems):
        """Return a dict of Pn columns for the given problem scores."""
        r = {}
        for i in range(num_problems):
            score = (problem_scores[i] if i < len(problem_scores)
                     else None)
            r['P%d' % (i + 1)] = _str_or_empty(score)
        return r

    def path_for_competition(self, c, name):
        """Return the path to a CSV file for one competition."""
        return ['competitions', c.id, name]

    def generate_data_summary(self):
        """Generate the CSV file summarising the whole database."""
        stats = data_stats(self._data)
        rows = [('Last Updated', stats['last_updated']),
                ('Countries', stats['countries']),
                ('Competitions', stats['competitions']),
                ('People', stats['people']),
                ('Participations', stats['participations']),
                ('First Year', stats['min_year']),
                ('Last Year', stats['max_year']),
                ('Year Span', stats['year_span'])]
        for award in (AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE,
                      AWARD_HONOURABLE_MENTION):
            rows.append((_award_names[award], stats['awards'][award]))
        rows.append(('No Award', stats['no_award']))
        for source in source_list:
            if stats['by_olympiad'][source]:
                rows.append(('Participations (%s)' % source,
                             stats['by_olympiad'][source]))
            if source in stats['years_by_olympiad']:
                rows.append(('Years (%s)' % source,
                             stats['years_by_olympiad'][source]))
        self.write_csv_to_file(['summary.csv'],
                               [{'Statistic': k, 'Value': str(v)}
                                for k, v in rows],
                               ['Statistic', 'Value'])

    def hall_of_fame_csv_columns(self):
        """Return list of headers for CSV file of the hall of fame."""
        return ['Rank', 'Person Id', 'Name', 'Country Code', 'Country Name',
                'Gold', 'Silver', 'Bronze', 'Honourable Mentions',
                'Total Medals', 'Participations']

    def hall_of_fame_csv_data(self, row):
        """Return the CSV data for one hall of fame entry."""
        return {'Rank': str(row['rank']),
                'Person Id': row['person_id'],
                'Name': row['person_name'],
                'Country Code': _str_or_empty(row['country_code']),
                'Country Name': row['country_name'],
                'Gold': str(row['gold']),
                'Silver': str(row['silver']),
                'Bronze': str(row['bronze']),
                'Honourable Mentions': str(row['hm']),
                'Total Medals': str(row['total_medals']),
                'Participations': str(row['participations'])}

    def generate_hall_of_fame(self):
        """
        Generate the hall of fame CSV file for all sources, and one for
        each source with medallists.
        """
        d = self._data
        columns = self.hall_of_fame_csv_columns()
        rows = hall_of_fame(d.participation_list, d.competition_map,
                            d.person_map, d.country_map)
        self.write_csv_to_file(['hall-of-fame.csv'],
                               [self.hall_of_fame_csv_data(row)
                                for row in rows],
                               columns)
        for source in source_list:
            rows = hall_of_fame(d.participation_list, d.competition_map,
                                d.person_map, d.country_map,
                                selected_source=source)
            if rows:
                self.write_csv_to_file(
                    ['hall-of-fame-%s.csv' % source.lower()],
                    [self.hall_of_fame_csv_data(row) for row in rows],
                    columns)

    def generate_countries(self):
        """Generate the CSV file for all countries."""
        rows = country_rows(sorted(self._data.country_list,
                                   key=lambda c: c.name),
                            self._data.participation_list)
        columns = ['Country Id', 'Country Code', 'Country Name',
                   'Participations', 'Gold', 'Silver', 'Bronze',
                   'Honourable Mentions', 'Total Medals']
        self.write_csv_to_file(
            ['countries.csv'],
            [{'Country Id': row['id'],
              'Country Code': row['code'],
              'Country Name': row['name'],
              'Participations': str(row['participations']),
              'Gold': str(row['gold']),
              'Silver': str(row['silver']),
              'Bronze': str(row['bronze']),
              'Honourable Mentions': str(row['hm']),
              'Total Medals': str(row['total_medals'])}
             for row in rows],
            columns)

    def generate_contestants(self):
        """Generate the CSV file for all contestants."""
        rows = contestant_rows(sorted(self._data.person_list,
                                      key=lambda p: p.name),
                               self._data.country_map)
        columns = ['Person Id', 'Name', 'Country Code', 'Country Name']
        self.write_csv_to_file(
            ['contestants.csv'],
            [{'Person Id': row['id'],
              'Name': row['name'],
              'Country Code': _str_or_empty(row['country_code']),
              'Country Name': row['country_name']}
             for row in rows],
            columns)

    def generate_one_competition_standings(self, c, participations):
        """Generate the CSV file of country standings at a competition."""
        rows = country_standings(participations, self._data.country_map,
                                 c.num_problems)
        columns = ['Rank', 'Country Code', 'Country Name']
        columns.extend(self.pn_csv_header(c.num_problems))
        columns.extend(['Total', 'Contestants', 'Gold', 'Silver', 'Bronze',
                        'Honourable Mentions'])
        data = []
        for row in rows:
            csv_out = {'Rank': str(row['rank']),
                       'Country Code': _str_or_empty(row['country_code']),
                       'Country Name': row['country_name']}
            csv_out.update(self.pn_csv_data(row['problem_totals'],
                                            c.num_problems))
            csv_out.update({'Total': str(row['total_score']),
                            'Contestants': str(row['participants']),
                            'Gold': str(row['gold']),
                            'Silver': str(row['silver']),
                            'Bronze': str(row['bronze']),
                            'Honourable Mentions': str(row['hm'])})
            data.append(csv_out)
        self.write_csv_to_file(self.path_for_competition(c, 'standings.csv'),
                               data, columns)

    def generate_one_competition_distribution(self, c, participations):
        """Generate the CSV file of the score distribution at a competition."""
        rows = score_distribution(participations, c)
        columns = ['Score', 'Gold', 'Silver', 'Bronze',
                   'Honourable Mentions', 'No Award', 'Total']
        self.write_csv_to_file(
            self.path_for_competition(c, 'distribution.csv'),
            [{'Score': str(row['score']),
              'Gold': str(row['gold']),
              'Silver': str(row['silver']),
              'Bronze': str(row['bronze']),
              'Honourable Mentions': str(row['hm']),
              'No Award': str(row['none']),
              'Total': str(row['total'])}
             for row in rows],
            columns)

    def generate_one_competition_problems(self, c, participations):
        """Generate the CSV file of problem statistics at a competition."""
        stats = problem_statistics(participations, c)
        if stats is None:
            return
        num_problems = stats['num_problems']
        pn = self.pn_csv_header(num_problems)
        columns = ['Problem', 'Mean', 'Maximum', 'Standard Deviation',
                   'Correlation With Total']
        columns.extend(['Correlation With %s' % p for p in pn])
        data = []
        for i in range(num_problems):
            csv_out = {'Problem': pn[i],
                       'Mean': _float_text(stats['means'][i]),
                       'Maximum': str(stats['max_scores'][i]),
                       'Standard Deviation': _float_text(
                           stats['std_devs'][i]),
                       'Correlation With Total': _float_text(
                           stats['correlations_with_total'][i])}
            for j in range(num_problems):
                csv_out['Correlation With %s' % pn[j]] = _float_text(
                    stats['problem_correlations'][i][j])
            data.append(csv_out)
        self.write_csv_to_file(self.path_for_competition(c, 'problems.csv'),
                               data, columns)

    def generate_one_competition_teams(self, c, team_participations=None):
        """
        Generate the CSV file of team results at a team competition,
        from the given team participations if any, otherwise from
        those in the Database.
        """
        if team_participations is None:
            team_participations = \
                self._data.team_participations_for_competition(c.id)
        rows = team_result_rows(team_participations, self._data.country_map)
        columns = ['Rank', 'Country Code', 'Country Name']
        columns.extend(self.pn_csv_header(c.num_problems))
        columns.append('Total')
        data = []
        for row in rows:
            csv_out = {'Rank': _str_or_empty(row['rank']),
                       'Country Code': _str_or_empty(row['country_code']),
                       'Country Name': row['country_name']}
            csv_out.update(self.pn_csv_data(row['problem_scores'],
                                            c.num_problems))
            csv_out['Total'] = str(row['total'])
            data.append(csv_out)
        self.write_csv_to_file(self.path_for_competition(c, 'teams.csv'),
                               data, columns)
        self.write_csv_to_file(
            self.path_for_competition(c, 'distribution.csv'),
            [{'Score': str(row['score']), 'Teams': str(row['count'])}
             for row in team_score_distribution(team_participations)],
            ['Score', 'Teams'])

    def generate_one_competition(self, c, participations=None,
                                 team_participations=None):
        """
        Generate the CSV files for one competition, from the given
        participations if any, otherwise from those in the Database.
        """
        logger.debug('generating reports for %s', c.name)
        if c.is_team:
            self.generate_one_competition_teams(c, team_participations)
            return
        if participations is None:
            participations = self._data.participations_for_competition(c.id)
        self.generate_one_competition_standings(c, participations)
        self.generate_one_competition_distribution(c, participations)
        self.generate_one_competition_problems(c, participations)

    def generate_all(self):
        """Generate all the reports."""
        logger.info('generating reports in %s', self._out_dir)
        self.generate_data_summary()
        self.generate_hall_of_fame()
        self.generate_countries()
        self.generate_contestants()
        if self._cfg.get('include_competitions', True):
            by_comp = _group_by_competition(self._data.participation_list)
            team_by_comp = _group_by_competition(
                self._data.team_participation_list)
            competitions = sorted(self._data.competition_list,
                                  key=lambda c: (c.year, c.source))
            for c in competitions:
                self.generate_one_competition(c, by_comp.get(c.id, []),
                                              team_by_comp.get(c.id, []))
            logger.info('generated reports for %d competitions',
                        len(competitions))
