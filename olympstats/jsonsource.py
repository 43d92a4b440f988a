# JSON snapshot data source for olympstats package.

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
This module provides the JSONDataSource class that uses a JSON file,
optionally gzip-compressed, to provide a database snapshot.
"""

import logging

from olympstats.data import Database
from olympstats.datasource import DataSource
from olympstats.fileutil import read_json_file

__all__ = ['JSONDataSource']

logger = logging.getLogger(__name__)


class JSONDataSource(DataSource):

    """Subclass of DataSource providing a snapshot from a JSON file."""

    def __init__(self, file_name):
        """Initialise a JSONDataSource for the given file."""
        self._file_name = file_name

    def describe(self):
        return self._file_name

    def get_database(self):
        logger.debug('reading snapshot from %s', self._file_name)
        d = read_json_file(self._file_name)
        if not isinstance(d, dict):
            raise ValueError('%s: snapshot is not a JSON object'
                             % self._file_name)
        database = Database.from_dict(d)
        logger.info('loaded snapshot %s (last updated %s): %d countries, '
                    '%d competitions, %d people, %d participations, '
                    '%d team participations',
                    database.version or '-', database.last_updated or '-',
                    len(database.country_map),
                    len(database.competition_map),
                    len(database.person_map),
                    len(database.participation_map),
                    len(database.team_participation_map))
        return database
