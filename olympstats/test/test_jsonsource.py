# Tests for olympstats.jsonsource module.

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
Tests for olympstats.jsonsource module.
"""

import gzip
import json
import os.path

from olympstats.fileutil import write_bytes_to_file, write_text_to_file
from olympstats.jsonsource import JSONDataSource
from olympstats.test.testutil import TempDirTestCase, sample_snapshot

__all__ = ['JSONDataSourceTestCase']


class JSONDataSourceTestCase(TempDirTestCase):

    """Test loading snapshots from JSON files."""

    def snapshot_bytes(self):
        return json.dumps(sample_snapshot()).encode('utf-8')

    def check_database(self, d):
        self.assertEqual(d.version, '7')
        self.assertEqual(len(d.country_map), 1)
        self.assertEqual(d.participation_map['p1'].total, 42)
        self.assertEqual(d.team_participation_list, [])

    def test_plain(self):
        """Test loading an uncompressed snapshot."""
        file_name = os.path.join(self.temp_dir, 'snapshot.json')
        write_bytes_to_file(self.snapshot_bytes(), file_name)
        with self.assertLogs('olympstats.jsonsource', 'INFO') as cm:
            d = JSONDataSource(file_name).get_database()
        self.check_database(d)
        self.assertIn('1 participations', cm.output[-1])

    def test_gzip_suffix(self):
        """Test loading a compressed snapshot named .gz."""
        file_name = os.path.join(self.temp_dir, 'snapshot.json.gz')
        write_bytes_to_file(gzip.compress(self.snapshot_bytes()), file_name)
        self.check_database(JSONDataSource(file_name).get_database())

    def test_gzip_magic(self):
        """Test loading a compressed snapshot without a .gz name."""
        file_name = os.path.join(self.temp_dir, 'snapshot.json')
        write_bytes_to_file(gzip.compress(self.snapshot_bytes()), file_name)
        self.check_database(JSONDataSource(file_name).get_database())

    def test_errors(self):
        """Test errors from missing or malformed files."""
        file_name = os.path.join(self.temp_dir, 'snapshot.json')
        self.assertRaises(OSError, JSONDataSource(file_name).get_database)
        write_text_to_file('{"countries": ', file_name)
        self.assertRaises(ValueError, JSONDataSource(file_name).get_database)
        write_text_to_file('[]', file_name)
        self.assertRaises(ValueError, JSONDataSource(file_name).get_database)
