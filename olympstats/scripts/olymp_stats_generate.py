# olymp-stats-generate script.

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
The olymp-stats-generate script reads a database snapshot of olympiad
results and generates CSV reports of statistics derived from it.  It
expects to be run with a working directory that contains a file
olympstats.cfg, which names the snapshot (JSON, optionally
gzip-compressed) and the directory, relative to the working
directory, in which the reports are generated.
"""

import argparse
import logging
import os

import olympstats
from olympstats.cache import DatabaseCache
from olympstats.jsonsource import JSONDataSource
from olympstats.reportgen import read_report_config, ReportGenerator

__all__ = ['main']


def main():
    """Main program for olymp-stats-generate."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + olympstats.__version__)
    parser.add_argument('--verbose', action='store_true',
                        help='enable debug logging')
    parser.add_argument('--data-file',
                        help='snapshot file to use instead of the one '
                        'named in olympstats.cfg')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose
                        else logging.INFO,
                        format='%(levelname)s:%(message)s')

    top_directory = os.getcwd()

    cfg_data = read_report_config(top_directory)
    data_file = os.path.join(top_directory,
                             args.data_file or cfg_data['data_file'])
    out_dir = os.path.join(top_directory, cfg_data['output_dir'])

    cache = DatabaseCache(JSONDataSource(data_file),
                          ttl=cfg_data['cache_ttl'])
    reportgen = ReportGenerator(cfg_data, cache.get(), out_dir)
    reportgen.generate_all()


if __name__ == '__main__':
    main()
