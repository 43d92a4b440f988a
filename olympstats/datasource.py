# DataSource base class for olympstats package.

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
This module provides the DataSource base class that provides the
database snapshot from which all statistics are derived.
"""

__all__ = ['DataSource']


class DataSource:

    """
    A DataSource represents the underlying source (such as a file) of
    a database snapshot of countries, competitions, people and
    results.  DataSource is a base class for classes corresponding to
    the different supported sources of data.
    """

    def get_database(self):
        """Load and return a new Database from this source."""
        raise NotImplementedError

    def describe(self):
        """Return a short description of this source for log messages."""
        return self.__class__.__name__
