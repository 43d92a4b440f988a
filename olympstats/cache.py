# Database cache for olympstats package.

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
This module provides cache support for a database snapshot, so that
it is loaded from its DataSource only when first needed, and again
when it has expired or been invalidated.
"""

import logging
import threading
import time

__all__ = ['DatabaseCache']

logger = logging.getLogger(__name__)


class DatabaseCache:

    """
    A DatabaseCache holds the Database most recently loaded from a
    DataSource.  Loads are serialised, so concurrent callers share a
    single load.  A load that fails is not cached.
    """

    def __init__(self, datasource, ttl=None, clock=time.monotonic):
        """
        Initialise a DatabaseCache for the given DataSource.  If ttl
        is None, a loaded Database never expires; otherwise it expires
        ttl seconds (as measured by clock) after it was loaded.
        """
        self._datasource = datasource
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._database = None
        self._loaded_at = None
        self.load_count = 0
        """The number of successful loads from the DataSource."""

    def _is_current(self):
        if self._database is None:
            return False
        if self._ttl is None:
            return True
        return self._clock() - self._loaded_at < self._ttl

    def get(self):
        """Return the cached Database, loading it if necessary."""
        with self._lock:
            if self._is_current():
                return self._database
            logger.info('loading database from %s',
                        self._datasource.describe())
            database = self._datasource.get_database()
            self._database = database
            self._loaded_at = self._clock()
            self.load_count += 1
            return database

    def invalidate(self):
        """Mark the cached Database invalid so it is reloaded."""
        with self._lock:
            logger.debug('invalidating cached database')
            self._database = None
            self._loaded_at = None
