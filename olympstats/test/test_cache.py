# Tests for olympstats.cache module.

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
Tests for olympstats.cache module.
"""

import threading
import unittest

from olympstats.cache import DatabaseCache
from olympstats.datasource import DataSource
from olympstats.test.testutil import make_database

__all__ = ['DatabaseCacheTestCase']


class _CountingDataSource(DataSource):

    def __init__(self, fail=False):
        self.loads = 0
        self.fail = fail

    def get_database(self):
        self.loads += 1
        if self.fail:
            raise OSError('snapshot unavailable')
        return make_database(last_updated='load %d' % self.loads)


class _FakeClock:

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class DatabaseCacheTestCase(unittest.TestCase):

    """Test caching of loaded databases."""

    def setUp(self):
        self.source = _CountingDataSource()
        self.clock = _FakeClock()

    def test_no_expiry(self):
        """Test that without a ttl the database is loaded once."""
        cache = DatabaseCache(self.source, clock=self.clock)
        d = cache.get()
        self.clock.now += 1e9
        self.assertIs(cache.get(), d)
        self.assertEqual(self.source.loads, 1)
        self.assertEqual(cache.load_count, 1)

    def test_ttl(self):
        """Test that the database is reloaded once per ttl window."""
        cache = DatabaseCache(self.source, ttl=60, clock=self.clock)
        d1 = cache.get()
        self.clock.now += 59
        self.assertIs(cache.get(), d1)
        self.assertEqual(self.source.loads, 1)
        self.clock.now += 1
        d2 = cache.get()
        self.assertIsNot(d2, d1)
        self.assertEqual(d2.last_updated, 'load 2')
        self.assertIs(cache.get(), d2)
        self.assertEqual(self.source.loads, 2)

    def test_invalidate(self):
        """Test that invalidating forces a reload."""
        cache = DatabaseCache(self.source, ttl=60, clock=self.clock)
        cache.get()
        cache.invalidate()
        self.assertEqual(self.source.loads, 1)
        self.assertEqual(cache.get().last_updated, 'load 2')
        self.assertEqual(self.source.loads, 2)

    def test_failure_not_cached(self):
        """Test that a failed load propagates and is retried."""
        self.source.fail = True
        cache = DatabaseCache(self.source, clock=self.clock)
        self.assertRaises(OSError, cache.get)
        self.assertRaises(OSError, cache.get)
        self.assertEqual(self.source.loads, 2)
        self.source.fail = False
        self.assertEqual(cache.get().last_updated, 'load 3')
        self.assertEqual(cache.load_count, 1)

    def test_concurrent(self):
        """Test that concurrent callers share a single load."""
        cache = DatabaseCache(self.source)
        results = []

        def get():
            results.append(cache.get())

        threads = [threading.Thread(target=get) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(self.source.loads, 1)
        self.assertEqual(len(results), 8)
        for d in results:
            self.assertIs(d, results[0])
