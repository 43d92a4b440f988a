# File access utilities for olympstats package.

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
This module provides file access support for olympstats use.
"""

import configparser
import csv
import gzip
import io
import json
import os
import os.path

__all__ = ['read_utf8_csv', 'write_utf8_csv_bytes', 'write_utf8_csv',
           'make_dirs_for_file', 'write_bytes_to_file', 'write_text_to_file',
           'read_json_file', 'read_config_raw', 'read_config']


def read_utf8_csv(csv_file_name):
    """
    Read the contents of a UTF-8 CSV file (with BOM) into an array of
    dictionaries.
    """
    with open(csv_file_name, 'r', encoding='utf-8-sig',
              newline='') as csv_file:
        csv_reader = csv.DictReader(csv_file, restval='')
        rows = [row for row in csv_reader]
        return rows


def write_utf8_csv_bytes(rows, keys, delimiter=','):
    """
    Return the byte contents of a UTF-8 CSV file (with BOM) from an
    array of dictionaries.
    """
    csv_bytes_file_b = io.BytesIO()
    csv_bytes_file = io.TextIOWrapper(csv_bytes_file_b,
                                      encoding='utf-8-sig',
                                      newline='')
    csv_file_writer = csv.DictWriter(csv_bytes_file, keys,
                                     extrasaction='raise', dialect='excel',
                                     delimiter=delimiter)
    csv_file_writer.writeheader()
    csv_file_writer.writerows(rows)
    csv_bytes_file.flush()
    csv_bytes = csv_bytes_file_b.getvalue()
    csv_bytes_file_b.close()
    return csv_bytes


def write_utf8_csv(csv_file_name, rows, keys, delimiter=','):
    """Write a UTF-8 CSV file (with BOM) from an array of dictionaries."""
    write_bytes_to_file(write_utf8_csv_bytes(rows, keys, delimiter=delimiter),
                        csv_file_name)


def make_dirs_for_file(file_name):
    """Create directories needed to create a file."""
    dir_name = os.path.dirname(file_name)
    if dir_name and not os.access(dir_name, os.F_OK):
        os.makedirs(dir_name)


def write_bytes_to_file(out_bytes, out_file_name):
    """Write some bytes to a file, but not if it would be unchanged."""
    make_dirs_for_file(out_file_name)
    if os.access(out_file_name, os.F_OK):
        with open(out_file_name, 'rb') as in_file:
            content = in_file.read()
        if content == out_bytes:
            return
    with open(out_file_name, 'wb') as out_file:
        out_file.write(out_bytes)


def write_text_to_file(out_text, out_file_name):
    """Write some UTF-8 text to a file (without BOM)."""
    out_bytes = out_text.encode(encoding='utf-8')
    write_bytes_to_file(out_bytes, out_file_name)


_gzip_magic = b'\x1f\x8b'


def read_json_file(file_name):
    """
    Read the decoded contents of a UTF-8 JSON file, which is
    decompressed first if it is gzip-compressed.
    """
    with open(file_name, 'rb') as in_file:
        content = in_file.read()
    if file_name.endswith('.gz') or content[:2] == _gzip_magic:
        content = gzip.decompress(content)
    return json.loads(content.decode('utf-8'))


def read_config_raw(file_name):
    """
    Read a (UTF-8, no BOM) configuration file and return the
    RawConfigParser object.
    """
    cfg = configparser.RawConfigParser()
    with open(file_name, 'r', encoding='utf-8') as cfg_file:
        cfg.read_file(cfg_file)
    return cfg


def read_config(file_name, section, str_keys, int_keys, int_none_keys,
                bool_keys):
    """
    Read a (UTF-8, no BOM) configuration file and return a dict of the
    configuration values from the given section, with the given keys
    indicating strings, integers, integers where None should be
    returned for an empty string, and booleans.
    """
    cfg = read_config_raw(file_name)
    ret = {}
    for k in str_keys:
        ret[k] = cfg.get(section, k)
    for k in int_keys:
        ret[k] = cfg.getint(section, k)
    for k in int_none_keys:
        v = cfg.get(section, k)
        if v == '':
            ret[k] = None
        else:
            ret[k] = int(v)
    for k in bool_keys:
        ret[k] = cfg.getboolean(section, k)
    return ret
