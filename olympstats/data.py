# Data classes for olympstats package.

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
This module provides classes that describe olympiad competitions and
the people and countries taking part in them, as loaded from a
database snapshot.  All objects are conceptually read-only after
initialisation; the statistics functions elsewhere in the package
never modify them.
"""

__all__ = ['SOURCE_IMO', 'SOURCE_EGMO', 'SOURCE_MEMO', 'SOURCE_RMM',
           'SOURCE_APMO', 'SOURCE_BMO', 'SOURCE_PAMO', 'SOURCE_BALTICWAY',
           'source_list', 'team_source_list', 'AWARD_GOLD', 'AWARD_SILVER',
           'AWARD_BRONZE', 'AWARD_HONOURABLE_MENTION', 'award_list',
           'medal_list', 'is_team_competition', 'country_id_for_code',
           'competition_id_for', 'Country', 'Competition', 'Person',
           'Participation', 'TeamParticipation', 'Database']

SOURCE_IMO = 'IMO'
SOURCE_EGMO = 'EGMO'
SOURCE_MEMO = 'MEMO'
SOURCE_RMM = 'RMM'
SOURCE_APMO = 'APMO'
SOURCE_BMO = 'BMO'
SOURCE_PAMO = 'PAMO'
SOURCE_BALTICWAY = 'BALTICWAY'

source_list = [SOURCE_IMO, SOURCE_EGMO, SOURCE_MEMO, SOURCE_RMM,
               SOURCE_APMO, SOURCE_BMO, SOURCE_PAMO, SOURCE_BALTICWAY]
"""All competition sources, in the canonical display order."""

team_source_list = [SOURCE_BALTICWAY]
"""Sources whose competitions are contested by teams only."""

AWARD_GOLD = 'gold'
AWARD_SILVER = 'silver'
AWARD_BRONZE = 'bronze'
AWARD_HONOURABLE_MENTION = 'honourable_mention'

award_list = [AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE,
              AWARD_HONOURABLE_MENTION]
"""All individual award types, best first."""

medal_list = [AWARD_GOLD, AWARD_SILVER, AWARD_BRONZE]
"""Award types that count as medals."""


def is_team_competition(source):
    """Return whether competitions from the given source are team-only."""
    return source in team_source_list


def country_id_for_code(code):
    """Return the id of the country with the given code."""
    return 'country-%s' % code.lower()


def competition_id_for(source, year):
    """Return the id of the competition from a source in a year."""
    return '%s-%d' % (source, year)


def _check_source(source):
    if source not in source_list:
        raise ValueError('unknown competition source %s' % source)
    return source


def _check_award(award):
    if award is not None and award not in award_list:
        raise ValueError('unknown award %s' % award)
    return award


class Country:

    """A Country represents a country or team taking part in competitions."""

    def __init__(self, country_id, code, name):
        self.id = country_id
        """The id of this country, of the form 'country-<code>'."""
        self.code = code
        """The code used for this country by the upstream results data."""
        self.name = name
        """The name of this country."""

    @classmethod
    def from_dict(cls, d):
        """Create a Country from a dict from the database snapshot."""
        return cls(d['id'], d['code'], d['name'])


class Competition:

    """
    A Competition represents one instance of a competition source in
    a particular year.
    """

    def __init__(self, competition_id, source, year, num_problems=0,
                 max_score_per_problem=0, edition=None,
                 host_country_id=None):
        self.id = competition_id
        """The id of this competition, of the form '<source>-<year>'."""
        self.source = _check_source(source)
        """The competition source (one of source_list)."""
        self.year = year
        """The year of this competition."""
        self.num_problems = num_problems
        """The number of problems at this competition."""
        self.max_score_per_problem = max_score_per_problem
        """The maximum score available on each problem."""
        self.edition = edition
        """The edition number of this competition, or None."""
        self.host_country_id = host_country_id
        """The id of the host country, or None."""

    def _get_is_team(self):
        return is_team_competition(self.source)

    is_team = property(_get_is_team, None, None,
                       """Whether this is a team-only competition.""")

    def _get_name(self):
        return '%s %d' % (self.source, self.year)

    name = property(_get_name, None, None,
                    """The display name of this competition.""")

    def _get_max_score(self):
        return self.num_problems * self.max_score_per_problem

    max_score = property(_get_max_score, None, None,
                         """The maximum possible total score.""")

    @classmethod
    def from_dict(cls, d):
        """Create a Competition from a dict from the database snapshot."""
        return cls(d['id'], d['source'], int(d['year']),
                   num_problems=int(d.get('num_problems') or 0),
                   max_score_per_problem=int(d.get('max_score_per_problem')
                                             or 0),
                   edition=d.get('edition'),
                   host_country_id=d.get('host_country_id'))


class Person:

    """A Person represents an individual who took part in competitions."""

    def __init__(self, person_id, name, country_id, given_name=None,
                 family_name=None, aliases=None, source_ids=None):
        self.id = person_id
        """The id of this person."""
        self.name = name
        """The display name of this person."""
        self.country_id = country_id
        """The id of the country this person is registered with."""
        self.given_name = given_name
        """The given name of this person, or None."""
        self.family_name = family_name
        """The family name of this person, or None."""
        self.aliases = list(aliases or [])
        """Other names under which this person has appeared."""
        self.source_ids = dict(source_ids or {})
        """A mapping from source to this person's id in that source."""

    @classmethod
    def from_dict(cls, d):
        """Create a Person from a dict from the database snapshot."""
        return cls(d['id'], d['name'], d['country_id'],
                   given_name=d.get('given_name'),
                   family_name=d.get('family_name'),
                   aliases=d.get('aliases'),
                   source_ids=d.get('source_ids'))


class Participation:

    """
    A Participation represents the result of one person at one
    individual competition.  A problem score of None means the score
    is unknown or the problem was not attempted, which is distinct
    from a score of 0.
    """

    def __init__(self, participation_id, competition_id, person_id,
                 country_id, problem_scores=None, total=None, rank=None,
                 regional_rank=None, award=None, extra_awards=None,
                 source_contestant_id=None):
        self.id = participation_id
        """The id of this participation."""
        self.competition_id = competition_id
        """The id of the competition."""
        self.person_id = person_id
        """The id of the person."""
        self.country_id = country_id
        """The id of the country the person represented."""
        self.problem_scores = list(problem_scores or [])
        """A list of scores on each problem, with None if not known."""
        if total is None:
            total = sum([s for s in self.problem_scores if s is not None])
        self.total = total
        """The total score."""
        self.rank = rank
        """The rank (1-based) at the competition, or None."""
        self.regional_rank = regional_rank
        """The rank within a region, or None."""
        self.award = _check_award(award)
        """The award (one of award_list), or None."""
        self.extra_awards = extra_awards
        """Free text describing any extra awards, or None."""
        self.source_contestant_id = source_contestant_id
        """The contestant id used in the upstream results data, or None."""

    @classmethod
    def from_dict(cls, d):
        """Create a Participation from a dict from the database snapshot."""
        return cls(d['id'], d['competition_id'], d['person_id'],
                   d.get('country_id') or '',
                   problem_scores=d.get('problem_scores'),
                   total=d.get('total'),
                   rank=d.get('rank'),
                   regional_rank=d.get('regional_rank'),
                   award=d.get('award'),
                   extra_awards=d.get('extra_awards'),
                   source_contestant_id=d.get('source_contestant_id'))


class TeamParticipation:

    """
    A TeamParticipation represents the result of one country's team
    at a team competition.  Teams are ranked by score only and
    receive no awards.
    """

    def __init__(self, participation_id, competition_id, country_id,
                 problem_scores=None, total=None, rank=None):
        self.id = participation_id
        """The id of this team participation."""
        self.competition_id = competition_id
        """The id of the competition."""
        self.country_id = country_id
        """The id of the country."""
        self.problem_scores = list(problem_scores or [])
        """A list of scores on each problem, with None if not known."""
        if total is None:
            total = sum([s for s in self.problem_scores if s is not None])
        self.total = total
        """The total score."""
        self.rank = rank
        """The rank (1-based) at the competition, or None."""

    @classmethod
    def from_dict(cls, d):
        """Create a TeamParticipation from a dict from the snapshot."""
        return cls(d['id'], d['competition_id'], d['country_id'],
                   problem_scores=d.get('problem_scores'),
                   total=d.get('total'),
                   rank=d.get('rank'))


def _make_map(objects):
    r = {}
    for o in objects:
        if o.id in r:
            raise ValueError('duplicate id %s' % o.id)
        r[o.id] = o
    return r


class Database:

    """
    A Database holds a complete snapshot of all countries,
    competitions, people and results, keyed by id.
    """

    def __init__(self, version='', last_updated='', countries=(),
                 competitions=(), people=(), participations=(),
                 team_participations=()):
        self.version = version
        """The version string of this snapshot."""
        self.last_updated = last_updated
        """When this snapshot was produced, as given in the snapshot."""
        self.country_map = _make_map(countries)
        """A mapping from the id of a country to the Country object."""
        self.competition_map = _make_map(competitions)
        """A mapping from the id of a competition to the Competition."""
        self.person_map = _make_map(people)
        """A mapping from the id of a person to the Person object."""
        self.participation_map = _make_map(participations)
        """A mapping from the id of a participation to the Participation."""
        self.team_participation_map = _make_map(team_participations)
        """A mapping from the id of a team participation to the object."""

    country_list = property(lambda self: list(self.country_map.values()),
                            None, None, """A list of all countries.""")

    competition_list = property(
        lambda self: list(self.competition_map.values()), None, None,
        """A list of all competitions.""")

    person_list = property(lambda self: list(self.person_map.values()),
                           None, None, """A list of all people.""")

    participation_list = property(
        lambda self: list(self.participation_map.values()), None, None,
        """A list of all individual participations.""")

    team_participation_list = property(
        lambda self: list(self.team_participation_map.values()), None, None,
        """A list of all team participations.""")

    def participations_for_person(self, person_id):
        """Return the participations of the given person."""
        return [p for p in self.participation_map.values()
                if p.person_id == person_id]

    def participations_for_competition(self, competition_id):
        """Return the participations at the given competition."""
        return [p for p in self.participation_map.values()
                if p.competition_id == competition_id]

    def participations_for_country(self, country_id):
        """Return the individual participations for the given country."""
        return [p for p in self.participation_map.values()
                if p.country_id == country_id]

    def team_participations_for_competition(self, competition_id):
        """Return the team participations at the given competition."""
        return [tp for tp in self.team_participation_map.values()
                if tp.competition_id == competition_id]

    def team_participations_for_country(self, country_id):
        """Return the team participations for the given country."""
        return [tp for tp in self.team_participation_map.values()
                if tp.country_id == country_id]

    @classmethod
    def from_dict(cls, d):
        """
        Create a Database from the decoded JSON of a snapshot, where
        each collection is an object keyed by id.
        """
        team_data = d.get('team_participations') or {}
        return cls(
            version=d.get('version', ''),
            last_updated=d.get('last_updated', ''),
            countries=[Country.from_dict(c)
                       for c in d.get('countries', {}).values()],
            competitions=[Competition.from_dict(c)
                          for c in d.get('competitions', {}).values()],
            people=[Person.from_dict(p)
                    for p in d.get('people', {}).values()],
            participations=[Participation.from_dict(p)
                            for p in d.get('participations', {}).values()],
            team_participations=[TeamParticipation.from_dict(tp)
                                 for tp in team_data.values()])
