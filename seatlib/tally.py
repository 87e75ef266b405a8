'''Tally types: aggregates of cast ballots that attributions consume.

A tally is the output of the voting stage, independent of the identity of
individual voters. Three shapes are supported:

-   :class:`Simple` tallies map each candidate to the number of ballots
    cast for them. This is what plurality and the proportional methods use.
-   :class:`Order` tallies list ranked ballots; each ballot orders some of the
    candidates from most to least preferred. Candidates left out of a ballot
    are unranked on it, not ranked last.
-   :class:`Scores` tallies map each candidate to a histogram of grades: the
    number at index *g* is the number of ballots that gave the candidate
    grade *g*. All histograms of a tally have the same length, ``ngrades``.

Attributions accept any mapping or sequence of the right shape (so plain
dicts and lists of lists work too); the classes here add validation and
a few convenience constructors.

Candidates can be any hashable objects; they are only compared for equality.
'''

import collections
import collections.abc
from typing import (
    Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence
)
from numbers import Number


Candidate = Hashable


class TallyError(ValueError):
    '''A tally is malformed.'''
    pass


class Simple(collections.Counter):
    '''A tally of the number of ballots cast for each candidate.

    Behaves as a :class:`collections.Counter`; candidates that received no
    ballots count as zero. The total may be zero; negative counts are
    rejected.
    '''
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for cand, n_votes in self.items():
            if n_votes < 0:
                raise TallyError(f'negative ballot count for {cand!r}: {n_votes}')

    @property
    def n_ballots(self) -> Number:
        '''The total number of ballots in the tally.'''
        return sum(self.values())


class Order(tuple):
    '''A tally of ranked ballots.

    Each ballot is an ordered sequence of candidates from the most to the least
    preferred. A candidate may appear at most once in one ballot and ballots
    cannot express ties.

    :param ballots: An iterable of ballots, each an iterable of candidates.
    '''
    def __new__(cls, ballots: Iterable[Iterable[Candidate]] = ()):
        ballots = tuple(tuple(ballot) for ballot in ballots)
        for ballot in ballots:
            if len(set(ballot)) != len(ballot):
                raise TallyError(f'duplicate candidate in ballot {ballot!r}')
        return super().__new__(cls, ballots)

    def candidates(self) -> List[Candidate]:
        '''Return all candidates ranked on any ballot.

        Candidates are listed in the order of their first appearance.
        '''
        return all_ranked_candidates(self)


class Scores(dict):
    '''A tally of grade histograms for each candidate.

    A candidate missing from the tally has an all-zero histogram.

    :param ngrades: Number of grades available on a ballot; every histogram
        must be that long.
    :param grades: A mapping of candidates to their grade histograms.
    '''
    def __init__(self,
                 ngrades: int,
                 grades: Optional[Mapping[Candidate, Sequence[int]]] = None,
                 ):
        super().__init__()
        if ngrades < 1:
            raise TallyError(f'invalid number of grades: {ngrades}')
        self.ngrades = ngrades
        for cand, histogram in (grades or {}).items():
            self[cand] = histogram

    def __setitem__(self, cand: Candidate, histogram: Sequence[int]) -> None:
        histogram = tuple(histogram)
        if len(histogram) != self.ngrades:
            raise TallyError(
                f'grade histogram for {cand!r} has {len(histogram)} grades,'
                f' expected {self.ngrades}'
            )
        if any(count < 0 for count in histogram):
            raise TallyError(f'negative grade count for {cand!r}')
        super().__setitem__(cand, histogram)

    def __missing__(self, cand: Candidate) -> tuple:
        return (0, ) * self.ngrades

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.ngrades!r}, {dict(self)!r})'

    @classmethod
    def from_grades(cls,
                    ngrades: int,
                    grades: Mapping[Candidate, Iterable[int]],
                    ) -> 'Scores':
        '''Build the tally from the individual grades given to candidates.

        :param ngrades: Number of grades available on a ballot.
        :param grades: A mapping of candidates to all the grades they were
            given, one per ballot. Grades are integers from 0 to
            ``ngrades - 1``.
        '''
        tally = cls(ngrades)
        for cand, cand_grades in grades.items():
            histogram = [0] * ngrades
            for grade in cand_grades:
                if not 0 <= grade < ngrades:
                    raise TallyError(f'grade out of range for {cand!r}: {grade}')
                histogram[grade] += 1
            tally[cand] = histogram
        return tally


def all_ranked_candidates(ballots: Iterable[Sequence[Candidate]]
                          ) -> List[Candidate]:
    '''Return a list of all candidates appearing in any of the ballots.

    Preserves the order of first appearance, ballot by ballot.

    :param ballots: Ranked ballots.
    '''
    output = {}
    for ballot in ballots:
        for cand in ballot:
            output.setdefault(cand, None)
    return list(output)


def detect_tally_type(votes: Any) -> type:
    '''Detect the type of the given tally.

    Plain dictionaries and sequences are recognized by their shape: a mapping
    to numbers is a simple tally, a mapping to sequences is a scores tally and
    a sequence of ballots is an order tally.

    :param votes: The tally to examine.
    :returns: One of :class:`Simple`, :class:`Order` or :class:`Scores`.
    :raises TallyError: If the tally shape is not recognized.
    '''
    for tally_type in (Scores, Order, Simple):
        if isinstance(votes, tally_type):
            return tally_type
    if isinstance(votes, collections.abc.Mapping):
        values = list(votes.values())
        if not values or all(isinstance(val, Number) for val in values):
            return Simple
        elif all(isinstance(val, collections.abc.Sequence)
                 and not isinstance(val, str) for val in values):
            return Scores
    elif isinstance(votes, collections.abc.Sequence):
        if all(isinstance(ballot, collections.abc.Sequence)
               and not isinstance(ballot, str) for ballot in votes):
            return Order
    raise TallyError(f'unrecognized tally type: {votes!r}')


def scores_ngrades(votes: Mapping[Candidate, Sequence[int]]) -> int:
    '''Return the number of grades of a scores tally, also for plain dicts.'''
    if hasattr(votes, 'ngrades'):
        return votes.ngrades
    lengths = set(len(histogram) for histogram in votes.values())
    if len(lengths) > 1:
        raise TallyError(f'grade histograms of unequal lengths: {lengths}')
    return lengths.pop() if lengths else 1


def tally_to_dict(votes: Any) -> Dict[str, Any]:
    '''Express the tally as a dictionary of its type and JSON-friendly data.'''
    tally_type = detect_tally_type(votes)
    if tally_type is Simple:
        return {'type': 'simple', 'votes': dict(votes)}
    elif tally_type is Order:
        return {'type': 'order', 'votes': [list(ballot) for ballot in votes]}
    else:
        return {
            'type': 'scores',
            'ngrades': scores_ngrades(votes),
            'votes': {cand: list(hist) for cand, hist in votes.items()},
        }
