'''General attribution machinery and the majority attributions.

An *attribution* is a function taking a tally (and possibly extra keyword
arguments) and returning a seat mapping: a dictionary of candidates to their
positive seat counts. Attributions are built by factory functions from their
configuration. Attributions that always fill the same number of seats carry it
as their ``n_seats`` attribute.

The extra keyword arguments are a side channel for combinators; every
attribution must accept them and pass them on unchanged to any attribution it
delegates to.

Expected limitations of a method (no majority, no candidate over the threshold,
no Condorcet winner) are signalled by :class:`AttributionFailure` and can be
recovered from by a contingency attribution. Any other error means invalid
input or a defect and is never converted into an :class:`AttributionFailure`.
'''

import logging
from typing import Any, Callable, Dict, Optional
from numbers import Number

import seatlib.util
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)

Attribution = Callable[..., Dict[Candidate, int]]


class AttributionFailure(Exception):
    '''An attribution could not produce a result for the given tally.

    This is an expected outcome of some methods, such as a majority method when
    nobody gets the majority, and can be handled by a contingency attribution.
    '''
    pass


class VotingSystemError(Exception):
    '''An attribution with a valid setup ended up in an unresolvable state.'''
    pass


def check_n_seats(n_seats: int, name: str = 'n_seats') -> None:
    '''Raise a ValueError if the seat count is not a non-negative integer.'''
    if not isinstance(n_seats, int) or n_seats < 0:
        raise ValueError(f'invalid {name}: {n_seats!r}')


def check_fraction(value: Number, name: str = 'threshold') -> None:
    '''Raise a ValueError if the value is not a fraction between 0 and 1.'''
    if not 0 <= value <= 1:
        raise ValueError(f'invalid {name}: {value!r}, must be between 0 and 1')


def with_n_seats(attrib: Attribution, n_seats: int) -> Attribution:
    '''Mark the attribution as filling a fixed number of seats.'''
    attrib.n_seats = n_seats
    return attrib


def has_n_seats(attrib: Attribution) -> bool:
    '''Return True if the attribution always fills a fixed number of seats.'''
    return hasattr(attrib, 'n_seats')


def all_seats_to(winner: Candidate, n_seats: int) -> Dict[Candidate, int]:
    '''Award all seats to a single winner.'''
    return {winner: n_seats} if n_seats > 0 else {}


def plurality(n_seats: int) -> Attribution:
    '''Award all seats to the candidate with the most votes.

    If more candidates share the highest number of votes, the first of them
    in the tally order wins.

    :param n_seats: Number of seats to award.
    :returns: An attribution over simple tallies. It raises
        :class:`AttributionFailure` if nobody received any vote and
        ``ValueError`` for a tally with no candidates.
    '''
    check_n_seats(n_seats)

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        winner = seatlib.util.first_max(votes)
        if votes[winner] <= 0:
            raise AttributionFailure('no candidate received any votes')
        logger.debug('plurality winner %r with %s votes', winner, votes[winner])
        return all_seats_to(winner, n_seats)

    return with_n_seats(attrib, n_seats)


def super_majority(n_seats: int,
                   threshold: Number = .5,
                   contingency: Optional[Attribution] = None,
                   ) -> Attribution:
    '''Award all seats to the candidate with more than a given share of votes.

    The candidate with the most votes wins if their votes are strictly greater
    than the threshold fraction of all votes; reaching the threshold exactly is
    not enough. With the default threshold of one half, this is an absolute
    majority rule.

    :param n_seats: Number of seats to award.
    :param threshold: Fraction of all votes that the winner must exceed.
    :param contingency: Attribution to delegate the whole tally to if nobody
        exceeds the threshold. If None, :class:`AttributionFailure` is raised
        instead.
    '''
    check_n_seats(n_seats)
    check_fraction(threshold)

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        winner = seatlib.util.first_max(votes)
        total = sum(votes.values())
        if votes[winner] > 0 and votes[winner] > threshold * total:
            return all_seats_to(winner, n_seats)
        if contingency is None:
            raise AttributionFailure(
                f'no candidate received more than {threshold} of the votes'
            )
        logger.info(
            'no candidate exceeded %s of the votes, using contingency', threshold
        )
        return contingency(votes, **kwargs)

    return with_n_seats(attrib, n_seats)


def failing(*args: Any, **kwargs: Any) -> Dict[Candidate, int]:
    '''An attribution that always fails.

    Useful as an explicit contingency where the default would be to fall back
    to another method.
    '''
    raise AttributionFailure('attribution failed')
