'''Proportional attributions over simple tallies.

This contains the most common attributions used in party-list elections
that aim to be proportional:

-   Rank-index methods award seats one by one to the candidate with the highest
    rank index, computed from the candidate's fraction of votes and the number
    of seats it already holds. Divisor (highest averages) methods such as
    D'Hondt or Sainte-Laguë are rank-index methods with the index equal to the
    vote fraction divided by a divisor.
-   The largest remainder method (Hamilton/Hare) rounds the exact seat
    entitlements down and gives the remaining seats to the largest fractional
    remainders.
-   Bounded rank-index methods do not fill a fixed number of seats; they choose
    the number of seats within a range to minimize disproportionality.

Candidates without any votes never get a seat. All proportional attributions
raise ZeroDivisionError for a tally with no votes at all, since there is
nothing to be proportional to.

Most of the factories accept a threshold with a contingency; see
:func:`seatlib.evaluate.threshold.add_threshold`.
'''

import bisect
import itertools
import logging
from fractions import Fraction
from typing import Callable, Dict, Iterator, Tuple, Union
from numbers import Number

import seatlib.util
import seatlib.measure
import seatlib.component.rankindex
import seatlib.evaluate.core
import seatlib.evaluate.threshold
from seatlib.evaluate.core import Attribution
from seatlib.evaluate.threshold import UNTHRESHOLDED
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)

RankIndexFunction = Callable[[Fraction, int], Number]
DivisorFunction = Callable[[int], Number]
Metric = Callable[[Dict[Candidate, Number], Dict[Candidate, int]], Number]


def _rank_index_awards(votes: Dict[Candidate, Number],
                       rank_index_fx: RankIndexFunction,
                       ) -> Iterator[Tuple[Candidate, Dict[Candidate, int]]]:
    '''Award seats one by one by the rank index, indefinitely.

    Yields the candidate awarded and the running seat mapping after each award.
    The mapping is updated in place; copy it to keep a snapshot.

    The candidates are kept in a list sorted by increasing rank index so that
    only the index of the candidate just awarded needs to be recomputed. Among
    equal indices, the candidate that reached the index first wins, in the
    tally order at the start.
    '''
    fractions = seatlib.util.vote_fractions(votes)
    candidates = []
    indices = []
    for cand, fraction in fractions.items():
        if fraction > 0:
            index = rank_index_fx(fraction, 0)
            pos = bisect.bisect_left(indices, index)
            candidates.insert(pos, cand)
            indices.insert(pos, index)
    seats = {}
    while candidates:
        cand = candidates.pop()
        indices.pop()
        seats[cand] = seats.get(cand, 0) + 1
        new_index = rank_index_fx(fractions[cand], seats[cand])
        new_pos = bisect.bisect_left(indices, new_index)
        candidates.insert(new_pos, cand)
        indices.insert(new_pos, new_index)
        yield cand, seats


def rank_index_method(n_seats: int,
                      rank_index_function: Union[str, RankIndexFunction],
                      threshold: Number = 0,
                      contingency=UNTHRESHOLDED,
                      ) -> Attribution:
    '''Distribute seats proportionally by a rank index.

    Seats are awarded one at a time, each to the candidate with the highest
    rank index, which is then recomputed for that candidate only.

    :param n_seats: Number of seats to award.
    :param rank_index_function: A function of the fraction of votes received
        by a candidate and the number of seats it already holds, increasing in
        the former and decreasing in the latter. Common ones can be referenced
        by name from :mod:`seatlib.component.rankindex`.
    :param threshold: Fraction of all votes needed to get any seats.
    :param contingency: What to do if no candidate reaches the threshold; see
        :func:`seatlib.evaluate.threshold.add_threshold`.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)
    rank_index_fx = seatlib.component.rankindex.construct(rank_index_function)

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        seats = {}
        awards = _rank_index_awards(votes, rank_index_fx)
        for cand, seats in itertools.islice(awards, n_seats):
            logger.debug('seat awarded to %r, now at %d', cand, seats[cand])
        return dict(seats)

    return seatlib.evaluate.threshold.add_threshold(
        seatlib.evaluate.core.with_n_seats(attrib, n_seats),
        threshold, contingency
    )


def divisor_method(n_seats: int,
                   divisor_function: Union[str, DivisorFunction],
                   threshold: Number = 0,
                   contingency=UNTHRESHOLDED,
                   ) -> Attribution:
    '''Distribute seats proportionally by highest averages.

    Divides the vote count for each candidate by an increasing sequence of
    divisors and awards seats to the largest quotients. A zero divisor counts
    as an infinitely large quotient.

    :param n_seats: Number of seats to award.
    :param divisor_function: A function producing the divisor from the number
        of seats awarded to the candidate so far. Common ones can be referenced
        by name from :mod:`seatlib.component.divisor`.
    :param threshold: Fraction of all votes needed to get any seats.
    :param contingency: What to do if no candidate reaches the threshold; see
        :func:`seatlib.evaluate.threshold.add_threshold`.
    '''
    return rank_index_method(
        n_seats,
        seatlib.component.rankindex.from_divisor(divisor_function),
        threshold=threshold,
        contingency=contingency,
    )


def jefferson(n_seats: int,
              threshold: Number = 0,
              contingency=UNTHRESHOLDED,
              ) -> Attribution:
    '''The D'Hondt (Jefferson) divisor method, with divisors 1, 2, 3...

    Slightly favors larger parties.
    '''
    return divisor_method(n_seats, 'd_hondt', threshold, contingency)


d_hondt = jefferson


def webster(n_seats: int,
            threshold: Number = 0,
            contingency=UNTHRESHOLDED,
            ) -> Attribution:
    '''The Sainte-Laguë (Webster) divisor method, with divisors 1, 3, 5...'''
    return divisor_method(n_seats, 'sainte_lague', threshold, contingency)


sainte_lague = webster


def highest_averages(n_seats: int,
                     threshold: Number = 0,
                     contingency=UNTHRESHOLDED,
                     ) -> Attribution:
    '''A highest averages method, currently the Sainte-Laguë method.

    Use this when the particular divisor does not matter; the method used
    may change between versions.
    '''
    return webster(n_seats, threshold, contingency)


def huntington_hill(n_seats: int,
                    threshold: Number = 0,
                    contingency=None,
                    ) -> Attribution:
    '''The Huntington-Hill method, with divisors ``sqrt(n * (n + 1))``.

    The first divisor is zero, so every candidate with votes that passes the
    threshold gets a seat before anyone gets a second one. Without a threshold,
    this is only sensible if there are no more candidates than seats, as in
    apportionment of seats to states; the seats then go to the candidates
    first in the tally order.

    :param n_seats: Number of seats to award.
    :param threshold: Fraction of all votes needed to get any seats.
    :param contingency: Attribution to use if nobody reaches the threshold.
        None (the default) means to raise
        :class:`seatlib.evaluate.core.AttributionFailure`.
    '''
    return rank_index_method(n_seats, 'huntington_hill', threshold, contingency)


def hamilton(n_seats: int,
             threshold: Number = 0,
             contingency=UNTHRESHOLDED,
             ) -> Attribution:
    '''Distribute seats proportionally, rounding by largest remainder.

    Each candidate gets the integer part of its exact entitlement
    (its votes times the number of seats, divided by all votes) and the seats
    left over go to the candidates with the largest remainders. Candidates
    with equal remainders are served in the tally order.

    The result is close to proportionality but might suffer from an Alabama
    paradox where adding seats can cause a candidate to lose one.

    :param n_seats: Number of seats to award.
    :param threshold: Fraction of all votes needed to get any seats.
    :param contingency: What to do if no candidate reaches the threshold; see
        :func:`seatlib.evaluate.threshold.add_threshold`.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        if n_seats == 0:
            return {}
        total = sum(votes.values())
        seats = {}
        remainders = {}
        for cand, n_votes in votes.items():
            seats[cand], remainders[cand] = divmod(n_votes * n_seats, total)
        n_remaining = n_seats - sum(seats.values())
        for cand, remainder in seatlib.util.sorted_votes(remainders)[:n_remaining]:
            seats[cand] += 1
        return {cand: int(n) for cand, n in seats.items() if n > 0}

    return seatlib.evaluate.threshold.add_threshold(
        seatlib.evaluate.core.with_n_seats(attrib, n_seats),
        threshold, contingency
    )


hare = hamilton


def largest_remainders(n_seats: int,
                       threshold: Number = 0,
                       contingency=UNTHRESHOLDED,
                       ) -> Attribution:
    '''A largest remainder method, currently with the Hare quota.'''
    return hamilton(n_seats, threshold, contingency)


def bounded_rank_index_method(min_seats: int,
                              max_seats: int,
                              rank_index_function: Union[str, RankIndexFunction],
                              metric: Union[str, Metric] = 'mean_seat_deviation',
                              threshold: Number = 0,
                              contingency=UNTHRESHOLDED,
                              ) -> Attribution:
    '''Distribute seats by a rank index, choosing the number of seats.

    Runs the rank-index award loop up to `max_seats` seats and returns the
    allocation, among those with at least `min_seats` seats, that minimizes
    the disproportionality metric. Allocations with no seats are only
    considered when `max_seats` is zero. If more seat counts give the same
    metric value, the smallest wins.

    With `min_seats` equal to `max_seats`, this gives the same result as
    :func:`rank_index_method` with that number of seats.

    The resulting attribution carries the `min_seats` and `max_seats`
    attributes instead of `n_seats`.

    :param min_seats: Minimum number of seats to award.
    :param max_seats: Maximum number of seats to award.
    :param rank_index_function: As in :func:`rank_index_method`.
    :param metric: A disproportionality metric taking the tally and a seat
        mapping, or its name from :mod:`seatlib.measure`. The default is the
        mean deviation of the seated candidates from their entitlements.
    :param threshold: Fraction of all votes needed to get any seats.
    :param contingency: What to do if no candidate reaches the threshold; see
        :func:`seatlib.evaluate.threshold.add_threshold`.
    '''
    seatlib.evaluate.core.check_n_seats(min_seats, 'min_seats')
    seatlib.evaluate.core.check_n_seats(max_seats, 'max_seats')
    if min_seats > max_seats:
        raise ValueError(
            f'min_seats ({min_seats}) greater than max_seats ({max_seats})'
        )
    rank_index_fx = seatlib.component.rankindex.construct(rank_index_function)
    metric_fx = seatlib.measure.construct(metric)
    first_scored = max(min_seats, 1)

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        if max_seats == 0:
            return {}
        best = None
        best_score = None
        awards = _rank_index_awards(votes, rank_index_fx)
        awarded = enumerate(itertools.islice(awards, max_seats), start=1)
        for n_awarded, (cand, seats) in awarded:
            if n_awarded < first_scored:
                continue
            score = metric_fx(votes, seats)
            logger.debug('disproportionality at %d seats: %s', n_awarded, score)
            if best_score is None or score < best_score:
                best = dict(seats)
                best_score = score
        return best

    attrib.min_seats = min_seats
    attrib.max_seats = max_seats
    return seatlib.evaluate.threshold.add_threshold(
        attrib, threshold, contingency
    )


def bounded_divisor_method(min_seats: int,
                           max_seats: int,
                           divisor_function: Union[str, DivisorFunction],
                           metric: Union[str, Metric] = 'mean_seat_deviation',
                           threshold: Number = 0,
                           contingency=UNTHRESHOLDED,
                           ) -> Attribution:
    '''Distribute seats by highest averages, choosing the number of seats.

    See :func:`bounded_rank_index_method` and :func:`divisor_method`.
    '''
    return bounded_rank_index_method(
        min_seats, max_seats,
        seatlib.component.rankindex.from_divisor(divisor_function),
        metric=metric,
        threshold=threshold,
        contingency=contingency,
    )
