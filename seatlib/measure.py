"""Measure proportionality of seat attributions.

These functions evaluate how proportionally the seats are allocated to parties
according to their votes received. For a review of such indicators, see
[#kalog]_. Besides describing attribution results, they serve as the metrics
minimized by the bounded proportional methods in
:mod:`seatlib.evaluate.proportional`.

A metric takes a simple tally and a seat mapping and returns a number; the
bigger, the less proportional. Metrics must be pure.

The functions only accept simple tallies. Seat mappings are dictionaries as
returned by the attributions, without candidates that obtained no seats.

All metrics are assembled in the `METRICS` dictionary keyed by their name.
`get()` retrieves from this dictionary by string key; `construct()` also
accepts callables and passes them through.

.. [#kalog] "Measures of disproportionality", Kalogirou.
    http://www2.stat-athens.aueb.gr/~jpan/diatrives/Kalogirou/chapter5.pdf
"""

import math
from fractions import Fraction
from typing import Callable, Dict, Tuple
from numbers import Number

import seatlib.component.core
from seatlib.tally import Candidate


METRICS = {}

metric_mark, get, construct = seatlib.component.core.register_functions(
    METRICS, 'metric',
    Callable[[Dict[Candidate, Number], Dict[Candidate, int]], Number]
)


@metric_mark('default')
def mean_seat_deviation(votes: Dict[Candidate, Number],
                        results: Dict[Candidate, int],
                        ) -> Fraction:
    """Compute the mean absolute deviation from the exact seat entitlements.

    The entitlement of a candidate is the fraction of votes they received
    times the total number of seats awarded. The mean runs over the seated
    candidates only; a seated candidate missing from the tally is entitled to
    nothing. No seats at all give zero. Unlike indices comparing fractions,
    this grows with the number of seats, so it favors smaller houses for the
    same relative accuracy.

    :param votes: Numbers of votes for each candidate.
    :param results: Seat counts awarded to each candidate.
    """
    if not results:
        return Fraction(0)
    total_votes = Fraction(sum(votes.values()))
    total_seats = sum(results.values())
    deviation = sum(
        abs(total_seats * votes.get(cand, 0) / total_votes - n_seats)
        for cand, n_seats in results.items()
    )
    return Fraction(deviation) / len(results)


@metric_mark
def gallagher(votes: Dict[Candidate, Number],
              results: Dict[Candidate, int],
              ) -> float:
    """Compute the Gallagher index of attribution disproportionality.

    The Gallagher (LSq) index [#lsq]_ expresses the mismatch between the
    fraction of votes received and seats allocated for each candidate or party.
    The index ranges from zero (no disproportionality) to 1 (total
    disproportionality).
    Compared to the Loosemore–Hanby index, it highlights large deviations
    rather than small ones.

    :param votes: Numbers of votes for each candidate.
    :param results: Seat counts awarded to each candidate.

    .. [#lsq] "Gallagher index", Wikipedia.
        https://en.wikipedia.org/wiki/Gallagher_index
    """
    return math.sqrt(.5 * sum(
        (vote_frac - seat_frac) ** 2
        for vote_frac, seat_frac in _vote_seat_fractions(votes, results).values()
    ))


@metric_mark
def loosemore_hanby(votes: Dict[Candidate, Number],
                    results: Dict[Candidate, int],
                    ) -> Fraction:
    """Compute the Loosemore–Hanby index of attribution disproportionality.

    Half the sum of absolute differences between vote and seat fractions,
    ranging from zero (no disproportionality) to 1 (total disproportionality).

    :param votes: Numbers of votes for each candidate.
    :param results: Seat counts awarded to each candidate.
    """
    return sum(
        abs(vote_frac - seat_frac)
        for vote_frac, seat_frac in _vote_seat_fractions(votes, results).values()
    ) / 2


@metric_mark
def lijphart(votes: Dict[Candidate, Number],
             results: Dict[Candidate, int],
             ) -> Fraction:
    """Compute the Lijphart's index of disproportionality. [#kalog]_

    Lijphart's index takes the single largest difference between vote and seat
    fractions.
    """
    return max(
        abs(vote_frac - seat_frac)
        for vote_frac, seat_frac in _vote_seat_fractions(votes, results).values()
    )


def _vote_seat_fractions(votes: Dict[Candidate, Number],
                         results: Dict[Candidate, int],
                         ) -> Dict[Candidate, Tuple[Fraction, Fraction]]:
    total_votes = Fraction(sum(votes.values()))
    total_seats = sum(results.values())
    merged = {
        cand: (
            Fraction(n_votes) / total_votes,
            Fraction(results.get(cand, 0), total_seats),
        )
        for cand, n_votes in votes.items()
    }
    for cand, n_seats in results.items():
        if cand not in merged:
            merged[cand] = (Fraction(0), Fraction(n_seats, total_seats))
    return merged
