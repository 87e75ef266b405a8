'''Score-based attributions over grade histograms.

These award all seats to the candidate with the best grades, aggregated
either by the mean or the median. Candidates that were not graded at all
cannot win.
'''

import logging
import statistics
from typing import Dict, Optional, Sequence

import seatlib.util
import seatlib.tally
import seatlib.evaluate.core
from seatlib.evaluate.core import Attribution, AttributionFailure
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)

_DEFAULT = object()


def _expanded_grades(votes: Dict[Candidate, Sequence[int]]
                     ) -> Dict[Candidate, list]:
    expanded = {
        cand: seatlib.util.expand_grades(histogram)
        for cand, histogram in votes.items()
    }
    graded = {cand: grades for cand, grades in expanded.items() if grades}
    if not graded:
        raise ValueError('no candidate has any grades')
    return graded


def average_score(n_seats: int) -> Attribution:
    '''Award all seats to the candidate with the highest mean grade.

    The mean is computed exactly. If more candidates share the highest mean,
    the first of them in the tally order wins.

    :param n_seats: Number of seats to award.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)

    def attrib(votes: Dict[Candidate, Sequence[int]], **kwargs
               ) -> Dict[Candidate, int]:
        means = {
            cand: seatlib.util.exact_mean(grades)
            for cand, grades in _expanded_grades(votes).items()
        }
        winner = seatlib.util.first_max(means)
        logger.debug('average score winner %r with mean %s', winner, means[winner])
        return seatlib.evaluate.core.all_seats_to(winner, n_seats)

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)


def median_score(n_seats: int,
                 contingency: Optional[Attribution] = _DEFAULT,
                 ) -> Attribution:
    '''Award all seats to the candidate with the highest median grade.

    For an even number of grades, the median is the mean of the two middle
    ones. If more candidates share the highest median, the contingency decides
    among them: it receives the tally restricted to the tied candidates.

    :param n_seats: Number of seats to award.
    :param contingency: Attribution deciding ties of medians; defaults to
        :func:`average_score` with the same number of seats. If None,
        a tie raises :class:`AttributionFailure`.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)
    if contingency is _DEFAULT:
        contingency = average_score(n_seats)

    def attrib(votes: Dict[Candidate, Sequence[int]], **kwargs
               ) -> Dict[Candidate, int]:
        medians = {
            cand: statistics.median(grades)
            for cand, grades in _expanded_grades(votes).items()
        }
        best = max(medians.values())
        winners = [cand for cand, med in medians.items() if med == best]
        if len(winners) == 1:
            return seatlib.evaluate.core.all_seats_to(winners[0], n_seats)
        if contingency is None:
            raise AttributionFailure(f'tie of median scores: {winners}')
        logger.info('tie of median scores among %s, using contingency', winners)
        tied = seatlib.tally.Scores(
            seatlib.tally.scores_ngrades(votes),
            {cand: votes[cand] for cand in winners},
        )
        return contingency(tied, **kwargs)

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)
