'''Positional attributions over ranked ballots, such as the Borda count.

Each ballot gives points to the candidates by their rank; the candidate with
the most points wins all the seats.
'''

import logging
from typing import Callable, Dict, List, Sequence, Union
from numbers import Number

import seatlib.util
import seatlib.evaluate.core
import seatlib.component.rankscore
from seatlib.evaluate.core import Attribution
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)


def positional_scores(votes: Sequence[Sequence[Candidate]],
                      rank_scorer: Callable[[int], List[Number]],
                      ) -> Dict[Candidate, Number]:
    '''Sum the points given to each candidate by its ranks on the ballots.

    :param votes: Ranked ballots.
    :param rank_scorer: A function giving the points for each rank from the
        number of candidates ranked on the ballot.
    '''
    scores = {}
    for ballot in votes:
        for cand, points in zip(ballot, rank_scorer(len(ballot))):
            scores[cand] = scores.get(cand, 0) + points
    return scores


def borda_count(n_seats: int,
                rank_scorer: Union[
                    str, Callable[[int], List[Number]]
                ] = 'modified_borda',
                ) -> Attribution:
    '''Award all seats to the candidate with the highest Borda score.

    By default, this is the modified Borda count: on each ballot, the candidate
    ranked last gets one point and each candidate above it one point more,
    while unranked candidates get none. If more candidates share the highest
    score, the first of them to appear in the ballots wins. There is no
    failure case except for a tally with no ranked candidates, which raises
    ValueError.

    :param n_seats: Number of seats to award.
    :param rank_scorer: A function giving the points for each rank, or its name
        from :mod:`seatlib.component.rankscore`.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)
    scorer = seatlib.component.rankscore.construct(rank_scorer)

    def attrib(votes: Sequence[Sequence[Candidate]], **kwargs
               ) -> Dict[Candidate, int]:
        scores = positional_scores(votes, scorer)
        winner = seatlib.util.first_max(scores)
        logger.debug('Borda winner %r with score %s', winner, scores[winner])
        return seatlib.evaluate.core.all_seats_to(winner, n_seats)

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)
