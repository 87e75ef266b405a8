'''Condorcet attribution over ranked ballots.

The Condorcet winner is the candidate that beats every other candidate in
a pairwise comparison: more than half of the ballots expressing a preference
between the two rank it higher. Such a candidate does not always exist;
preferences can be cyclic (A beats B, B beats C, C beats A). That case is
a :class:`Standoff`.

The comparison needs complete ballots to be meaningful. Candidates omitted
from a ballot express no preference against each other or the ranked ones.
'''

import collections
import logging
from typing import Dict, Optional, Sequence

import seatlib.evaluate.core
import seatlib.tally
from seatlib.evaluate.core import (
    Attribution, AttributionFailure, VotingSystemError
)
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)


class Standoff(AttributionFailure):
    '''No candidate beats all others in pairwise comparisons.'''
    pass


def pairwise_counts(votes: Sequence[Sequence[Candidate]]
                    ) -> Dict[Candidate, Dict[Candidate, int]]:
    '''Count pairwise preferences between candidates.

    :param votes: Ranked ballots.
    :returns: A nested dictionary where ``counts[a][b]`` is the number of
        ballots ranking `a` above `b`. Pairs never ranked in that order
        are missing.
    '''
    counts = collections.defaultdict(dict)
    for ballot in votes:
        for i, better in enumerate(ballot):
            for worse in ballot[i+1:]:
                counts[better][worse] = counts[better].get(worse, 0) + 1
    return dict(counts)


def beats(counts: Dict[Candidate, Dict[Candidate, int]],
          cand: Candidate,
          other: Candidate,
          ) -> bool:
    '''Return True if `cand` is preferred to `other` by a majority.

    The majority is taken out of the ballots that rank either of the two
    above the other.
    '''
    pro = counts.get(cand, {}).get(other, 0)
    con = counts.get(other, {}).get(cand, 0)
    return 2 * pro > pro + con


def condorcet_winners(votes: Sequence[Sequence[Candidate]]) -> list:
    '''Return the candidates that beat every other candidate pairwise.

    There can be at most one such candidate.
    '''
    candidates = seatlib.tally.all_ranked_candidates(votes)
    if not candidates:
        raise ValueError('no candidates ranked on any ballot')
    counts = pairwise_counts(votes)
    return [
        cand for cand in candidates
        if all(
            beats(counts, cand, other)
            for other in candidates if other != cand
        )
    ]


def condorcet(n_seats: int,
              contingency: Optional[Attribution] = None,
              ) -> Attribution:
    '''Award all seats to the Condorcet winner.

    :param n_seats: Number of seats to award.
    :param contingency: Attribution to delegate the whole tally to if there
        is no Condorcet winner. If None, :class:`Standoff` is raised.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)

    def attrib(votes: Sequence[Sequence[Candidate]], **kwargs
               ) -> Dict[Candidate, int]:
        winners = condorcet_winners(votes)
        if len(winners) == 1:
            return seatlib.evaluate.core.all_seats_to(winners[0], n_seats)
        elif len(winners) > 1:
            raise VotingSystemError(f'more than one Condorcet winner: {winners}')
        if contingency is None:
            raise Standoff('no Condorcet winner')
        logger.info('no Condorcet winner, using contingency')
        return contingency(votes, **kwargs)

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)


condorcet.Standoff = Standoff
