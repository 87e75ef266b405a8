'''Sequential elimination attributions over ranked ballots.

In each round, every ballot counts for its highest ranked candidate that is
still in the race. Candidates are eliminated one per round until one of them
gets a majority, and wins all the seats.
'''

import logging
from typing import Dict, Sequence

import seatlib.evaluate.core
import seatlib.tally
from seatlib.evaluate.core import Attribution, VotingSystemError
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)


def instant_runoff(n_seats: int) -> Attribution:
    '''Instant-runoff voting (alternative vote).

    In each round, the first preferences among the remaining candidates are
    counted; ballots with no remaining candidate are exhausted and do not
    count. A candidate with more than half of the counted first preferences
    wins all the seats. Otherwise, the candidate with the fewest first
    preferences is eliminated. Among candidates tied for the fewest, the one
    mentioned on fewer ballots (at any rank, counting remaining candidates
    only) is eliminated; if still tied, the one that appears last in the
    ballots.

    Candidates omitted from a ballot are unranked on it. The election ends
    in at most as many rounds as there are candidates.

    :param n_seats: Number of seats to award.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)

    def attrib(votes: Sequence[Sequence[Candidate]], **kwargs
               ) -> Dict[Candidate, int]:
        candidates = seatlib.tally.all_ranked_candidates(votes)
        if not candidates:
            raise ValueError('no candidates ranked on any ballot')
        order = {cand: i for i, cand in enumerate(candidates)}
        eliminated = set()
        for round_i in range(len(candidates)):
            first_places = {
                cand: 0 for cand in candidates if cand not in eliminated
            }
            for ballot in votes:
                for cand in ballot:
                    if cand not in eliminated:
                        first_places[cand] += 1
                        break
            total = sum(first_places.values())
            logger.debug('round %d first preferences: %s', round_i + 1, first_places)
            for cand, score in first_places.items():
                if 2 * score > total:
                    logger.info('%r wins in round %d', cand, round_i + 1)
                    return seatlib.evaluate.core.all_seats_to(cand, n_seats)
            mentions = _count_mentions(votes, eliminated)
            loser = min(first_places, key=lambda cand: (
                first_places[cand], mentions.get(cand, 0), -order[cand]
            ))
            logger.info('eliminating %r in round %d', loser, round_i + 1)
            eliminated.add(loser)
        raise VotingSystemError(
            f'instant runoff did not find a winner in {len(candidates)} rounds'
        )

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)


def _count_mentions(votes: Sequence[Sequence[Candidate]],
                    eliminated: set,
                    ) -> Dict[Candidate, int]:
    mentions = {}
    for ballot in votes:
        for cand in ballot:
            if cand not in eliminated:
                mentions[cand] = mentions.get(cand, 0) + 1
    return mentions
