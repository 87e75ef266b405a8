'''Randomized attribution.

The lottery draws the winners of the seats at random, weighted by votes, so
that every seat goes to the candidate of a randomly selected ballot.

You can make the lottery outputs stable if you give it a seed for the random
generator, but be careful with that in a real-world setting.
'''

import collections
import logging
import random
from typing import Dict, Optional, Hashable
from numbers import Number

import seatlib.evaluate.core
from seatlib.evaluate.core import Attribution
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)


def randomize(n_seats: int,
              random_obj: Optional[random.Random] = None,
              random_seed: Optional[Hashable] = None,
              ) -> Attribution:
    '''Award each seat to a candidate drawn at random, weighted by votes.

    Draws are made with replacement, so one candidate can get several seats.

    :param n_seats: Number of seats to award.
    :param random_obj: A random generator to draw from. It is shared by all
        calls of the attribution, so such calls must not run concurrently.
    :param random_seed: A seed for a new random generator, created for every
        call, so that every call on the same tally gives the same result.
        Cannot be combined with `random_obj`. If neither is given, every call
        uses a freshly seeded generator.
    '''
    seatlib.evaluate.core.check_n_seats(n_seats)
    if random_obj is not None and random_seed is not None:
        raise TypeError('cannot give both random_obj and random_seed')

    def attrib(votes: Dict[Candidate, Number], **kwargs) -> Dict[Candidate, int]:
        if n_seats == 0:
            return {}
        rng = random_obj if random_obj is not None else random.Random(random_seed)
        candidates = list(votes.keys())
        drawn = rng.choices(candidates, weights=list(votes.values()), k=n_seats)
        logger.debug('lottery drew %s', drawn)
        return dict(collections.Counter(drawn))

    return seatlib.evaluate.core.with_n_seats(attrib, n_seats)
