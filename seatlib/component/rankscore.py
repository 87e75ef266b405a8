'''Rank scorers assigning points to ranks in positional systems such as Borda.

A rank scorer takes the number of candidates ranked on a ballot and returns
the list of points for each rank, the first rank first. Candidates not ranked
on the ballot get no points.

All supported rank scorers are assembled in the `RANK_SCORERS` dictionary
keyed by their name. `get()` retrieves from this dictionary by string key;
`construct()` also accepts callables and passes them through.
'''

from fractions import Fraction
from typing import Callable, List
from numbers import Number

import seatlib.component.core


RANK_SCORERS = {}

rank_scorer_mark, get, construct = seatlib.component.core.register_functions(
    RANK_SCORERS, 'rank scorer', Callable[[int], List[Number]]
)


@rank_scorer_mark('borda')
def modified_borda(n_ranked: int) -> List[int]:
    '''Modified Borda count scores.

    The candidate ranked last on the ballot gets one point, every candidate
    above them one point more. Unranked candidates get nothing, so ranking
    fewer candidates gives fewer points to the ballot's favorites.
    '''
    return list(range(n_ranked, 0, -1))


@rank_scorer_mark
def dowdall(n_ranked: int) -> List[Fraction]:
    '''Dowdall (Nauru) rank scores: 1, 1/2, 1/3...'''
    return [Fraction(1, rank) for rank in range(1, n_ranked + 1)]
