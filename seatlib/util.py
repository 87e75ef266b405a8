'''Various utility functions for other modules of Seatlib.

There should normally be no need to use these functions directly.
'''

import operator
from fractions import Fraction
from typing import Any, List, Tuple, Dict, Sequence
from numbers import Number


def sorted_votes(votes: Dict[Any, Number],
                 descending: bool = True,
                 ) -> List[Tuple[Any, Number]]:
    '''Return votes items sorted by value.

    The sort is stable, so equal values keep the order of the input.
    '''
    return list(sorted(
        votes.items(),
        key=operator.itemgetter(1),
        reverse=descending
    ))


def vote_fractions(votes: Dict[Any, Number]) -> Dict[Any, Fraction]:
    '''Return the exact fraction of the total votes for each candidate.

    :raises ZeroDivisionError: If the total of votes is zero.
    '''
    total = sum(votes.values())
    if total == 0:
        raise ZeroDivisionError('cannot compute vote fractions of zero votes')
    total = Fraction(total)
    return {cand: Fraction(n_votes) / total for cand, n_votes in votes.items()}


def expand_grades(histogram: Sequence[int]) -> List[int]:
    '''Expand a grade histogram into a sorted list of individual grades.

    >>> expand_grades([2, 0, 1])
    [0, 0, 2]
    '''
    return [
        grade
        for grade, count in enumerate(histogram)
        for _ in range(count)
    ]


def exact_mean(values: List[Number]) -> Fraction:
    return Fraction(sum(values), len(values))


def first_max(values: Dict[Any, Number]) -> Any:
    '''Return the key with the largest value, the first one in case of a tie.'''
    return max(values, key=values.get)
