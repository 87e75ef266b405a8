'''Rank index functions used in proportional rank-index methods.

A rank index function takes the fraction of votes received by a candidate and
the number of seats already awarded to it and returns a score; the candidate
with the highest score gets the next seat. It must increase with the vote
fraction and is expected to decrease with the number of seats. It must be pure,
so that its results can be cached.

Divisor methods are rank-index methods whose index is the vote fraction divided
by a divisor (see :func:`from_divisor`).

All supported rank index functions are assembled in the `RANK_INDICES`
dictionary keyed by their name. `get()` retrieves from this dictionary by
string key; `construct()` also accepts callables and passes them through.
'''

from fractions import Fraction
from typing import Callable, Union
from numbers import Number

import seatlib.component.core
import seatlib.component.divisor


INF = float('inf')

RANK_INDICES = {}

rank_index_mark, get, construct = seatlib.component.core.register_functions(
    RANK_INDICES, 'rank index', Callable[[Fraction, int], Number]
)


def from_divisor(divisor_fx: Union[str, Callable[[int], Number]]
                 ) -> Callable[[Fraction, int], Number]:
    '''Make a rank index function out of a divisor function.

    The index is the vote fraction divided by the divisor. A zero divisor
    gives an infinite index.

    :param divisor_fx: A divisor function or its name from
        :mod:`seatlib.component.divisor`.
    '''
    divisor_fx = seatlib.component.divisor.construct(divisor_fx)

    def rank_index(fraction: Fraction, n_seats: int) -> Number:
        divisor = divisor_fx(n_seats)
        if divisor == 0:
            return INF
        return fraction / divisor
    return rank_index


@rank_index_mark('jefferson')
def d_hondt(fraction: Fraction, n_seats: int) -> Fraction:
    '''D'Hondt rank index, the vote fraction divided by `n_seats + 1`.'''
    return fraction / (n_seats + 1)


@rank_index_mark('webster')
def sainte_lague(fraction: Fraction, n_seats: int) -> Fraction:
    '''Sainte-Laguë rank index, the vote fraction divided by `2 * n_seats + 1`.'''
    return fraction / (2 * n_seats + 1)


@rank_index_mark
def huntington_hill(fraction: Fraction, n_seats: int) -> Number:
    '''Huntington-Hill rank index.

    The Huntington-Hill divisor is `sqrt(n * (n + 1))`. To stay exact, this
    returns the square of the quotient, which orders the candidates the same
    way. It is infinite for candidates without seats.
    '''
    if n_seats == 0:
        return INF
    return fraction * fraction / (n_seats * (n_seats + 1))
