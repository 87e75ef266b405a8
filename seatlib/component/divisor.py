'''Divisor functions used in divisor (highest averages) proportional methods.

This provides arguments for :func:`seatlib.evaluate.proportional.divisor_method`
and its bounded variant.

A divisor function takes the order number (the number of seats allocated to
the candidate so far) and returns the divisor by which to divide the number
of votes for the candidate. The candidate with the largest quotient then gets
the next seat. Divisor functions must be pure and increasing in the order.

Some systems use a mathematically defined divisor but artificially change the
result for candidates with no seats so far (`order == 0`) to make it harder for
small parties to get their first seat. Use :func:`modified_first_coef` for that.

All supported divisor functions are assembled in the `DIVISORS` dictionary
keyed by their name. `get()` retrieves from this dictionary by string key;
`construct()` also accepts callables and passes them through.
'''

import math
from fractions import Fraction
from decimal import Decimal
from typing import Callable, Union
from numbers import Number

import seatlib.component.core


DIVISORS = {}


divisor_mark, get, construct = seatlib.component.core.register_functions(
    DIVISORS, 'divisor', Callable[[int], Number]
)


@divisor_mark('jefferson')
def d_hondt(order: int) -> int:
    '''D'Hondt divisor, the most commonly used divisor.

    Forms a simple sequence 1, 2, 3...
    In the United States, this is known as the Jefferson divisor that was used
    for congressional apportionment 1792-1842.

    Known to slightly favor larger parties.
    '''
    return order + 1


@divisor_mark('webster')
def sainte_lague(order: int) -> int:
    '''Sainte-Laguë (Webster) divisor.

    Forms a sequence 1, 3, 5...
    '''
    return 2 * order + 1


@divisor_mark
def huntington_hill(order: int) -> float:
    '''Huntington-Hill divisor, the geometric mean of `order` and `order + 1`.

    The divisor is zero for the zeroth order. Divisor methods treat a zero
    divisor as an infinite quotient, so every candidate gets its first seat
    before any candidate gets a second one.

    Used for United States congressional apportionment as of 2020.
    '''
    return math.sqrt(order * (order + 1))


@divisor_mark
def imperiali(order: int) -> Fraction:
    '''Imperiali divisor.

    Forms a sequence 1, 1.5, 2...

    Known to favor large parties greatly.
    '''
    return Fraction(order, 2) + 1


@divisor_mark
def danish(order: int) -> int:
    '''Danish divisor.

    Forms a sequence 1, 4, 7...

    Favors smaller parties.
    '''
    return 3 * order + 1


def modified_first_coef(divisor_fx: Union[str, Callable[[int], Number]],
                        first_coef: Union[Number, Decimal] = Fraction(7, 5),
                        ) -> Callable[[int], Number]:
    '''Modify the divisor for the zeroth order to an apriori coefficient.

    This raises the bar for parties that have not yet obtained a seat, as in
    the modified Sainte-Laguë method used in Norway and Sweden (1.4).

    :param divisor_fx: The ordinary divisor function (or its name) to be used
        for the orders above zero.
    :param first_coef: The divisor to be used when order == 0.
    '''
    divisor_fx = construct(divisor_fx)
    if not isinstance(first_coef, (int, Fraction)):
        first_coef = Fraction(*first_coef.as_integer_ratio())

    def _modified_divisor(order: int) -> Number:
        return divisor_fx(order) if order > 0 else first_coef
    return _modified_divisor
