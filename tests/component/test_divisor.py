import sys
import os
import math
from decimal import Decimal
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.component.divisor as d

TEST_ORDERS = list(range(10)) + [100, 1000, 10000]


@pytest.mark.parametrize('order', TEST_ORDERS)
def test_result(order):
    for fx in d.DIVISORS.values():
        divisor = fx(order)
        assert divisor >= 0
        assert order == 0 or divisor > 0


@pytest.mark.parametrize('order', TEST_ORDERS)
def test_increasing(order):
    for fx in d.DIVISORS.values():
        assert fx(order + 1) > fx(order)


@pytest.mark.parametrize('name, sequence', [
    ('d_hondt', [1, 2, 3, 4]),
    ('jefferson', [1, 2, 3, 4]),
    ('sainte_lague', [1, 3, 5, 7]),
    ('webster', [1, 3, 5, 7]),
    ('imperiali', [1, Fraction(3, 2), 2, Fraction(5, 2)]),
    ('danish', [1, 4, 7, 10]),
])
def test_sequences(name, sequence):
    fx = d.get(name)
    assert [fx(order) for order in range(len(sequence))] == sequence


def test_huntington_hill():
    assert d.huntington_hill(0) == 0
    assert d.huntington_hill(1) == pytest.approx(math.sqrt(2))
    assert d.huntington_hill(4) == pytest.approx(math.sqrt(20))


def test_modified_first_coef():
    for fx in d.DIVISORS.values():
        modif = d.modified_first_coef(fx, 8654)
        assert modif(0) == 8654
        for i in TEST_ORDERS[1:]:
            assert modif(i) == fx(i)


def test_modified_first_coef_decimal():
    modif = d.modified_first_coef('sainte_lague', Decimal('1.4'))
    assert modif(0) == Fraction(7, 5)
    assert modif(1) == 3


def test_get():
    for fx_name, fx in d.DIVISORS.items():
        assert d.get(fx_name) == fx
    for bad_name in ('oapsdjf', '', None):
        with pytest.raises(KeyError):
            d.get(bad_name)


def test_construct_passthrough():
    custom = lambda order: order + 2
    assert d.construct(custom) is custom
    assert d.construct('danish') is d.danish
