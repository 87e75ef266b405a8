import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import seatlib.measure

CANADA_2015_VOTES = {
    'Liberal': 6943276,
    'Conservative': 5613614,
    'New Democratic': 3470350,
    'Bloc Québécois': 821144,
    'Green': 602944,
    'Other': 91837,
}

CANADA_2015_SEATS = {
    'Liberal': 184,
    'Conservative': 99,
    'New Democratic': 44,
    'Bloc Québécois': 10,
    'Green': 1,
}


@pytest.mark.parametrize('index_name', list(seatlib.measure.METRICS.keys()))
def test_perfect(index_name):
    equals = {'A': 7, 'B': 5, 'C': 3}
    index_fx = seatlib.measure.get(index_name)
    assert index_fx(equals, equals) == 0


def test_canada_gallagher():
    # taken from https://iscanadafair.ca/gallagher-index/
    assert abs(seatlib.measure.gallagher(CANADA_2015_VOTES, CANADA_2015_SEATS) - .12) < .001


def test_lh_kalogirou_1():
    assert round(float(seatlib.measure.loosemore_hanby({'A': 68, 'B': 22}, {'A': 2})), 2) == .24


def test_lh_kalogirou_2():
    assert round(float(seatlib.measure.loosemore_hanby(
        {'A': 68, 'B': 22, 'C': 10},
        {'A': 1, 'B': 1}
    )), 2) == .28


def test_lijphart():
    assert seatlib.measure.lijphart(
        {'A': 60, 'B': 30, 'C': 10}, {'A': 1}
    ) == Fraction(2, 5)


def test_mean_seat_deviation():
    # entitlements 2.4 and 1.2 seats, unseated C does not count
    assert seatlib.measure.mean_seat_deviation(
        {'A': 60, 'B': 30, 'C': 10}, {'A': 3, 'B': 1}
    ) == Fraction(6 + 2, 10) / 2


def test_mean_seat_deviation_no_seats():
    assert seatlib.measure.mean_seat_deviation({'A': 1, 'B': 2}, {}) == 0


def test_mean_seat_deviation_seated_outsider():
    assert seatlib.measure.mean_seat_deviation(
        {'A': 10}, {'A': 1, 'X': 1}
    ) == 1


def test_default_alias():
    assert seatlib.measure.get('default') is seatlib.measure.mean_seat_deviation
