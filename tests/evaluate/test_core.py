import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.evaluate.core
from seatlib.evaluate.core import AttributionFailure, VotingSystemError


def test_plurality():
    attrib = seatlib.evaluate.core.plurality(1)
    assert attrib({'A': 5, 'B': 3}) == {'A': 1}
    assert attrib.n_seats == 1


def test_plurality_all_seats():
    attrib = seatlib.evaluate.core.plurality(7)
    assert attrib({'A': 5, 'B': 8, 'C': 2}) == {'B': 7}


def test_plurality_tie_first():
    attrib = seatlib.evaluate.core.plurality(1)
    assert attrib({'A': 2, 'B': 5, 'C': 5}) == {'B': 1}


@pytest.mark.parametrize('votes', [{'A': 0, 'B': 0}, {'A': 0}])
def test_plurality_zero(votes):
    with pytest.raises(AttributionFailure):
        seatlib.evaluate.core.plurality(1)(votes)


def test_plurality_empty():
    with pytest.raises(ValueError):
        seatlib.evaluate.core.plurality(1)({})


def test_plurality_extras_accepted():
    attrib = seatlib.evaluate.core.plurality(2)
    assert attrib({'A': 1}, district='north') == {'A': 2}


@pytest.mark.parametrize('n_seats', [-1, 1.5, '3'])
def test_invalid_n_seats(n_seats):
    with pytest.raises(ValueError):
        seatlib.evaluate.core.plurality(n_seats)


def test_failure_hierarchy():
    assert not issubclass(VotingSystemError, AttributionFailure)
    assert issubclass(AttributionFailure, Exception)


def test_super_majority_pass():
    attrib = seatlib.evaluate.core.super_majority(3, threshold=Fraction(3, 5))
    assert attrib({'A': 61, 'B': 39}) == {'A': 3}
    assert attrib.n_seats == 3


def test_super_majority_fail():
    attrib = seatlib.evaluate.core.super_majority(3, threshold=Fraction(3, 5))
    with pytest.raises(AttributionFailure):
        attrib({'A': 59, 'B': 41})


@pytest.mark.parametrize('threshold, votes', [
    (.5, {'A': 50, 'B': 50}),
    (.5, {'A': 5, 'B': 3, 'C': 2}),
    (Fraction(2, 3), {'A': 20, 'B': 10}),
])
def test_super_majority_boundary_fails(threshold, votes):
    attrib = seatlib.evaluate.core.super_majority(1, threshold=threshold)
    with pytest.raises(AttributionFailure):
        attrib(votes)


def test_super_majority_just_over_boundary():
    attrib = seatlib.evaluate.core.super_majority(1, threshold=Fraction(2, 3))
    assert attrib({'A': 21, 'B': 10}) == {'A': 1}


def test_super_majority_zero_votes():
    attrib = seatlib.evaluate.core.super_majority(1, threshold=0)
    with pytest.raises(AttributionFailure):
        attrib({'A': 0, 'B': 0})


def test_super_majority_contingency():
    received = {}

    def contingency(votes, **kwargs):
        received.update(kwargs)
        return {'B': 2}

    attrib = seatlib.evaluate.core.super_majority(
        2, threshold=.5, contingency=contingency
    )
    assert attrib({'A': 5, 'B': 5}, round=1) == {'B': 2}
    assert received == {'round': 1}


def test_super_majority_plurality_contingency():
    attrib = seatlib.evaluate.core.super_majority(
        1, contingency=seatlib.evaluate.core.plurality(1)
    )
    assert attrib({'A': 4, 'B': 3, 'C': 3}) == {'A': 1}


@pytest.mark.parametrize('threshold', [-.1, 1.5])
def test_super_majority_invalid_threshold(threshold):
    with pytest.raises(ValueError):
        seatlib.evaluate.core.super_majority(1, threshold=threshold)


def test_failing():
    with pytest.raises(AttributionFailure):
        seatlib.evaluate.core.failing({'A': 1})


def test_zero_seats():
    assert seatlib.evaluate.core.plurality(0)({'A': 1}) == {}


def test_has_n_seats():
    assert seatlib.evaluate.core.has_n_seats(seatlib.evaluate.core.plurality(2))
    assert not seatlib.evaluate.core.has_n_seats(seatlib.evaluate.core.failing)
    assert not seatlib.evaluate.core.has_n_seats(lambda votes, **kwargs: {})
