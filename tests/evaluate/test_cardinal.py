import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.evaluate.cardinal
from seatlib.evaluate.core import AttributionFailure
from seatlib.tally import Scores


def test_average():
    votes = Scores(3, {'A': [0, 1, 2], 'B': [1, 2, 0]})
    attrib = seatlib.evaluate.cardinal.average_score(3)
    assert attrib(votes) == {'A': 3}
    assert attrib.n_seats == 3


def test_average_plain_dict():
    votes = {'A': [2, 1, 0], 'B': [1, 1, 1]}
    assert seatlib.evaluate.cardinal.average_score(1)(votes) == {'B': 1}


def test_average_tie_first():
    votes = {'B': [1, 0, 1], 'A': [0, 2, 0]}
    assert seatlib.evaluate.cardinal.average_score(1)(votes) == {'B': 1}


def test_ungraded_cannot_win():
    votes = {'A': [0, 0, 0], 'B': [1, 0, 0]}
    assert seatlib.evaluate.cardinal.average_score(1)(votes) == {'B': 1}
    assert seatlib.evaluate.cardinal.median_score(1)(votes) == {'B': 1}


def test_no_grades():
    with pytest.raises(ValueError):
        seatlib.evaluate.cardinal.average_score(1)({'A': [0, 0]})
    with pytest.raises(ValueError):
        seatlib.evaluate.cardinal.median_score(1)({})


def test_median():
    votes = Scores(4, {'A': [1, 0, 2, 0], 'B': [0, 3, 0, 0]})
    assert seatlib.evaluate.cardinal.median_score(1)(votes) == {'A': 1}


def test_median_tie_averaged():
    # B grades 0, 1, 2; A grades 1, 1, 3; both medians 1
    votes = Scores(4, {
        'B': [1, 1, 1, 0],
        'A': [0, 2, 0, 1],
        'C': [3, 0, 0, 0],
    })
    assert seatlib.evaluate.cardinal.median_score(2)(votes) == {'A': 2}


def test_median_tie_contingency_gets_tied_and_extras():
    received = []

    def contingency(votes, **kwargs):
        received.append((votes, kwargs))
        return {'B': 1}

    votes = Scores(4, {
        'B': [1, 1, 1, 0],
        'A': [0, 2, 0, 1],
        'C': [3, 0, 0, 0],
    })
    attrib = seatlib.evaluate.cardinal.median_score(1, contingency=contingency)
    assert attrib(votes, round=3) == {'B': 1}
    (tied, extras), = received
    assert extras == {'round': 3}
    assert tied.ngrades == 4
    assert dict(tied) == {'B': (1, 1, 1, 0), 'A': (0, 2, 0, 1)}


def test_median_tie_fails():
    votes = {'A': [0, 1], 'B': [0, 1]}
    attrib = seatlib.evaluate.cardinal.median_score(1, contingency=None)
    with pytest.raises(AttributionFailure):
        attrib(votes)


def test_median_even_count():
    # A median 1/2, B median 0
    votes = {'A': [1, 1], 'B': [2, 0]}
    assert seatlib.evaluate.cardinal.median_score(1)(votes) == {'A': 1}
    assert seatlib.evaluate.cardinal.average_score(1)(votes) == {'A': 1}
