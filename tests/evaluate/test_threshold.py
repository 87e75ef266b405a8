import sys
import os
from decimal import Decimal

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.evaluate.core
import seatlib.evaluate.threshold
import seatlib.evaluate.proportional
from seatlib.evaluate.core import AttributionFailure
from seatlib.evaluate.threshold import add_threshold, passing_threshold


def recording(result):
    calls = []

    def attrib(votes, **kwargs):
        calls.append((dict(votes), kwargs))
        return result
    attrib.n_seats = 5
    return attrib, calls


def test_passing_threshold():
    votes = {'A': 60, 'B': 31, 'C': 5, 'D': 4}
    assert passing_threshold(votes, Decimal('.05')) == {'A': 60, 'B': 31, 'C': 5}


def test_passing_threshold_zero_total():
    assert passing_threshold({'A': 0, 'B': 0}, .1) == {'A': 0, 'B': 0}


def test_filters_before_delegating():
    base, calls = recording({'A': 5})
    attrib = add_threshold(base, .05)
    assert attrib({'A': 96, 'B': 4}, house='lower') == {'A': 5}
    assert calls == [({'A': 96}, {'house': 'lower'})]
    assert attrib.n_seats == 5


def test_zero_threshold_noop():
    base, calls = recording({'A': 5})
    assert add_threshold(base, 0) is base


def test_nobody_passes_fail():
    base, calls = recording({'A': 5})
    attrib = add_threshold(base, .6, contingency=None)
    with pytest.raises(AttributionFailure):
        attrib({'A': 50, 'B': 50})
    assert calls == []


def test_nobody_passes_explicit_failing():
    base, calls = recording({'A': 5})
    attrib = add_threshold(base, .6, contingency=seatlib.evaluate.core.failing)
    with pytest.raises(AttributionFailure):
        attrib({'A': 50, 'B': 50})


def test_nobody_passes_unthresholded():
    base, calls = recording({'A': 3, 'B': 2})
    attrib = add_threshold(base, .6)
    assert attrib({'A': 50, 'B': 50}, x=1) == {'A': 3, 'B': 2}
    assert calls == [({'A': 50, 'B': 50}, {'x': 1})]


def test_nobody_passes_contingency_gets_original():
    base, base_calls = recording({'A': 5})
    contingency, cont_calls = recording({'B': 5})
    attrib = add_threshold(base, .6, contingency=contingency)
    assert attrib({'A': 50, 'B': 50}, x=1) == {'B': 5}
    assert base_calls == []
    assert cont_calls == [({'A': 50, 'B': 50}, {'x': 1})]


def test_unthresholded_reentrant():
    base = seatlib.evaluate.proportional.d_hondt(4)
    attrib = add_threshold(base, .4)
    # nobody passes 40 %: D'Hondt over the whole tally
    assert attrib({'A': 35, 'B': 35, 'C': 30}) == base({'A': 35, 'B': 35, 'C': 30})
    # the threshold still applies on the next call
    assert attrib({'A': 60, 'B': 30, 'C': 10}) == {'A': 4}


@pytest.mark.parametrize('threshold', [-.01, 1.01])
def test_invalid_threshold(threshold):
    base, calls = recording({})
    with pytest.raises(ValueError):
        add_threshold(base, threshold)
