import sys
import os
import collections
import random

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.evaluate.auxiliary

VOTES = {'A': 50, 'B': 30, 'C': 20}


def test_seeded_stable():
    attrib = seatlib.evaluate.auxiliary.randomize(10, random_seed=42)
    first = attrib(VOTES)
    assert sum(first.values()) == 10
    assert all(n_seats > 0 for n_seats in first.values())
    assert attrib(VOTES) == first
    assert attrib.n_seats == 10


def test_random_obj_shared():
    attrib = seatlib.evaluate.auxiliary.randomize(
        10, random_obj=random.Random(7)
    )
    ref_rng = random.Random(7)
    for i in range(3):
        expected = collections.Counter(ref_rng.choices(
            list(VOTES), weights=list(VOTES.values()), k=10
        ))
        assert attrib(VOTES) == dict(expected)


def test_unseeded_sum():
    result = seatlib.evaluate.auxiliary.randomize(7)(VOTES)
    assert sum(result.values()) == 7
    assert set(result) <= set(VOTES)


def test_zero_weight_never_drawn():
    attrib = seatlib.evaluate.auxiliary.randomize(20, random_seed=1)
    assert attrib({'A': 5, 'B': 0}) == {'A': 20}


def test_zero_seats():
    assert seatlib.evaluate.auxiliary.randomize(0)(VOTES) == {}


def test_both_random_sources():
    with pytest.raises(TypeError):
        seatlib.evaluate.auxiliary.randomize(
            1, random_obj=random.Random(), random_seed=1
        )
