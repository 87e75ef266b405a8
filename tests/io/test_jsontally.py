import sys
import os
import io

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatlib.io
import seatlib.io.jsontally
import seatlib.tally
from seatlib.io.core import ParseError
from seatlib.tally import TallyError


def test_load_simple():
    setup = seatlib.io.jsontally.loads(
        '{"type": "simple", "votes": {"A": 60, "B": 40},'
        ' "n_seats": 5, "system": "d_hondt", "name": "Test"}'
    )
    assert isinstance(setup.votes, seatlib.tally.Simple)
    assert setup.votes == {'A': 60, 'B': 40}
    assert setup.n_seats == 5
    assert setup.system == 'd_hondt'
    assert setup.election_name == 'Test'


def test_load_simple_default_type():
    setup = seatlib.io.jsontally.loads('{"votes": {"A": 1}}')
    assert setup.votes == {'A': 1}
    assert setup.n_seats is None
    assert setup.system is None


def test_load_order():
    setup = seatlib.io.jsontally.loads('''{
        "type": "order",
        "votes": [
            ["A", "B"],
            {"ranking": ["B", "C"], "count": 2},
            {"ranks": {"C": 1, "A": 2, "B": null}}
        ]
    }''')
    assert isinstance(setup.votes, seatlib.tally.Order)
    assert list(setup.votes) == [
        ('A', 'B'), ('B', 'C'), ('B', 'C'), ('C', 'A')
    ]


def test_load_scores():
    setup = seatlib.io.jsontally.loads(
        '{"type": "scores", "votes": {"A": [0, 1, 2], "B": [3, 0, 0]}}'
    )
    assert isinstance(setup.votes, seatlib.tally.Scores)
    assert setup.votes.ngrades == 3
    assert setup.votes['B'] == (3, 0, 0)


def test_load_file():
    setup = seatlib.io.jsontally.load(io.StringIO('{"votes": {"A": 3}}\n'))
    assert setup.votes == {'A': 3}


@pytest.mark.parametrize('text', [
    'not json',
    '[1, 2]',
    '{"type": "simple"}',
    '{"type": "weird", "votes": {}}',
    '{"votes": {"A": "many"}}',
    '{"votes": {"A": -1}}',
    '{"votes": {"A": 1}, "n_seats": -2}',
    '{"votes": {"A": 1}, "n_seats": 1.5}',
    '{"type": "order", "votes": {"A": 1}}',
    '{"type": "order", "votes": [["A", "A"]]}',
    '{"type": "order", "votes": [{"count": 2}]}',
    '{"type": "order", "votes": [{"ranks": {"A": 1, "B": 1}}]}',
    '{"type": "scores", "votes": {"A": [1, 2], "B": [1]}}',
    '{"type": "scores", "votes": {"A": 3}}',
    '{"type": "scores", "ngrades": 3, "votes": {"A": [1, 2]}}',
])
def test_parse_errors(text):
    with pytest.raises(ParseError):
        seatlib.io.jsontally.loads(text)


def test_dump_load():
    votes = seatlib.tally.Order([['A', 'B'], ['C']])
    text = seatlib.io.jsontally.dumps(votes, n_seats=2, system='irv')
    setup = seatlib.io.jsontally.loads(text)
    assert setup.votes == votes
    assert setup.n_seats == 2
    assert setup.system == 'irv'
    assert setup.election_name is None


def test_dump_file():
    outfile = io.StringIO()
    seatlib.io.jsontally.dump(
        outfile, seatlib.tally.Scores(2, {'A': [1, 1]}), election_name='X'
    )
    assert outfile.getvalue().endswith('}\n')
    setup = seatlib.io.jsontally.loads(outfile.getvalue())
    assert setup.votes.ngrades == 2
    assert setup.election_name == 'X'


def test_order_from_rankings():
    assert seatlib.io.order_from_rankings({'A': 2, 'B': 1, 'C': None}) == ('B', 'A')
    assert seatlib.io.order_from_rankings({'A': 0, 'B': 1}, start_at=0) == ('A', 'B')
    with pytest.raises(TallyError):
        seatlib.io.order_from_rankings({'A': 1, 'B': 3})
