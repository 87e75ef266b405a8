'''JSON tally files.

A tally file is a JSON object with the following keys:

-   ``type``: one of ``simple``, ``order`` or ``scores``.
-   ``votes``: the tally itself.

    -   For simple tallies, an object mapping candidates to ballot counts.
    -   For order tallies, a list of ballots. A ballot is either a list of
        candidates from the most preferred, or an object with a ``ranking``
        list (or a ``ranks`` object mapping candidates to their 1-based ranks)
        and an optional ``count`` of identical ballots.
    -   For scores tallies, an object mapping candidates to grade histograms.

-   ``ngrades``: number of grades, for scores tallies only; defaults to the
    length of the histograms.
-   ``n_seats``, ``system`` and ``name`` (optional): number of seats, the key
    of the attribution system (see :mod:`seatlib.system`) and the name of the
    election.

Candidates are represented by strings.
'''

import json
from numbers import Number
from typing import Any, Dict, Iterable, Optional

import seatlib.io
import seatlib.io.core
import seatlib.tally
from seatlib.io.core import TallySetup
from seatlib.tally import Candidate, TallyError


class JSONTallyParseError(seatlib.io.core.ParseError):
    pass


def parse(data: Dict[str, Any]) -> TallySetup:
    '''Create the tally setup from the decoded JSON data.'''
    if not isinstance(data, dict):
        raise JSONTallyParseError(f'tally file must hold an object, got {data!r}')
    if 'votes' not in data:
        raise JSONTallyParseError('missing votes')
    tally_type = data.get('type', 'simple')
    try:
        if tally_type == 'simple':
            votes = _parse_simple(data['votes'])
        elif tally_type == 'order':
            votes = _parse_order(data['votes'])
        elif tally_type == 'scores':
            votes = _parse_scores(data['votes'], data.get('ngrades'))
        else:
            raise JSONTallyParseError(f'unknown tally type: {tally_type!r}')
    except TallyError as err:
        raise JSONTallyParseError(f'invalid {tally_type} tally: {err}') from err
    n_seats = data.get('n_seats')
    if n_seats is not None and (
        not isinstance(n_seats, int) or isinstance(n_seats, bool) or n_seats < 0
    ):
        raise JSONTallyParseError(f'invalid n_seats: {n_seats!r}')
    return TallySetup(
        votes=votes,
        n_seats=n_seats,
        system=data.get('system'),
        election_name=data.get('name'),
    )


def _parse_simple(votes: Any) -> seatlib.tally.Simple:
    if not isinstance(votes, dict):
        raise JSONTallyParseError('simple votes must be an object')
    for cand, n_votes in votes.items():
        if not isinstance(n_votes, Number) or isinstance(n_votes, bool):
            raise JSONTallyParseError(f'invalid vote count for {cand!r}: {n_votes!r}')
    return seatlib.tally.Simple(votes)


def _parse_order(votes: Any) -> seatlib.tally.Order:
    if not isinstance(votes, list):
        raise JSONTallyParseError('order votes must be a list of ballots')
    ballots = []
    for item in votes:
        if isinstance(item, list):
            ballots.append(item)
        elif isinstance(item, dict):
            if 'ranking' in item:
                ballot = item['ranking']
            elif 'ranks' in item:
                ballot = seatlib.io.order_from_rankings(item['ranks'])
            else:
                raise JSONTallyParseError(f'ballot without ranking: {item!r}')
            count = item.get('count', 1)
            if not isinstance(count, int) or count < 0:
                raise JSONTallyParseError(f'invalid ballot count: {count!r}')
            ballots.extend([ballot] * count)
        else:
            raise JSONTallyParseError(f'invalid ballot: {item!r}')
    return seatlib.tally.Order(ballots)


def _parse_scores(votes: Any, ngrades: Optional[int]) -> seatlib.tally.Scores:
    if not isinstance(votes, dict):
        raise JSONTallyParseError('scores votes must be an object')
    for cand, histogram in votes.items():
        if not isinstance(histogram, list):
            raise JSONTallyParseError(f'invalid grades for {cand!r}: {histogram!r}')
    if ngrades is None:
        ngrades = seatlib.tally.scores_ngrades(votes)
    return seatlib.tally.Scores(ngrades, votes)


def load_lines(lines: Iterable[str]) -> TallySetup:
    '''Load a tally setup from the lines of a JSON tally file.'''
    text = '\n'.join(line.rstrip('\n') for line in lines)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise JSONTallyParseError(f'invalid JSON: {err}') from err
    return parse(data)


load, loads = seatlib.io.core.loaders(load_lines)


def dump_lines(votes: Any,
               n_seats: Optional[int] = None,
               system: Optional[str] = None,
               election_name: Optional[str] = None,
               ) -> Iterable[str]:
    '''Produce the lines of a JSON tally file.

    :param votes: A tally of any type.
    :param n_seats: Number of seats to record in the file.
    :param system: Key of the attribution system to record in the file.
    :param election_name: Name of the election to record in the file.
    '''
    data = seatlib.tally.tally_to_dict(votes)
    data['votes'] = _stringify_candidates(data['votes'])
    for key, value in (
        ('n_seats', n_seats), ('system', system), ('name', election_name)
    ):
        if value is not None:
            data[key] = value
    yield from json.dumps(data, indent=2, ensure_ascii=False).split('\n')


dump, dumps = seatlib.io.core.dumpers(dump_lines)


def _stringify_candidates(votes: Any) -> Any:
    if isinstance(votes, dict):
        return {_cand_name(cand): value for cand, value in votes.items()}
    return [[_cand_name(cand) for cand in ballot] for ballot in votes]


def _cand_name(cand: Candidate) -> str:
    if isinstance(cand, str):
        return cand
    return getattr(cand, 'name', str(cand))
