"""Input/output of tallies to files.

This subpackage is structured into modules by file format. Its root namespace
contains general-purpose functions to transform ballot definitions into the
tally types of Seatlib.
"""

from typing import Dict, Optional, Tuple

from seatlib.tally import Candidate, TallyError


def order_from_rankings(rankings: Dict[Candidate, Optional[int]],
                        start_at: int = 1,
                        ) -> Tuple[Candidate, ...]:
    '''Transform numeric rankings of candidates to a ranked ballot.

    :param rankings: A dictionary mapping candidates to their numeric rankings.
        The rankings should start at the value of start_at, higher numbers mean
        lower (worse) ranks. Candidates with a None ranking are left unranked.
    :param start_at: The best ranking present in the rankings, to allow other
        than 1-based systems.
    :returns: A ranked ballot: a tuple of candidates in the order of their
        rankings.
    :raises TallyError: If two candidates share a rank or a rank is skipped.
    '''
    filled = {
        cand: rank for cand, rank in rankings.items() if rank is not None
    }
    ballot = sorted(filled, key=filled.get)
    for expected, cand in enumerate(ballot, start=start_at):
        if filled[cand] != expected:
            raise TallyError(
                f'invalid rank of {cand!r}: {filled[cand]}, expected {expected}'
            )
    return tuple(ballot)
