"""A commandline tool for quick attribution of seats from tally files.

Loads a JSON tally file (see :mod:`seatlib.io.jsontally`), attributes the
seats by one or more systems accepting its tally type and prints the results.
"""

import argparse
import io
import logging
import sys
import warnings
from numbers import Number
from typing import Any, Dict, List, Optional

import seatlib.io.jsontally
import seatlib.system
import seatlib.tally
from seatlib.evaluate.core import AttributionFailure
from seatlib.system import AttributionSystem

argparser = argparse.ArgumentParser(
    prog='seatlib',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load the tally from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the tally from standard input',
)
argparser.add_argument(
    '-s', '--system',
    nargs='*',
    help='attribution systems to use; default all accepting the tally type',
)
argparser.add_argument(
    '-n', '--n-seats',
    type=int,
    help=(
        'award this many seats (overrides the number given in the tally'
        ' file); default (None) uses the tally file or 1'
    ),
)
argparser.add_argument(
    '-t', '--threshold',
    type=float,
    default=0,
    help='fraction of votes needed to get seats, for systems supporting it',
)
argparser.add_argument(
    '--seed',
    type=int,
    help='random seed for randomized systems',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all attribution log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any attribution log messages',
)

TALLY_TYPE_NAMES = {
    seatlib.tally.Simple: 'simple',
    seatlib.tally.Order: 'order',
    seatlib.tally.Scores: 'scores',
}


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         system: Optional[List[str]] = None,
         n_seats: Optional[int] = None,
         threshold: float = 0,
         seed: Optional[int] = None,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    setup = seatlib.io.jsontally.load(input_file)
    votes = setup.votes
    if not votes:
        warnings.warn('empty tally: cannot attribute seats, terminating')
        return
    if n_seats is None:
        n_seats = setup.n_seats if setup.n_seats is not None else 1
    if setup.system and not system:
        system = [setup.system]
    use_systems = gather_systems(
        selected_keys=system,
        tally_type=seatlib.tally.detect_tally_type(votes),
    )
    if not use_systems:
        warnings.warn('no attribution systems selected, terminating')
        return
    show_tally_stats(votes, n_seats)
    for att_system in use_systems.values():
        print()
        run_system(
            att_system, votes, n_seats,
            **system_options(att_system, threshold=threshold, seed=seed)
        )


def gather_systems(selected_keys: Optional[List[str]] = None,
                   tally_type: type = seatlib.tally.Simple,
                   ) -> Dict[str, AttributionSystem]:
    """Select desired attribution systems from the available ones."""
    avail_systems = seatlib.system.get_available_systems(tally_type)
    if selected_keys is None:
        return avail_systems
    else:
        try:
            return {key: avail_systems[key] for key in selected_keys}
        except KeyError as e:
            raise ValueError(f'unknown attribution system {str(e)}, available: '
                             + ', '.join(avail_systems.keys())) from e


def system_options(att_system: AttributionSystem,
                   threshold: float = 0,
                   seed: Optional[int] = None,
                   ) -> Dict[str, Any]:
    """Select the command line options applicable to the system."""
    options = {}
    if threshold and att_system.accepts('threshold'):
        options['threshold'] = threshold
    if seed is not None and att_system.accepts('random_seed'):
        options['random_seed'] = seed
    return options


def show_tally_stats(votes: Any, n_seats: int) -> None:
    tally_type = seatlib.tally.detect_tally_type(votes)
    if tally_type is seatlib.tally.Order:
        n_ballots = len(votes)
        candidates = seatlib.tally.all_ranked_candidates(votes)
    else:
        candidates = list(votes.keys())
        if tally_type is seatlib.tally.Simple:
            n_ballots = sum(votes.values())
        else:
            n_ballots = max(sum(histogram) for histogram in votes.values())
    print(f'Received {n_ballots} {TALLY_TYPE_NAMES[tally_type]} ballots')
    print(f'Awarding {n_seats} seats')
    print(f'{len(candidates)} candidates:')
    for cand in candidates:
        print(' ' * 10 + str(cand))


def show_seats(result: Dict[Any, int]) -> None:
    """Show the seat mapping, one candidate per line."""
    if not result:
        print('Nobody elected')
        return
    left_col = [str(cand) for cand in result.keys()]
    n_just_chars = len(max(left_col, key=len))
    for left, n_seats in zip(left_col, result.values()):
        print(left.ljust(n_just_chars), ' ', n_seats)


def run_system(att_system: AttributionSystem,
               votes: Any,
               n_seats: int,
               **kwargs) -> Optional[Dict[Any, Number]]:
    """Attribute seats by a single system and show the results."""
    print(f'Attributing seats by {att_system.name}')
    try:
        result = att_system.attribute(votes, n_seats, **kwargs)
    except AttributionFailure as fail:
        print(f'Attribution failed: {fail}')
        return None
    show_seats(result)
    return result


def cli(argv: Optional[List[str]] = None) -> None:
    args = argparser.parse_args(argv)
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        main(**vars(args))


if __name__ == '__main__':
    cli()
