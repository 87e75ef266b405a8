"""Named attribution systems ready to be built for a number of seats.

The systems are grouped by the tally type they accept. The command line tool
lets the user choose among them by their keys.
"""

import inspect
from typing import Any, Callable, Dict, Optional

import seatlib.tally
import seatlib.evaluate.auxiliary
import seatlib.evaluate.cardinal
import seatlib.evaluate.condorcet
import seatlib.evaluate.core
import seatlib.evaluate.positional
import seatlib.evaluate.proportional
import seatlib.evaluate.sequential
from seatlib.evaluate.core import Attribution


class AttributionSystem:
    """A named attribution system. Wraps an attribution factory.

    :param name: Human-readable name of the system.
    :param factory: A factory function taking the number of seats as its first
        argument and returning an attribution.
    :param tally_type: The tally type the attributions accept; one of the
        classes in :mod:`seatlib.tally`.
    :param options: Fixed keyword arguments to the factory.
    """
    def __init__(self,
                 name: str,
                 factory: Callable[..., Attribution],
                 tally_type: type,
                 **options):
        self.name = name
        self.factory = factory
        self.tally_type = tally_type
        self.options = options

    def __repr__(self):
        return f'<AttributionSystem {self.name!r}>'

    def accepts(self, option: str) -> bool:
        """Return True if the factory takes the given keyword argument.

        Options fixed by the system definition are not accepted.
        """
        if option in self.options:
            return False
        return option in inspect.signature(self.factory).parameters

    def build(self, n_seats: int, **kwargs) -> Attribution:
        """Build the attribution for the given number of seats.

        :param n_seats: Number of seats to award.
        :param kwargs: Further keyword arguments to the factory, overriding
            the fixed options of the system.
        """
        return self.factory(n_seats, **{**self.options, **kwargs})

    def attribute(self, votes: Any, n_seats: int, **kwargs) -> Dict[Any, int]:
        """Build the attribution and apply it to the tally at once."""
        return self.build(n_seats, **kwargs)(votes)


SIMPLE_SYSTEMS = {
    'plurality': AttributionSystem(
        'Plurality', seatlib.evaluate.core.plurality, seatlib.tally.Simple
    ),
    'majority': AttributionSystem(
        'Absolute Majority', seatlib.evaluate.core.super_majority,
        seatlib.tally.Simple, threshold=.5
    ),
    'd_hondt': AttributionSystem(
        'D\'Hondt Divisor', seatlib.evaluate.proportional.jefferson,
        seatlib.tally.Simple
    ),
    'sainte_lague': AttributionSystem(
        'Sainte-Lague Divisor', seatlib.evaluate.proportional.webster,
        seatlib.tally.Simple
    ),
    'huntington_hill': AttributionSystem(
        'Huntington-Hill Divisor', seatlib.evaluate.proportional.huntington_hill,
        seatlib.tally.Simple
    ),
    'imperiali': AttributionSystem(
        'Imperiali Divisor', seatlib.evaluate.proportional.divisor_method,
        seatlib.tally.Simple, divisor_function='imperiali'
    ),
    'danish': AttributionSystem(
        'Danish Divisor', seatlib.evaluate.proportional.divisor_method,
        seatlib.tally.Simple, divisor_function='danish'
    ),
    'hare': AttributionSystem(
        'Hare Largest Remainder', seatlib.evaluate.proportional.hamilton,
        seatlib.tally.Simple
    ),
    'lottery': AttributionSystem(
        'Lottery', seatlib.evaluate.auxiliary.randomize, seatlib.tally.Simple
    ),
}
ORDER_SYSTEMS = {
    'irv': AttributionSystem(
        'Instant Runoff', seatlib.evaluate.sequential.instant_runoff,
        seatlib.tally.Order
    ),
    'borda': AttributionSystem(
        'Borda', seatlib.evaluate.positional.borda_count, seatlib.tally.Order
    ),
    'dowdall': AttributionSystem(
        'Dowdall', seatlib.evaluate.positional.borda_count,
        seatlib.tally.Order, rank_scorer='dowdall'
    ),
    'condorcet': AttributionSystem(
        'Condorcet', seatlib.evaluate.condorcet.condorcet, seatlib.tally.Order
    ),
}
SCORES_SYSTEMS = {
    'score_mean': AttributionSystem(
        'Mean Score', seatlib.evaluate.cardinal.average_score,
        seatlib.tally.Scores
    ),
    'score_median': AttributionSystem(
        'Median Score', seatlib.evaluate.cardinal.median_score,
        seatlib.tally.Scores
    ),
}

SYSTEMS = {
    seatlib.tally.Simple: SIMPLE_SYSTEMS,
    seatlib.tally.Order: ORDER_SYSTEMS,
    seatlib.tally.Scores: SCORES_SYSTEMS,
}


def get_available_systems(tally_type: Optional[type] = None,
                          ) -> Dict[str, AttributionSystem]:
    """Return the systems accepting the given tally type, by their keys.

    :param tally_type: One of the classes in :mod:`seatlib.tally`. If None,
        systems for all tally types are returned; their keys are unique.
    """
    if tally_type is None:
        return {
            key: system
            for systems in SYSTEMS.values()
            for key, system in systems.items()
        }
    try:
        return SYSTEMS[tally_type].copy()
    except KeyError:
        raise ValueError(f'unknown tally type: {tally_type!r}')
