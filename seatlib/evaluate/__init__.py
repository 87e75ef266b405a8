'''Attribute seats from election tallies.

Every module of this subpackage provides factory functions building
*attributions*: functions that take a tally (and extra keyword arguments
passed along by combinators) and return a dictionary mapping candidates to
the number of seats they obtained. Candidates with no seats are left out.

-   :mod:`core` holds the shared machinery, the failure types and the
    majority methods (plurality, supermajority).
-   :mod:`threshold` adds electoral thresholds with contingencies.
-   :mod:`proportional` holds the divisor, rank-index and largest remainder
    methods, including bounded ones that choose the number of seats.
-   :mod:`sequential`, :mod:`positional` and :mod:`condorcet` hold the
    methods over ranked ballots: instant runoff, Borda count and Condorcet.
-   :mod:`cardinal` holds the methods over grade histograms.
-   :mod:`auxiliary` holds the weighted lottery.

The attributions signal expected limitations of the methods (e.g. nobody
has a majority) by :class:`core.AttributionFailure`. Many factories take
a *contingency* attribution that receives the tally in such cases instead.
'''

from seatlib.evaluate.core import *    # noqa
