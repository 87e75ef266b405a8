"""Seatlib - a library for attributing seats from election tallies.

Seatlib turns an already aggregated tally of ballots into a seat mapping: a
dictionary giving the number of seats each candidate (a person or a party)
obtains. It covers the common families of seat attribution:

-   Proportional methods, either based on divisors or rank indices
    (D'Hondt, Sainte-Laguë, Huntington-Hill) or on the largest remainder
    (Hamilton/Hare), including a bounded variant that picks the house size
    itself to minimize disproportionality.
-   Single-winner methods that award all seats to one candidate: plurality,
    supermajority, instant runoff, Borda count, Condorcet, average and median
    score.
-   A weighted lottery.

The tally types live in the :mod:`tally` module. Attributions are built by
factory functions in the modules of the :mod:`evaluate` subpackage; each
returns a plain function taking a tally and returning the seat mapping.
Pluggable pieces of those factories (divisors, rank indices, rank scores)
are found in the :mod:`component` subpackage, and disproportionality metrics
in the :mod:`measure` module. The :mod:`system` module gathers named,
ready-made attribution systems, and the :mod:`io` subpackage reads and writes
tally files.
"""
