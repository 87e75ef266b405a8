'''Electoral thresholds for attributions over simple tallies.

A threshold excludes the candidates that did not receive a given fraction of
all votes before the seats are attributed. If nobody reaches the threshold,
a contingency attribution receives the original tally instead.
'''

import functools
import logging
from typing import Dict, Union
from numbers import Number

import seatlib.evaluate.core
from seatlib.evaluate.core import Attribution, AttributionFailure
from seatlib.tally import Candidate


logger = logging.getLogger(__name__)


class _Unthresholded:
    def __repr__(self):
        return 'UNTHRESHOLDED'


UNTHRESHOLDED = _Unthresholded()
'''Contingency marker: retry the same attribution without the threshold.'''


def passing_threshold(votes: Dict[Candidate, Number],
                      threshold: Number,
                      ) -> Dict[Candidate, Number]:
    '''Select the candidates reaching the threshold fraction of all votes.

    Candidates with votes equal to the threshold pass.

    :param votes: Simple tally.
    :param threshold: Fraction of all votes needed to pass.
    :returns: The simple tally restricted to the passing candidates.
    '''
    min_votes = threshold * sum(votes.values())
    return {
        cand: n_votes for cand, n_votes in votes.items()
        if n_votes >= min_votes
    }


def add_threshold(attribution: Attribution,
                  threshold: Number,
                  contingency: Union[
                      Attribution, None, _Unthresholded
                  ] = UNTHRESHOLDED,
                  ) -> Attribution:
    '''Add an electoral threshold to an attribution over simple tallies.

    The resulting attribution only passes the candidates that received at least
    the threshold fraction of all votes to the wrapped attribution. If no
    candidate reaches the threshold, the whole original tally is given to the
    contingency. Extra keyword arguments are passed through to either of them.

    A zero threshold excludes nobody, so the attribution is returned unchanged.

    :param attribution: The attribution to wrap; its ``n_seats`` attribute
        (if any) is carried over to the result.
    :param threshold: Fraction of all votes needed to pass, between 0 and 1.
    :param contingency: The attribution to use when nobody passes. None means
        to raise :class:`AttributionFailure`; the default,
        :data:`UNTHRESHOLDED`, means to use the wrapped attribution itself.
    '''
    seatlib.evaluate.core.check_fraction(threshold)
    if threshold == 0:
        return attribution
    if contingency is UNTHRESHOLDED:
        contingency = attribution

    @functools.wraps(attribution)
    def thresholded(votes: Dict[Candidate, Number], **kwargs
                    ) -> Dict[Candidate, int]:
        passing = passing_threshold(votes, threshold)
        if passing:
            return attribution(passing, **kwargs)
        if contingency is None:
            raise AttributionFailure(
                f'no candidate reached the threshold of {threshold}'
            )
        logger.info(
            'no candidate reached the threshold of %s, using contingency',
            threshold
        )
        return contingency(votes, **kwargs)

    return thresholded
