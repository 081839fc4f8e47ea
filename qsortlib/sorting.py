#!/usr/bin/env python
"""In-place quicksort drivers."""

import logging

from qsortlib import debug as log
from qsortlib import options
from qsortlib.partitioning import (PIVOT_POLICIES, check_range, get_partitioner,
                                is_sorted)

logger = logging.getLogger('qsortlib.sorting')

def _setup(seq, low, high, scheme, pivot):
    if high is None:
        high = len(seq)
    low, high = check_range(seq, low, high)
    partitioner = get_partitioner(scheme)
    if pivot not in PIVOT_POLICIES:
        raise ValueError('unknown pivot policy {0!r}, expected one of {1}'
                         .format(pivot, ', '.join(PIVOT_POLICIES)))
    if scheme == 'lomuto':
        def split(low, high, key):
            return partitioner(seq, low, high, key=key, pivot=pivot)
    elif pivot != 'last':
        raise ValueError('pivot policy {0!r} only applies to the lomuto scheme'
                         .format(pivot))
    else:
        def split(low, high, key):
            return partitioner(seq, low, high, key=key)
    return low, high, split

def _verify(seq, low, high, key):
    if options.check_invariants:
        assert is_sorted(seq, low, high, key), \
            'range [{0}, {1}) not sorted'.format(low, high)

def quicksort(seq, low=0, high=None, key=None, scheme='lomuto', pivot='last'):
    """Sort seq[low:high] in place.

    quicksort(seq) sorts the whole sequence. Elements outside
    [low, high) are never touched. The sort is not stable.

    scheme selects the partitioner ('lomuto' or 'hoare'); pivot selects
    the pivot policy of the lomuto partitioner. Raises RangeError for an
    invalid range and ValueError for an unknown scheme or policy.
    """
    low, high, split = _setup(seq, low, high, scheme, pivot)
    _sort(split, low, high, key)
    _verify(seq, low, high, key)

def _sort(split, low, high, key):
    # Recurse into the shorter side, loop on the longer one
    while high - low > 1:
        p = split(low, high, key)
        if logger.isEnabledFor(logging.DEBUG):
            log.debug('partition [{0}, {1}) -> {2}'.format(low, high, p), log=logger)
        if p - low < high - (p + 1):
            _sort(split, low, p, key)
            low = p + 1
        else:
            _sort(split, p + 1, high, key)
            high = p

def quicksort_iterative(seq, low=0, high=None, key=None, scheme='lomuto', pivot='last'):
    """Sort seq[low:high] in place using an explicit stack of ranges.

    Same contract and result as quicksort().
    """
    low, high, split = _setup(seq, low, high, scheme, pivot)
    stack = [(low, high)]
    while stack:
        start, end = stack.pop()
        if end - start <= 1:
            continue
        p = split(start, end, key)
        if logger.isEnabledFor(logging.DEBUG):
            log.debug('partition [{0}, {1}) -> {2}'.format(start, end, p), log=logger)
        left = (start, p)
        right = (p + 1, end)
        # The smaller range is popped first, keeping the stack short
        if p - start < end - (p + 1):
            stack.append(right)
            stack.append(left)
        else:
            stack.append(left)
            stack.append(right)
    _verify(seq, low, high, key)
