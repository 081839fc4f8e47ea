#!/usr/bin/env python
"""Partition primitives.

Both partitioners rearrange the half-open range ``[low, high)`` of a
mutable sequence in place and return the split index ``p``. On return
the pivot value rests at ``seq[p]``, every element of ``[low, p)`` is
less than or equal to it and every element of ``(p, high)`` is greater
than or equal to it. Only swaps are used; nothing outside the range is
touched.

The caller must pass a range holding at least two elements. Shorter or
out of bounds ranges raise RangeError before the sequence is modified.
"""

import operator

from qsortlib import options

PIVOT_POLICIES = ('last', 'first', 'middle', 'median3')

class RangeError(ValueError):
    """Raised when a range violates 0 <= low <= high <= len(seq)"""
    pass

def _identity(value):
    return value

def _as_index(name, index):
    if isinstance(index, bool):
        raise RangeError('{0} must be an integer, not {1!r}'.format(name, index))
    try:
        return operator.index(index)
    except TypeError:
        raise RangeError('{0} must be an integer, not {1!r}'.format(name, index))

def check_range(seq, low, high, minimum=0):
    """Validate the range [low, high) of seq and return it as plain ints.

    Any object with __index__ is accepted as an index, bool is not.
    minimum is the smallest number of elements the range must hold.
    Nothing is clamped: every violation raises RangeError.
    """
    low = _as_index('low', low)
    high = _as_index('high', high)
    length = len(seq)
    if low < 0 or high > length or low > high:
        raise RangeError('invalid range [{0}, {1}) for sequence of length {2}'
                         .format(low, high, length))
    if high - low < minimum:
        raise RangeError('range [{0}, {1}) holds {2} elements, at least {3} required'
                         .format(low, high, high - low, minimum))
    return low, high

def choose_pivot(seq, low, high, policy='last', key=None):
    """Return the index of the pivot element for policy."""
    if policy == 'last':
        return high - 1
    if policy == 'first':
        return low
    middle = low + (high - low) // 2
    if policy == 'middle':
        return middle
    if policy == 'median3':
        key = key or _identity
        candidates = sorted((low, middle, high - 1), key=lambda i: key(seq[i]))
        return candidates[1]
    raise ValueError('unknown pivot policy {0!r}, expected one of {1}'
                     .format(policy, ', '.join(PIVOT_POLICIES)))

def partition(seq, low, high, key=None, pivot='last'):
    """Lomuto partition of seq[low:high] in place; returns the split index.

    The pivot element picked by the pivot policy is moved to high - 1
    and the range is scanned once, moving every element whose key is
    <= the pivot key below the boundary. The pivot is then swapped onto
    the boundary. Elements equal to the pivot all end up left of it, so
    a range of equal keys splits at high - 1.

    >>> a = [5, 3, 8, 4, 2]
    >>> partition(a, 0, len(a))
    0
    >>> a
    [2, 3, 8, 4, 5]
    """
    low, high = check_range(seq, low, high, minimum=2)
    key = key or _identity
    last = high - 1
    chosen = choose_pivot(seq, low, high, pivot, key)
    if chosen != last:
        seq[chosen], seq[last] = seq[last], seq[chosen]
    pivot_key = key(seq[last])

    boundary = low
    for i in range(low, last):
        if key(seq[i]) <= pivot_key:
            seq[i], seq[boundary] = seq[boundary], seq[i]
            boundary += 1
    seq[boundary], seq[last] = seq[last], seq[boundary]

    if options.check_invariants:
        assert is_partitioned(seq, low, boundary, high, key), \
            'partition of [{0}, {1}) broken at {2}'.format(low, high, boundary)
    return boundary

def hoare_partition(seq, low, high, key=None):
    """Hoare partition of seq[low:high] in place; returns the split index.

    The middle element is the pivot. It is parked at low, where it
    stops the downward scan, and moved onto the split once the two
    cursors have crossed. Elements equal to the pivot stop both cursors
    and are swapped, which keeps runs of equal keys balanced.
    """
    low, high = check_range(seq, low, high, minimum=2)
    key = key or _identity
    middle = low + (high - low) // 2
    seq[low], seq[middle] = seq[middle], seq[low]
    pivot_key = key(seq[low])

    i = low
    j = high
    while True:
        i += 1
        while i < high and key(seq[i]) < pivot_key:
            i += 1
        j -= 1
        while j > low and key(seq[j]) > pivot_key:
            j -= 1
        if i >= j:
            break
        seq[i], seq[j] = seq[j], seq[i]
    seq[low], seq[j] = seq[j], seq[low]

    if options.check_invariants:
        assert is_partitioned(seq, low, j, high, key), \
            'hoare partition of [{0}, {1}) broken at {2}'.format(low, high, j)
    return j

PARTITIONERS = {
    'lomuto': partition,
    'hoare': hoare_partition,
}

def get_partitioner(scheme):
    try:
        return PARTITIONERS[scheme]
    except KeyError:
        raise ValueError('unknown partition scheme {0!r}, expected one of {1}'
                         .format(scheme, ', '.join(sorted(PARTITIONERS))))

def is_sorted(seq, low=0, high=None, key=None):
    """True if seq[low:high] is in non-decreasing order."""
    if high is None:
        high = len(seq)
    low, high = check_range(seq, low, high)
    key = key or _identity
    return all(key(seq[i]) <= key(seq[i + 1]) for i in range(low, high - 1))

def is_partitioned(seq, low, split, high, key=None):
    """True if split partitions seq[low:high] around seq[split]."""
    low, high = check_range(seq, low, high, minimum=1)
    split = _as_index('split', split)
    if not low <= split < high:
        raise RangeError('split index {0!r} outside [{1}, {2})'.format(split, low, high))
    key = key or _identity
    pivot_key = key(seq[split])
    if any(not key(seq[i]) <= pivot_key for i in range(low, split)):
        return False
    return all(key(seq[i]) >= pivot_key for i in range(split + 1, high))
