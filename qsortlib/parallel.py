#!/usr/bin/env python
"""Thread-parallel quicksort.

The calling thread partitions the range a few levels deep. The
resulting sub-ranges are disjoint, so each is sorted by a worker thread
without any locking. All workers are joined before the call returns.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from qsortlib import debug as log
from qsortlib import options
from qsortlib.sorting import _setup, _verify, quicksort

logger = logging.getLogger('qsortlib.parallel')

def split_ranges(partition_range, low, high, depth, threshold):
    """Partition [low, high) breadth-first and return the pending ranges.

    Ranges of fewer than two elements are already sorted and dropped.
    """
    ranges = [(low, high)]
    for level in range(depth):
        pending = []
        for start, end in ranges:
            if end - start < threshold:
                pending.append((start, end))
                continue
            p = partition_range(start, end)
            pending.append((start, p))
            pending.append((p + 1, end))
        ranges = [(start, end) for start, end in pending if end - start > 1]
    return ranges

def parallel_quicksort(seq, low=0, high=None, key=None, scheme='lomuto', pivot='last',
                       max_workers=None, depth=None, threshold=None):
    """Sort seq[low:high] in place with a pool of worker threads.

    Same contract and result as quicksort(). depth, threshold and
    max_workers default to the values in qsortlib.options.
    """
    low, high, split = _setup(seq, low, high, scheme, pivot)
    if depth is None:
        depth = options.parallel_depth
    if threshold is None:
        threshold = options.parallel_threshold
    if max_workers is None:
        max_workers = options.max_workers
    threshold = max(threshold, 2)

    if high - low < threshold:
        quicksort(seq, low, high, key=key, scheme=scheme, pivot=pivot)
        return

    ranges = split_ranges(lambda start, end: split(start, end, key), low, high, depth, threshold)
    log.debug('dispatching {0} ranges of [{1}, {2})'.format(len(ranges), low, high),
              log=logger)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(quicksort, seq, start, end, key, scheme, pivot)
                   for start, end in ranges]
    # The executor has joined every worker; re-raise the first failure
    for future in futures:
        future.result()
    _verify(seq, low, high, key)
