"""In-place quicksort with a reusable partition primitive."""

from qsortlib.partitioning import (PARTITIONERS, PIVOT_POLICIES, RangeError,
                                   check_range, get_partitioner, hoare_partition,
                                   is_partitioned, is_sorted, partition)
from qsortlib.sorting import quicksort, quicksort_iterative
from qsortlib.parallel import parallel_quicksort

__all__ = ['PARTITIONERS', 'PIVOT_POLICIES', 'RangeError', 'check_range',
           'get_partitioner', 'hoare_partition', 'is_partitioned', 'is_sorted',
           'partition', 'quicksort', 'quicksort_iterative', 'parallel_quicksort']
