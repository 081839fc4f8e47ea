#!/usr/bin/env python
"""Module level settings, read at call time."""

# If True, every partition step and every sorted range is verified
check_invariants = False

# Ranges shorter than this are sorted by the calling thread
parallel_threshold = 2048

# Number of partition levels done before handing ranges to workers
parallel_depth = 4

# Worker threads; None lets ThreadPoolExecutor pick
max_workers = None
