#!/usr/bin/python3
"""Sort random numbers with quicksort and print the median."""
import sys
import random
import logging
import qsortlib
from qsortlib import debug

USAGE = "usage: qsort-median [--seed N] [--scheme lomuto|hoare] [--pivot POLICY] " \
        "[--parallel] [--workers N] [-v] <count>"

class UsageException(Exception):
    def __init__(self, msg=None):
        self.msg = msg

def usage(msg=None):
    if msg:
        print(msg, file=sys.stderr)
    print(USAGE, file=sys.stderr)
    sys.exit(2)

def _int_arg(argv, i, option):
    try:
        return int(argv[i])
    except IndexError:
        raise UsageException(option + " needs an integer as an argument")
    except ValueError:
        raise UsageException(option + " needs an integer, got " + repr(argv[i]))

def parse_args(argv):
    """Parse a command line; argv[0] is the program name.

    Returns (count, settings) where settings holds the keyword arguments
    for run() plus 'verbose'.
    """
    settings = {
        'seed': None,
        'scheme': 'lomuto',
        'pivot': 'last',
        'parallel': False,
        'workers': None,
        'verbose': False,
    }
    argv = argv[1:]     # Hide the program name
    i = 0
    while i < len(argv):
        if argv[i] == '--help' or argv[i] == '-h':
            raise UsageException()
        elif argv[i] == '--seed':
            i += 1
            settings['seed'] = _int_arg(argv, i, '--seed')
        elif argv[i] == '--scheme':
            i += 1
            try:
                settings['scheme'] = argv[i]
            except IndexError:
                raise UsageException("--scheme needs a scheme name as an argument")
        elif argv[i] == '--pivot':
            i += 1
            try:
                settings['pivot'] = argv[i]
            except IndexError:
                raise UsageException("--pivot needs a policy name as an argument")
        elif argv[i] == '--parallel':
            settings['parallel'] = True
        elif argv[i] == '--workers':
            i += 1
            settings['workers'] = _int_arg(argv, i, '--workers')
            if settings['workers'] <= 0:
                raise UsageException("--workers must be positive")
        elif argv[i] == '--verbose' or argv[i] == '-v':
            settings['verbose'] = True
        elif argv[i].startswith('-'):
            raise UsageException("Unknown option " + argv[i])
        else:
            break
        i += 1
    else:
        raise UsageException("No count given")

    if settings['scheme'] not in qsortlib.PARTITIONERS:
        raise UsageException("Unknown scheme " + repr(settings['scheme']))
    if settings['pivot'] not in qsortlib.PIVOT_POLICIES:
        raise UsageException("Unknown pivot policy " + repr(settings['pivot']))
    if settings['scheme'] != 'lomuto' and settings['pivot'] != 'last':
        raise UsageException("--pivot only applies to the lomuto scheme")
    if settings['workers'] is not None and not settings['parallel']:
        raise UsageException("--workers only applies with --parallel")

    if len(argv) - i > 1:
        raise UsageException("Too many arguments: " + " ".join(argv[i + 1:]))
    try:
        count = int(argv[i])
    except ValueError:
        raise UsageException("count must be an integer, got " + repr(argv[i]))
    if count <= 0:
        raise UsageException("count must be positive")
    return count, settings

def run(count, seed=None, scheme='lomuto', pivot='last', parallel=False, workers=None):
    """Sort count numbers drawn from [1, 2 * count) and return the median."""
    rng = random.Random(seed)
    values = [rng.randrange(1, 2 * count) for _ in range(count)]
    if parallel:
        qsortlib.parallel_quicksort(values, scheme=scheme, pivot=pivot,
                                    max_workers=workers)
    else:
        qsortlib.quicksort(values, scheme=scheme, pivot=pivot)
    debug.debug("sorted", count, "values")
    return values[count // 2]

def main(argv=None):
    if argv is None:
        argv = sys.argv
    try:
        count, settings = parse_args(argv)
    except UsageException as e:
        usage(e.msg)
    if settings.pop('verbose'):
        debug.setup(logging.DEBUG)
    print(run(count, **settings))

if __name__ == '__main__':
    main()
