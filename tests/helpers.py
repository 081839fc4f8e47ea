import sys
import unittest
import importlib
from coverage import coverage
import inspect
import os

class CoverageTestCase(unittest.TestCase):
    def setUp(self):
        filename = ".coverage." + os.path.basename(inspect.getmodule(self).__file__) + "." + self.__class__.__name__
        self.cov = coverage(data_file=filename, source=["qsortlib"], cover_pylib=True)
        self.cov.start()
        
    def tearDown(self):
        self.cov.stop()
        self.cov.save()

def reimport(name):
    """Import a fresh copy of module name, then put the original back.

    The parent package keeps the attribute it had before the call.
    """
    package, _, attr = name.rpartition('.')
    parent = sys.modules.get(package)
    missing = object()
    previous = getattr(parent, attr, missing)
    saved = sys.modules.pop(name)
    try:
        return importlib.import_module(name)
    finally:
        sys.modules[name] = saved
        if parent is not None:
            if previous is missing:
                delattr(parent, attr)
            else:
                setattr(parent, attr, previous)

def random_list(rng, n, low=-50, high=50):
    return [rng.randint(low, high) for _ in range(n)]
