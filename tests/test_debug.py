import io
import logging
import unittest
from helpers import CoverageTestCase
from qsortlib import debug

class DebugTestCase(CoverageTestCase):
    def test_prefix_per_line(self):
        with self.assertLogs('qsortlib', level=logging.DEBUG) as cm:
            debug.debug("first\nsecond", 3)
        self.assertEqual(cm.output, ['DEBUG:qsortlib:#first', 'DEBUG:qsortlib:#second 3'])

    def test_info(self):
        log = logging.getLogger('qsortlib.test')
        with self.assertLogs(log, level=logging.INFO) as cm:
            debug.info("a", "b", sep="-", prefix="> ", log=log)
        self.assertEqual(cm.output, ['INFO:qsortlib.test:> a-b'])

    def test_disabled(self):
        log = logging.getLogger('qsortlib.quiet')
        log.setLevel(logging.WARNING)
        try:
            with self.assertLogs('qsortlib', level=logging.DEBUG) as cm:
                debug.debug("dropped", log=log)
                debug.info("dropped", log=log)
                logging.getLogger('qsortlib').debug('kept')
            self.assertEqual(cm.output, ['DEBUG:qsortlib:kept'])
        finally:
            log.setLevel(logging.NOTSET)

    def test_setup(self):
        stream = io.StringIO()
        logger = logging.getLogger('qsortlib')
        level = logger.level
        handler = debug.setup(logging.DEBUG, stream)
        try:
            debug.debug("hello")
        finally:
            logger.removeHandler(handler)
            logger.setLevel(level)
        self.assertEqual(stream.getvalue(), 'qsortlib: #hello\n')

    def test_setup_twice(self):
        first, second = io.StringIO(), io.StringIO()
        logger = logging.getLogger('qsortlib')
        level = logger.level
        handlers = list(logger.handlers)
        handler = debug.setup(logging.DEBUG, first)
        try:
            self.assertIs(debug.setup(logging.DEBUG, second), handler)
            self.assertEqual(len(logger.handlers), len(handlers) + 1)
            debug.debug("once")
        finally:
            logger.removeHandler(handler)
            logger.setLevel(level)
        self.assertEqual(first.getvalue(), '')
        self.assertEqual(second.getvalue(), 'qsortlib: #once\n')

if __name__ == '__main__':
    unittest.main()
