"""
cgv2 Test Suite
Unit tests for the cgroup v2 codecs, domain types and views

The suites never touch /sys/fs/cgroup: every view is pointed at a temporary
directory filled with kernel-shaped text. Set CGV2_TEST_LOG=DEBUG to see the
accessor and codec debug lines while the tests run.
"""

import sys
import os
import unittest
import logging

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

# Add cgv2 to path for imports
sys.path.insert(0, os.path.dirname(TESTS_DIR))

logging.basicConfig(
    level=os.environ.get('CGV2_TEST_LOG', 'WARNING').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)


def run_all_tests(pattern='test_*.py', verbosity=2):
    """Discover and run the cgv2 suites, independent of the working directory"""
    suite = unittest.TestLoader().discover(TESTS_DIR, pattern=pattern,
                                           top_level_dir=os.path.dirname(TESTS_DIR))
    return unittest.TextTestRunner(verbosity=verbosity).run(suite)


if __name__ == '__main__':
    sys.exit(0 if run_all_tests().wasSuccessful() else 1)
