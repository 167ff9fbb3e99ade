"""
Run all tests in the project.
This script is designed to be run from the command line.
"""

import unittest
import sys
import logging

logging.disable(logging.CRITICAL)  # Disable logging for test runs


def run_all_tests():
    """
    Run all tests in the project.

    Discovers and runs all test cases in the 'climate/test' directory.

    Returns:
        int: Exit code - 0 if all tests passed, 1 otherwise.
    """
    test_loader = unittest.defaultTestLoader

    test_suite = test_loader.discover("climate/test", pattern="test_*.py", top_level_dir=".")

    test_runner = unittest.TextTestRunner(verbosity=1)

    result = test_runner.run(test_suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
