#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Run the file divider tests under coverage
"""

import os
import sys
import unittest

import coverage

# Current directory on the path so the flat modules import
sys.path.insert(0, os.path.abspath('.'))


def run_tests_with_coverage():
    """
    Run the unit tests and print a coverage report
    """
    cov = coverage.Coverage(
        source=['size_units', 'segment_names', 'file_access', 'file_divider', 'file_splitter'],
        omit=['*/site-packages/*', '*/dist-packages/*', '*/__pycache__/*']
    )
    cov.start()

    loader = unittest.TestLoader()
    suite = loader.discover('.', pattern='test_*.py')

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    cov.stop()
    cov.save()

    print('\nCoverage Summary:')
    cov.report()

    cov.html_report(directory='htmlcov')
    print('HTML coverage report generated in htmlcov/ directory')

    return result.wasSuccessful()


if __name__ == '__main__':
    success = run_tests_with_coverage()
    sys.exit(0 if success else 1)
