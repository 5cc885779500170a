#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command line tests for file_splitter
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from file_splitter import build_parser, main


class TestFileSplitterCli(unittest.TestCase):
    """file_splitter.main"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.data = os.urandom(2500)
        self.input_path = os.path.join(self.test_dir, "video.mp4")
        with open(self.input_path, 'wb') as f:
            f.write(self.data)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_parser_defaults(self):
        args = build_parser().parse_args(["--split", "a.bin"])
        self.assertEqual(args.size, "10MB")
        self.assertEqual(args.output, "")
        self.assertFalse(args.quiet)

    def test_split_requires_operation(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([])

    def test_split_and_join(self):
        """Split then join from .001 restores the file"""
        base = os.path.join(self.test_dir, "out.mp4")
        self.assertEqual(main(["--split", self.input_path, "--size", "1KB", "--output", base, "-q"]), 0)
        self.assertEqual(sorted(os.listdir(self.test_dir)),
                         ["out.mp4.000", "out.mp4.001", "out.mp4.002", "video.mp4"])

        self.assertEqual(main(["--join", base + ".001", "-q"]), 0)
        with open(base, 'rb') as f:
            self.assertEqual(f.read(), self.data)

    def test_verbose_lists_segments(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            main(["--split", self.input_path, "--size", "KB1", "-q"])
            self.assertEqual(stdout.getvalue(), "")

            main(["--split", self.input_path, "--size", "K1B", "--output",
                  os.path.join(self.test_dir, "v"), "-v"])
        self.assertIn("Created 3 segments", stdout.getvalue())

    def test_error_exit_status(self):
        """Errors are printed to stderr with a non-zero status"""
        with patch('sys.stderr', new_callable=io.StringIO) as stderr:
            status = main(["--split", self.input_path, "--size", "5MB", "-q"])
        self.assertEqual(status, 1)
        self.assertIn("Error:", stderr.getvalue())
        self.assertEqual(os.listdir(self.test_dir), ["video.mp4"])

    def test_join_rejects_first_segment(self):
        main(["--split", self.input_path, "--size", "1KB", "-q"])
        with patch('sys.stderr', new_callable=io.StringIO) as stderr:
            status = main(["--join", self.input_path + ".000", "-q"])
        self.assertEqual(status, 1)
        self.assertIn("Invalid input file:", stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
