#!/usr/bin/env python3
"""
Unit tests for the logging formatter and worker filter.
"""

import logging
import os
import unittest
from unittest.mock import patch
from archive.utility import MultiLineFormatter, GunicornWorkerFilter

def make_record(message):
    return logging.LogRecord("archive", logging.INFO, __file__, 1, message, None, None)

class TestMultiLineFormatter(unittest.TestCase):

    def setUp(self):
        self.formatter = MultiLineFormatter("%(levelname)s %(name)s | %(message)s")

    def test_single_line(self):
        self.assertEqual(self.formatter.format(make_record("hello")), "INFO archive | hello")

    def test_every_line_gets_prefix(self):
        formatted = self.formatter.format(make_record("first\nsecond\nthird"))
        self.assertEqual(formatted.split("\n"), [
            "INFO archive | first",
            "INFO archive | second",
            "INFO archive | third",
        ])

class TestGunicornWorkerFilter(unittest.TestCase):

    def test_worker_id(self):
        record = make_record("x")
        with patch.dict(os.environ, {"GUNICORN_WORKER_ID": "3"}):
            self.assertTrue(GunicornWorkerFilter().filter(record))
        self.assertEqual(record.worker_id, "worker3")

    def test_falls_back_to_pid(self):
        record = make_record("x")
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("GUNICORN_WORKER_ID", None)
            GunicornWorkerFilter().filter(record)
        self.assertEqual(record.worker_id, f"PID {os.getpid()}")

if __name__ == '__main__':
    unittest.main()
