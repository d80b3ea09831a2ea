#!/usr/bin/env python3
"""
Unit tests for the healthcheck.py operator script.
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch, MagicMock
import requests
import healthcheck

HEALTHY = {
    "status": "healthy",
    "version": "1.0.0",
    "environment": "production",
    "checks": {"storage": {"status": "healthy", "message": "ok", "details": {"post_files": 2}}}
}

def run(*argv):
    output = io.StringIO()
    with redirect_stdout(output):
        code = healthcheck.main(list(argv))
    return code, output.getvalue()

class TestHealthcheckScript(unittest.TestCase):

    @patch("healthcheck.requests.get")
    def test_healthy(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200, json=MagicMock(return_value=HEALTHY))
        code, output = run("localhost:3000/")
        self.assertEqual(code, 0)
        mock_get.assert_called_once_with("http://localhost:3000/api/health", timeout=10)
        self.assertIn("post_files: 2", output)

    @patch("healthcheck.requests.get")
    def test_unhealthy(self, mock_get):
        body = dict(HEALTHY, status="unhealthy")
        mock_get.return_value = MagicMock(status_code=503, json=MagicMock(return_value=body))
        self.assertEqual(run()[0], 1)

    @patch("healthcheck.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError()
        self.assertEqual(run("http://archive.test")[0], 4)

    @patch("healthcheck.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = MagicMock(status_code=502, text="<html>", json=MagicMock(side_effect=ValueError))
        self.assertEqual(run()[0], 3)

if __name__ == '__main__':
    unittest.main()
