"""
Test cases for the main.py entry point.
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import pandas as pd

import main

CA_1 = "CA\t1428300000000\t9prc\t93.0\t0.0\t100.0\t0.0\t95644.0\t277.58716\n"
CA_2 = "CA\t1430308800000\t9prc\t4.0\t0.0\t100.0\t0.0\t99226.0\t282.63037\n"


class TestMain(unittest.TestCase):
    """Test cases for argument parsing and the main function."""

    def setUp(self):
        """Set up an input file and silence logging configuration."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

        self.data = os.path.join(self.tmp_dir.name, "data_ca.tdv")
        with open(self.data, "w", encoding="utf-8") as f:
            f.write(CA_1 + CA_2)

        self.missing = os.path.join(self.tmp_dir.name, "missing.tdv")

        patcher = patch("main.config_logger")
        self.mock_config_logger = patcher.start()
        self.addCleanup(patcher.stop)

    def run_main(self, argv):
        """Run main and capture what it prints."""
        out = io.StringIO()
        with patch("logging.error"), redirect_stdout(out):
            status = main.main(argv)
        return status, out.getvalue()

    def test_get_args(self):
        """Test defaults of the parsed arguments."""
        with patch.dict(os.environ, {}, clear=True):
            args = main.get_args([self.data])

        self.assertEqual(args.files, [self.data])
        self.assertFalse(args.fail_fast)
        self.assertEqual(args.timezone, "UTC")
        self.assertEqual(args.tz.key, "UTC")
        self.assertIsNone(args.csv)

    def test_get_args_from_environment(self):
        """Test that the environment provides defaults for debug and timezone."""
        env = {"CLIMATE_DEBUG": "true", "CLIMATE_REPORT_TIMEZONE": "Europe/Madrid"}
        with patch.dict(os.environ, env, clear=True):
            args = main.get_args([self.data])

        self.assertTrue(args.debug)
        self.assertEqual(args.tz.key, "Europe/Madrid")

    def test_get_args_requires_files(self):
        """Test that at least one file must be given."""
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as context:
                main.get_args([])

        self.assertEqual(context.exception.code, 2)

    def test_get_args_unknown_timezone(self):
        """Test that an unknown timezone is a usage error."""
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                main.get_args([self.data, "--timezone", "Mars/Olympus_Mons"])

    def test_main_prints_report(self):
        """Test that main prints the report and succeeds."""
        status, output = self.run_main([self.data, "--timezone", "UTC"])

        self.assertEqual(status, 0)
        self.assertTrue(output.startswith("Regions found: CA\n"))
        self.assertIn("Number of Records: 2\n", output)
        self.assertIn("Average Humidity: 48.5%\n", output)
        self.mock_config_logger.assert_called_once_with(debug=False)

    def test_main_writes_csv(self):
        """Test the CSV export of the region table."""
        csv_path = os.path.join(self.tmp_dir.name, "summary.csv")
        status, _ = self.run_main([self.data, "--csv", csv_path])

        self.assertEqual(status, 0)
        df = pd.read_csv(csv_path, keep_default_na=False)
        self.assertEqual(list(df["region_code"]), ["CA"])
        self.assertEqual(int(df.loc[0, "num_records"]), 2)

    def test_main_missing_file_continues(self):
        """Test that one missing file does not stop the others."""
        status, output = self.run_main([self.missing, self.data])

        self.assertEqual(status, 0)
        self.assertIn("-- Region: CA --", output)

    def test_main_fail_fast(self):
        """Test that --fail-fast aborts with an error status and no report."""
        status, output = self.run_main([self.missing, self.data, "--fail-fast"])

        self.assertEqual(status, 1)
        self.assertEqual(output, "")

    def test_main_all_files_missing(self):
        """Test that an error status is returned when no file could be read."""
        status, output = self.run_main([self.missing])

        self.assertEqual(status, 1)
        self.assertEqual(output, "Regions found: \n")


if __name__ == "__main__":
    unittest.main()
