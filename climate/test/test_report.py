"""
Test cases for the report.py functions.
"""

import unittest
import zoneinfo

from climate.builders import RegionBuilder
from climate.parser import parse_line
from climate.report import format_timestamp, render_report


class TestReport(unittest.TestCase):
    """Test cases for the text report."""

    def setUp(self):
        """Set up a builder holding the two reference California records."""
        self.utc = zoneinfo.ZoneInfo("UTC")
        self.builder = RegionBuilder()
        self.builder.ingest(
            parse_line(
                "CA\t1428300000000\t9prc\t93.0\t0.0\t100.0\t0.0\t95644.0\t277.58716\n"
            )
        )
        self.builder.ingest(
            parse_line(
                "CA\t1430308800000\t9prc\t4.0\t1.0\t100.0\t1.0\t99226.0\t282.63037\n"
            )
        )

    def test_format_timestamp(self):
        """Test the ctime layout, including the space padded day of month."""
        self.assertEqual(
            format_timestamp(1428300000, self.utc), "Mon Apr  6 06:00:00 2015"
        )
        self.assertEqual(
            format_timestamp(1430308800, self.utc), "Wed Apr 29 12:00:00 2015"
        )

    def test_format_timestamp_in_timezone(self):
        """Test that timestamps are rendered in the requested timezone."""
        madrid = zoneinfo.ZoneInfo("Europe/Madrid")
        self.assertEqual(
            format_timestamp(1428300000, madrid), "Mon Apr  6 08:00:00 2015"
        )

    def test_format_timestamp_out_of_range(self):
        """Test that an unrepresentable timestamp is printed as epoch seconds."""
        self.assertEqual(
            format_timestamp(999999999999999, self.utc), "epoch 999999999999999"
        )

    def test_render_report_out_of_range_timestamp(self):
        """Test that the report still renders when an extreme has a huge timestamp."""
        stats = self.builder.regions["CA"]
        stats.max_timestamp = 999999999999999

        report = render_report(self.builder.regions, self.utc)

        self.assertIn("Max Temperature: 49.1F on epoch 999999999999999\n", report)

    def test_render_report(self):
        """Test the full report for a single region."""
        expected = (
            "Regions found: CA\n"
            "-- Region: CA --\n"
            "Number of Records: 2\n"
            "Average Humidity: 48.5%\n"
            "Average Temperature: 44.5F\n"
            "Max Temperature: 49.1F on Wed Apr 29 12:00:00 2015\n"
            "Min Temperature: 40.0F on Mon Apr  6 06:00:00 2015\n"
            "Lightning Strikes: 1\n"
            "Records with Snow Cover: 1\n"
            "Average Cloud Cover: 100.0%\n"
            "---------------------------\n"
        )
        self.assertEqual(render_report(self.builder.regions, self.utc), expected)

    def test_regions_in_first_seen_order(self):
        """Test that regions are listed and rendered in first-seen order."""
        self.builder.ingest(
            parse_line("WA\t1428300000000\tc23n\t50\t0\t10\t0\t101000\t280\n")
        )
        report = render_report(self.builder.regions)

        self.assertTrue(report.startswith("Regions found: CA WA\n"))
        self.assertLess(report.index("-- Region: CA --"), report.index("-- Region: WA --"))

    def test_empty_report(self):
        """Test that no regions renders an empty summary."""
        self.assertEqual(render_report({}), "Regions found: \n")


if __name__ == "__main__":
    unittest.main()
