"""
Climate observation summary.
Reads tab-delimited observation files and prints a per-region report.
"""

import os
import sys
import argparse
import logging
import zoneinfo

from dotenv import load_dotenv

from climate import Processor
from climate.exceptions import FileUnavailable
from climate.logger import config_logger
from climate.report import render_report

load_dotenv(verbose=True, dotenv_path=".env")

TRUTHY = ("1", "true", "yes", "on")


def get_args(argv=None):
    """
    Parse command line arguments for the climate summary.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Climate Observation Summary")
    parser.add_argument(
        "files", nargs="+", metavar="tdv_file", help="Tab-delimited files to analyze"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=os.getenv("CLIMATE_DEBUG", "").lower() in TRUTHY,
        help="Enable debug logging",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort the run when an input file cannot be opened",
    )
    parser.add_argument(
        "--csv", metavar="PATH", help="Also write the region table as CSV to PATH"
    )
    parser.add_argument(
        "--timezone",
        default=os.getenv("CLIMATE_REPORT_TIMEZONE", "UTC"),
        help="Timezone used to print timestamps. Defaults to UTC.",
    )

    args = parser.parse_args(argv)

    try:
        args.tz = zoneinfo.ZoneInfo(args.timezone)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        parser.error(f"Unknown timezone: {args.timezone}")

    return args


def main(argv=None) -> int:
    """Main function to run the climate summary."""

    args = get_args(argv)
    config_logger(debug=args.debug)

    processor = Processor(paths=args.files, fail_fast=args.fail_fast)

    try:
        builder = processor.run()
    except FileUnavailable:
        logging.error("Aborting run.")
        return 1

    print(render_report(builder.regions, args.tz), end="")

    if args.csv:
        builder.to_dataframe().to_csv(args.csv, index=False)
        logging.info("Wrote region table to %s", args.csv)

    if len(processor.run_info.files_failed) == len(args.files):
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
