"""
Text report for a finished region summary.
"""

import datetime
import zoneinfo
from typing import Mapping

from climate.schema import RegionStats

SEPARATOR = "---------------------------"


def format_timestamp(timestamp: int, tz: zoneinfo.ZoneInfo) -> str:
    """
    Format epoch seconds the way C's ctime() does, e.g. 'Mon Aug  3 11:00:00 2015'.
    Timestamps outside the datetime range are printed as raw epoch seconds.
    """
    try:
        return datetime.datetime.fromtimestamp(timestamp, tz).ctime()
    except (OverflowError, OSError, ValueError):
        return f"epoch {timestamp}"


def render_region(stats: RegionStats, tz: zoneinfo.ZoneInfo) -> str:
    """
    Render the report section of a single region.

    Args:
        stats (RegionStats): Statistics of the region.
        tz (zoneinfo.ZoneInfo): Timezone used for the extreme temperature timestamps.

    Returns:
        str: The section, one line per statistic, newline terminated.
    """
    lines = [
        f"-- Region: {stats.region_code} --",
        f"Number of Records: {stats.num_records}",
        f"Average Humidity: {stats.avg_humidity:0.1f}%",
        f"Average Temperature: {stats.avg_temperature:0.1f}F",
        f"Max Temperature: {stats.max_temperature:0.1f}F on "
        f"{format_timestamp(stats.max_timestamp, tz)}",
        f"Min Temperature: {stats.min_temperature:0.1f}F on "
        f"{format_timestamp(stats.min_timestamp, tz)}",
        f"Lightning Strikes: {stats.lightning}",
        f"Records with Snow Cover: {stats.snow}",
        f"Average Cloud Cover: {stats.avg_cloud_cover:0.1f}%",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def render_report(
    regions: Mapping[str, RegionStats], tz: zoneinfo.ZoneInfo = None
) -> str:
    """
    Render the full report: the list of regions found, then one section per region.

    Args:
        regions (Mapping[str, RegionStats]): Region statistics in first-seen order.
        tz (zoneinfo.ZoneInfo, optional): Timezone for timestamps. Defaults to UTC.

    Returns:
        str: The report text.
    """
    if tz is None:
        tz = zoneinfo.ZoneInfo("UTC")

    report = "Regions found: " + " ".join(regions) + "\n"
    for stats in regions.values():
        report += render_region(stats, tz)

    return report
