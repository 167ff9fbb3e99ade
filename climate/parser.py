"""
Parser for tab-delimited climate observation records.

Each line holds nine tab separated fields:

    region code, timestamp (ms), geohash, humidity (%), snow (0/1),
    cloud cover (%), lightning (0/1), pressure (Pa), surface temperature (K)

Fields past the ninth are ignored.
"""

import datetime
import math

from climate.exceptions import MalformedRecord
from climate.schema import Observation

FIELD_SEPARATOR = "\t"
FIELD_COUNT = 9
REGION_CODE_WIDTH = 2
REPLACEMENT_CHARACTER = "\ufffd"

# Epoch seconds that fit a datetime in any timezone (years 2 to 9998)
MIN_TIMESTAMP = int(
    datetime.datetime(2, 1, 1, tzinfo=datetime.timezone.utc).timestamp()
)
MAX_TIMESTAMP = int(
    datetime.datetime(9998, 12, 31, tzinfo=datetime.timezone.utc).timestamp()
)


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """
    Convert a temperature from Kelvin to Fahrenheit.

    Args:
        kelvin (float): Temperature in Kelvin.

    Returns:
        float: Temperature in Fahrenheit.
    """
    return kelvin * 1.8 - 459.67


def _parse_float(value: str, name: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise MalformedRecord(f"Invalid {name}: {value!r}") from e

    if not math.isfinite(number):
        raise MalformedRecord(f"Invalid {name}: {value!r}")

    return number


def _parse_flag(value: str, name: str) -> int:
    """
    Read a 0/1 indicator. '0', '1', '0.0' and '1.0' are accepted;
    any other value, fractional or out of range, is malformed.
    """
    number = _parse_float(value, name)
    if number not in (0.0, 1.0):
        raise MalformedRecord(f"Invalid {name} flag: {value!r}")

    return int(number)


def _parse_timestamp(value: str) -> int:
    try:
        milliseconds = int(value)
    except ValueError as e:
        raise MalformedRecord(f"Invalid timestamp: {value!r}") from e

    # truncate toward zero, pre-epoch values included
    seconds = abs(milliseconds) // 1000
    seconds = seconds if milliseconds >= 0 else -seconds

    if not MIN_TIMESTAMP <= seconds <= MAX_TIMESTAMP:
        raise MalformedRecord(f"Timestamp out of range: {value!r}")

    return seconds


def parse_line(line: str) -> Observation:
    """
    Parse one raw line into an Observation.

    The surface temperature is converted to Fahrenheit and the millisecond
    timestamp is truncated to whole seconds.

    Args:
        line (str): Raw input line, with or without its line terminator.

    Returns:
        Observation: The parsed observation.

    Raises:
        MalformedRecord: If the line has fewer than nine fields, holds
            undecodable bytes, a numeric field does not parse or is not
            finite, a flag is not 0/1, or the timestamp is out of range.
    """
    if REPLACEMENT_CHARACTER in line:
        raise MalformedRecord("Undecodable bytes in line")

    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)

    if len(fields) < FIELD_COUNT:
        raise MalformedRecord(
            f"Expected {FIELD_COUNT} fields, found {len(fields)}"
        )

    fields = [value.strip() for value in fields[:FIELD_COUNT]]

    region_code = fields[0][:REGION_CODE_WIDTH]
    if not region_code:
        raise MalformedRecord("Missing region code")

    return Observation(
        region_code=region_code,
        timestamp=_parse_timestamp(fields[1]),
        geohash=fields[2],
        humidity=_parse_float(fields[3], "humidity"),
        snow=_parse_flag(fields[4], "snow"),
        cloud_cover=_parse_float(fields[5], "cloud cover"),
        lightning=_parse_flag(fields[6], "lightning"),
        pressure=_parse_float(fields[7], "pressure"),
        temperature=kelvin_to_fahrenheit(_parse_float(fields[8], "temperature")),
    )
