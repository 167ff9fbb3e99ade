"""RegionStats Schema"""

from dataclasses import dataclass


@dataclass
class RegionStats:
    """
    Represents the running statistics of a single region,
    which is an aggregation of every Observation seen for its code.

    Attributes:
        region_code (str): Region identifier, the key of the aggregation.
        num_records (int): Number of observations folded in so far.
        humidity (float): Running sum of humidity.
        avg_humidity (float): Running average humidity.
        cloud_cover (float): Running sum of cloud cover.
        avg_cloud_cover (float): Running average cloud cover.
        temperature (float): Running sum of temperature, in Fahrenheit.
        avg_temperature (float): Running average temperature.
        pressure (float): Running sum of pressure.
        avg_pressure (float): Running average pressure.
        snow (int): Number of observations with snow cover.
        lightning (int): Number of observations with lightning strikes.
        max_temperature (float): Highest temperature seen.
        max_timestamp (int): Timestamp of the highest temperature.
        min_temperature (float): Lowest temperature seen.
        min_timestamp (int): Timestamp of the lowest temperature.
    """

    region_code: str
    num_records: int
    humidity: float
    avg_humidity: float
    cloud_cover: float
    avg_cloud_cover: float
    temperature: float
    avg_temperature: float
    pressure: float
    avg_pressure: float
    snow: int
    lightning: int
    max_temperature: float
    max_timestamp: int
    min_temperature: float
    min_timestamp: int
