"""Observation Schema"""

from dataclasses import dataclass


@dataclass
class Observation:
    """
    Represents a single climate observation parsed from one input line.

    Attributes:
        region_code (str): Two character region identifier, case as given.
        timestamp (int): Seconds since the epoch (source milliseconds // 1000).
        geohash (str): Geolocation token, carried but never summarised.
        humidity (float): Relative humidity in percent.
        snow (int): Snow cover flag (1 = snow present).
        cloud_cover (float): Cloud cover in percent.
        lightning (int): Lightning flag (1 = strike observed).
        pressure (float): Pressure in Pascals.
        temperature (float): Surface temperature in Fahrenheit.
    """

    region_code: str
    timestamp: int
    geohash: str
    humidity: float
    snow: int
    cloud_cover: float
    lightning: int
    pressure: float
    temperature: float
