"""
Module containing the schema definitions for the climate summary component.
"""

from .observation import Observation
from .region_stats import RegionStats
from .processor_run import ProcessorRun

__all__ = [
    "Observation",
    "RegionStats",
    "ProcessorRun",
]
