"""
Module for folding climate observations into per-region summary statistics.
"""

import dataclasses
import logging
from typing import Dict, Iterable, List

import pandas as pd

from climate.schema import Observation, RegionStats

REGION_COLUMNS = [field.name for field in dataclasses.fields(RegionStats)]


class RegionBuilder:
    """
    Folds a stream of Observations into running statistics keyed by region code.

    The first observation of a region seeds its statistics; later ones update
    the running sums, averages and extremes. Regions keep the order in which
    they were first seen.
    """

    def __init__(self):
        self._regions: Dict[str, RegionStats] = {}

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, region_code: str) -> bool:
        return region_code in self._regions

    @property
    def regions(self) -> Dict[str, RegionStats]:
        """Region code to statistics mapping, in first-seen order."""
        return self._regions

    def region_codes(self) -> List[str]:
        """
        Get the region codes in the order they were first seen.
        Returns:
            list: Region codes.
        """
        return list(self._regions)

    def ingest(self, observation: Observation) -> RegionStats:
        """
        Fold a single observation into the statistics of its region.
        Args:
            observation (Observation): A parsed observation.
        Returns:
            RegionStats: The statistics of the observation's region.
        """
        stats = self._regions.get(observation.region_code)

        if stats is None:
            stats = self._create_region(observation)
            self._regions[observation.region_code] = stats
            logging.debug("New region found: %s", observation.region_code)
        else:
            self._update_region(stats, observation)

        return stats

    def ingest_all(self, observations: Iterable[Observation]) -> int:
        """
        Fold every observation of an iterable, in order.
        Args:
            observations (Iterable[Observation]): Observations to fold.
        Returns:
            int: Number of observations folded.
        """
        count = 0
        for observation in observations:
            self.ingest(observation)
            count += 1

        return count

    def to_dataframe(self) -> pd.DataFrame:
        """
        Build a table with one row per region, in first-seen order.
        Returns:
            pd.DataFrame: Region statistics, one column per RegionStats field.
        """
        return pd.DataFrame(
            [dataclasses.asdict(stats) for stats in self._regions.values()],
            columns=REGION_COLUMNS,
        )

    @staticmethod
    def _create_region(observation: Observation) -> RegionStats:
        """
        Seed the statistics of a region from its first observation.
        Both extremes point at this observation so the next comparison
        is made against a real reading.
        """
        return RegionStats(
            region_code=observation.region_code,
            num_records=1,
            humidity=observation.humidity,
            avg_humidity=observation.humidity,
            cloud_cover=observation.cloud_cover,
            avg_cloud_cover=observation.cloud_cover,
            temperature=observation.temperature,
            avg_temperature=observation.temperature,
            pressure=observation.pressure,
            avg_pressure=observation.pressure,
            snow=observation.snow,
            lightning=observation.lightning,
            max_temperature=observation.temperature,
            max_timestamp=observation.timestamp,
            min_temperature=observation.temperature,
            min_timestamp=observation.timestamp,
        )

    @staticmethod
    def _update_region(stats: RegionStats, observation: Observation) -> None:
        """
        Update the statistics of a known region with a further observation.
        """
        stats.num_records += 1

        stats.humidity += observation.humidity
        stats.avg_humidity = stats.humidity / stats.num_records

        stats.cloud_cover += observation.cloud_cover
        stats.avg_cloud_cover = stats.cloud_cover / stats.num_records

        stats.temperature += observation.temperature
        stats.avg_temperature = stats.temperature / stats.num_records

        stats.pressure += observation.pressure
        stats.avg_pressure = stats.pressure / stats.num_records

        stats.snow += observation.snow
        stats.lightning += observation.lightning

        # Strict comparisons: on a tie the earlier timestamp is kept
        if observation.temperature > stats.max_temperature:
            stats.max_temperature = observation.temperature
            stats.max_timestamp = observation.timestamp

        if observation.temperature < stats.min_temperature:
            stats.min_temperature = observation.temperature
            stats.min_timestamp = observation.timestamp
