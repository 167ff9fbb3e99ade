"""
Builders module.
"""

from .region_builder import RegionBuilder

__all__ = [
    "RegionBuilder",
]
