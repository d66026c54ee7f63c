"""Utility functions for geodesic distance computation."""

from .logging import get_logger
from .config import load_config, GeoConfig
from .geodesy import haversine_distance, EARTH_RADIUS, RAD_PER_DEG

__all__ = [
    "get_logger",
    "load_config",
    "GeoConfig",
    "haversine_distance",
    "EARTH_RADIUS",
    "RAD_PER_DEG",
]
