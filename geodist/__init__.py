"""Great-circle distances and GPS map areas.

The core of the package is `haversine_distance`, which returns the
distance in metres between two latitude/longitude positions on a
spherical Earth.  The `gps` subpackage builds map areas on top of it.
"""

from .utils.geodesy import haversine_distance, EARTH_RADIUS
from .gps import MapPath, Point, Shape, ShapeError, is_selected, load_map_paths

__version__ = "0.1.0"

__all__ = [
    "haversine_distance",
    "EARTH_RADIUS",
    "MapPath",
    "Point",
    "Shape",
    "ShapeError",
    "is_selected",
    "load_map_paths",
]
