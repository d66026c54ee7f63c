"""Map areas used to select GPS positions.

A `MapPath` describes a region on the map: a circle given by its centre
and radius in metres, a polygon of three or more vertices, or a
rectangle of four corners.  Circles are measured along the Earth's
surface with the haversine formula.  Polygons and rectangles are tested
in the plane of longitude/latitude degrees, which is adequate for areas
of city scale away from the poles and the antimeridian.

Map paths are read from YAML files of the form::

    paths:
      - shape: circle
        radius: 500
        coord: [{lat: 48.8584, lon: 2.2945}]
      - shape: polygon
        eject: true
        coord:
          - {lat: 48.85, lon: 2.28}
          - {lat: 48.87, lon: 2.28}
          - {lat: 48.86, lon: 2.31}
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import yaml
from shapely.geometry import Point as ShapelyPoint, Polygon

from ..utils.geodesy import haversine_distance
from .errors import (
    CircleShapeError,
    PolygonShapeError,
    RectangleShapeError,
    ShapeUnknownError,
)

logger = logging.getLogger(__name__)


class Shape(str, Enum):
    """Kind of area described by a map path."""

    CIRCLE = "circle"
    POLYGON = "polygon"
    RECTANGLE = "rectangle"

    @classmethod
    def parse(cls, value: Union[str, "Shape"]) -> "Shape":
        try:
            return cls(value)
        except (TypeError, ValueError):
            raise ShapeUnknownError() from None


@dataclass(frozen=True)
class Point:
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        if not isinstance(data, dict):
            raise ValueError(f"point {data!r}: expected a mapping with lat and lon")
        try:
            return cls(latitude=float(data["lat"]), longitude=float(data["lon"]))
        except KeyError as exc:
            raise ValueError(f"point {data!r}: missing key {exc}") from None
        except (TypeError, ValueError):
            raise ValueError(f"point {data!r}: lat and lon must be numbers") from None

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lon": self.longitude}


@dataclass
class MapPath:
    """Area on the map which can contain points."""

    shape: Shape
    """Kind of area."""

    coord: List[Point] = field(default_factory=list)
    """Centre of a circle, or vertices of a polygon or rectangle."""

    radius: float = 0.0
    """Circle radius in metres, unused by other shapes."""

    eject: bool = False
    """Whether points inside the area should be excluded by the caller."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MapPath":
        """Build a map path from its serialised form.

        Parameters
        ----------
        data : dict
            Mapping with ``shape`` and ``coord`` keys, and optional
            ``radius`` and ``eject``.

        Returns
        -------
        MapPath
            Unvalidated map path.
        """
        if not isinstance(data, dict):
            raise ValueError(f"map path {data!r}: expected a mapping")
        coord = data.get("coord") or []
        if not isinstance(coord, list):
            raise ValueError(f"map path coord {coord!r}: expected a list of points")
        try:
            radius = float(data.get("radius", 0.0))
        except (TypeError, ValueError):
            raise ValueError(f"map path radius {data.get('radius')!r}: expected a number") from None
        return cls(
            shape=Shape.parse(data.get("shape", "")),
            coord=[Point.from_dict(p) for p in coord],
            radius=radius,
            eject=bool(data.get("eject", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "shape": self.shape.value,
            "eject": self.eject,
            "coord": [p.to_dict() for p in self.coord],
        }
        if self.radius:
            data["radius"] = self.radius
        return data

    def validate(self) -> None:
        """Check that the number of coordinates fits the shape.

        Raises
        ------
        ShapeError
            Subclass matching the shape when the coordinate count is wrong.
        """
        n = len(self.coord)
        if self.shape is Shape.CIRCLE:
            if n != 1:
                raise CircleShapeError()
        elif self.shape is Shape.POLYGON:
            if n < 3:
                raise PolygonShapeError()
        elif self.shape is Shape.RECTANGLE:
            if n != 4:
                raise RectangleShapeError()
        else:
            raise ShapeUnknownError()

    def coord_array(self) -> np.ndarray:
        """Return the coordinates as an (N, 2) array of (lon, lat)."""
        return np.array(
            [[p.longitude, p.latitude] for p in self.coord], dtype=float
        ).reshape(-1, 2)

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a position lies inside the area.

        Boundaries count as inside for every shape.

        Parameters
        ----------
        lat, lon : float
            Position in decimal degrees.

        Returns
        -------
        bool
            True if the position is inside the area.
        """
        self.validate()
        if self.shape is Shape.CIRCLE:
            center = self.coord[0]
            d = haversine_distance(center.latitude, center.longitude, lat, lon)
            return d <= self.radius
        if self.shape is Shape.RECTANGLE:
            xy = self.coord_array()
            lon_min, lat_min = xy.min(axis=0)
            lon_max, lat_max = xy.max(axis=0)
            return bool(lat_min <= lat <= lat_max and lon_min <= lon <= lon_max)
        polygon = Polygon(self.coord_array())
        return bool(polygon.covers(ShapelyPoint(lon, lat)))


def is_selected(paths: List[MapPath], lat: float, lon: float) -> bool:
    """Decide whether a position is selected by a list of map paths.

    Paths are applied in order and the last path containing the position
    wins: it selects the position unless it is an eject path.  A position
    outside every path is not selected.
    """
    selected = False
    for mp in paths:
        if mp.contains(lat, lon):
            selected = not mp.eject
    return selected


def load_map_paths(path: Union[str, Path]) -> List[MapPath]:
    """Read and validate map paths from a YAML file.

    Parameters
    ----------
    path : str or Path
        YAML file with a top-level ``paths`` list.

    Returns
    -------
    list of MapPath
        Validated map paths in file order.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with a 'paths' list")
    items = data.get("paths") or []
    if not isinstance(items, list):
        raise ValueError(f"{path}: 'paths' must be a list")
    paths = [MapPath.from_dict(item) for item in items]
    for mp in paths:
        mp.validate()
    logger.debug("Loaded %d map paths from %s", len(paths), path)
    return paths
