"""GPS map areas.

This package models the areas used to select GPS positions: circles
measured with the haversine distance, polygons and rectangles.  It also
defines the errors raised when an area is malformed.
"""

from .errors import (
    ShapeError,
    ShapeUnknownError,
    CircleShapeError,
    PolygonShapeError,
    RectangleShapeError,
)
from .shapes import Point, Shape, MapPath, is_selected, load_map_paths

__all__ = [
    "ShapeError",
    "ShapeUnknownError",
    "CircleShapeError",
    "PolygonShapeError",
    "RectangleShapeError",
    "Point",
    "Shape",
    "MapPath",
    "is_selected",
    "load_map_paths",
]
