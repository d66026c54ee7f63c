"""Validation errors for map paths."""


class ShapeError(ValueError):
    """Base class for malformed map path shapes."""

    message = "shape is malformed"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class ShapeUnknownError(ShapeError):
    message = "shape is not recognized"


class CircleShapeError(ShapeError):
    message = "circle must contains 1 coordinates point"


class PolygonShapeError(ShapeError):
    message = "polygon must contains 3 coordinates points at least"


class RectangleShapeError(ShapeError):
    message = "rectangle must contains 4 coordinates points"
