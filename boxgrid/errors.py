from __future__ import annotations


class GridError(ValueError):
    """Base class for every structural problem with a grid or its size."""


class InvalidGeometryError(GridError):
    pass


class InvalidGridError(GridError):
    pass


class InvalidLocationError(InvalidGridError):
    pass


class UnsupportedSizeError(GridError):
    pass
