"""
Conversions between a flat cell index, a (row, column) location,
a box number and a box-local cell number.

Every number handed out or accepted here is 1-based, except the flat
index which is 0-based (row-major). Inputs are assumed to be in range;
Grid.load is where out-of-range data gets rejected.
"""
from __future__ import annotations

from typing import Iterator, List

from .models import GridSize, Location


def location_from_index(grid_size: GridSize, index: int) -> Location:
    n = grid_size.size
    return Location(index // n + 1, index % n + 1)


def index_from_location(location: Location, grid_size: GridSize) -> int:
    return (location.row - 1) * grid_size.size + (location.column - 1)


def stack_number(location: Location, grid_size: GridSize) -> int:
    return (location.column - 1) // grid_size.box_width + 1


def band_number(location: Location, grid_size: GridSize) -> int:
    return (location.row - 1) // grid_size.box_height + 1


def box_number(location: Location, grid_size: GridSize) -> int:
    stack = stack_number(location, grid_size)
    band = band_number(location, grid_size)
    return stack + grid_size.band_size * (band - 1)


def box_cell_number(location: Location, grid_size: GridSize) -> int:
    box_row = (location.row - 1) % grid_size.box_height + 1
    box_col = (location.column - 1) % grid_size.box_width + 1
    return box_col + grid_size.box_width * (box_row - 1)


def location_from_box_cell(grid_size: GridSize, box: int, box_cell: int) -> Location:
    """Inverse of (box_number, box_cell_number)."""
    band = (box - 1) // grid_size.band_size + 1
    stack = (box - 1) % grid_size.band_size + 1
    box_row = (box_cell - 1) // grid_size.box_width + 1
    box_col = (box_cell - 1) % grid_size.box_width + 1
    return Location(
        (band - 1) * grid_size.box_height + box_row,
        (stack - 1) * grid_size.box_width + box_col,
    )


def iter_locations(grid_size: GridSize) -> Iterator[Location]:
    for i in range(grid_size.cell_count):
        yield location_from_index(grid_size, i)


def box_locations(grid_size: GridSize, box: int) -> List[Location]:
    return [location_from_box_cell(grid_size, box, c) for c in range(1, grid_size.size + 1)]
