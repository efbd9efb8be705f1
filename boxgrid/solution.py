from __future__ import annotations

from typing import Iterable

from .bits import ordinal
from .geometry import index_from_location, location_from_box_cell
from .models import Frame, Grid


def assemble(grid: Grid, frames: Iterable[Frame]) -> Grid:
    """
    Build a NEW grid: givens keep their value, every committed frame
    fills its cell with the decoded value. The input grid is left as is.
    """
    gs = grid.grid_size
    values = grid.values  # fresh list

    for f in frames:
        loc = location_from_box_cell(gs, ordinal(f.box), ordinal(f.box_cell))
        values[index_from_location(loc, gs)] = ordinal(f.value)

    return Grid.load(gs, values)
