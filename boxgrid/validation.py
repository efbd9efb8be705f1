from __future__ import annotations

from typing import List, Tuple

from .bits import box_bit, column_bit, row_bit, value_bit
from .geometry import box_number, index_from_location
from .models import Grid, Location


def find_conflicts(grid: Grid) -> List[Tuple[Location, str]]:
    """
    Every given that repeats a value already seen (row-major) in its row,
    column or box, with the name of the group it clashes in.
    """
    gs = grid.grid_size
    row_used = {}
    col_used = {}
    box_used = {}
    out: List[Tuple[Location, str]] = []

    for cell in grid.cells:
        if cell.is_empty():
            continue
        loc = cell.location
        v = value_bit(cell.value)
        r, c, b = row_bit(loc), column_bit(loc), box_bit(loc, gs)

        if row_used.get(r, 0) & v:
            out.append((loc, f"row {loc.row}"))
        elif col_used.get(c, 0) & v:
            out.append((loc, f"column {loc.column}"))
        elif box_used.get(b, 0) & v:
            out.append((loc, f"box {box_number(loc, gs)}"))

        row_used[r] = row_used.get(r, 0) | v
        col_used[c] = col_used.get(c, 0) | v
        box_used[b] = box_used.get(b, 0) | v

    return out


def validate_grid(grid: Grid) -> Tuple[bool, str]:
    """
    Checks no duplicate values in any row/col/box (ignoring 0).
    Values and cell count are already checked by Grid.load.
    """
    conflicts = find_conflicts(grid)
    if not conflicts:
        return True, "OK"

    loc, where = conflicts[0]
    v = grid.cells[index_from_location(loc, grid.grid_size)].value
    msg = f"Conflict: value {v} appears twice in {where} (cell {loc.row},{loc.column})."
    if len(conflicts) > 1:
        msg += f" {len(conflicts) - 1} more conflict(s)."
    return False, msg
