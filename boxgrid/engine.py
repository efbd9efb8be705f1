from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .bits import WORD_BITS, bit, lowest_clear_bit, row_bit, column_bit
from .errors import UnsupportedSizeError
from .geometry import location_from_box_cell
from .models import Frame, Grid, GridSize, NoSolution, SearchStats, Solution
from .solution import assemble
from .state import ConstraintState

log = logging.getLogger(__name__)

Result = Union[Solution, NoSolution]


def _cell_table(grid_size: GridSize) -> Dict[Tuple[int, int], Tuple[int, int]]:
    """(box bit, box-cell bit) -> (row bit, column bit) for every cell."""
    n = grid_size.size
    table: Dict[Tuple[int, int], Tuple[int, int]] = {}
    for box in range(1, n + 1):
        for box_cell in range(1, n + 1):
            loc = location_from_box_cell(grid_size, box, box_cell)
            table[(bit(box), bit(box_cell))] = (row_bit(loc), column_bit(loc))
    return table


class Solver:
    """
    First-solution backtracking search over box / box-cell bit masks.

    Cells are taken box by box (ascending), box-cells ascending inside a
    box, values ascending inside a cell, so the same grid always yields
    the same solution. The search keeps an explicit frame stack; there is
    no recursion.
    """

    def __init__(self, grid: Grid) -> None:
        gs = grid.grid_size
        if gs.size > WORD_BITS:
            raise UnsupportedSizeError(
                f"Grid is too large: {gs}. Maximum size is {WORD_BITS}x{WORD_BITS}."
            )
        self._grid = grid
        self._cells = _cell_table(gs)

    @property
    def grid(self) -> Grid:
        return self._grid

    def _select(self, state: ConstraintState) -> Frame:
        box = lowest_clear_bit(state.boxes.value)
        box_cell = lowest_clear_bit(state.box_cells[box].value)
        row, column = self._cells[(box, box_cell)]
        used = (
            state.box_values[box].value
            | state.row_values[row].value
            | state.column_values[column].value
        )
        return Frame(box=box, box_cell=box_cell, row=row, column=column, tried=used)

    def solve(self) -> Result:
        grid = self._grid
        stats = SearchStats()
        started = time.perf_counter()
        log.debug("solve start: %s, %d empty cell(s)", grid.grid_size, grid.empty_count())

        state = ConstraintState.from_grid(grid)
        result = self._search(state, stats)

        stats.elapsed = time.perf_counter() - started
        result = replace(result, stats=stats)
        log.info(
            "%s: %s in %.2fms (assignments=%d, backtracks=%d)",
            grid.grid_size,
            "solved" if isinstance(result, Solution) else "no solution",
            stats.elapsed_ms,
            stats.assignments,
            stats.backtracks,
        )
        return result

    def _search(self, state: ConstraintState, stats: SearchStats) -> Result:
        grid = self._grid
        complete = state.complete

        if not state.is_consistent():
            return NoSolution(grid, reason="Conflicting givens: a value repeats in a row, column or box.")
        if state.is_complete():
            return Solution(grid, assemble(grid, []))

        frame = self._select(state)
        while True:
            if frame.tried == complete:
                # dead cell or every candidate tried: step back
                if state.depth == 0:
                    return NoSolution(grid, reason="Search exhausted: no assignment satisfies the grid.")
                frame = state.unassign()
                stats.backtracks += 1
                continue

            value = lowest_clear_bit(frame.tried)
            frame = replace(frame, value=value, tried=frame.tried | value)
            state.assign(frame)
            stats.assignments += 1

            if state.is_complete():
                return Solution(grid, assemble(grid, state.frames))

            frame = self._select(state)


def solve_grid(grid: Grid) -> Result:
    return Solver(grid).solve()


def solve_values(grid_size: GridSize, values: Sequence[int]) -> Optional[List[int]]:
    """
    Solve a flat row-major puzzle (0 = empty).
    Returns a NEW solved list or None if unsolvable.
    """
    result = Solver(Grid.load(grid_size, values)).solve()
    if isinstance(result, NoSolution):
        return None
    return result.values
