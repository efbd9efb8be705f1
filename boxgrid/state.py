from __future__ import annotations

import logging
from typing import Dict, List

from .bits import box_bit, box_cell_bit, column_bit, full_mask, row_bit, value_bit
from .models import Frame, Grid, GridSize, Location
from .validation import find_conflicts

log = logging.getLogger(__name__)


class MaskStack:
    """
    A mask with its history: push ORs a bit into a new top entry,
    pop drops the top and the previous value is current again.
    """
    __slots__ = ("_items",)

    def __init__(self, initial: int = 0) -> None:
        self._items: List[int] = [initial]

    @property
    def value(self) -> int:
        return self._items[-1]

    def push(self, bit: int) -> int:
        top = self._items[-1] | bit
        self._items.append(top)
        return top

    def pop(self) -> int:
        if len(self._items) == 1:
            raise IndexError("pop from a mask stack with no pushed entries")
        self._items.pop()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items) - 1


class ConstraintState:
    """
    Used-value masks per row / column / box (keyed by the group's bit),
    filled box-cells per box, the boxes-complete mask and the stack of
    committed frames.
    """

    def __init__(self, grid_size: GridSize) -> None:
        self.grid_size = grid_size
        self.complete = full_mask(grid_size.size)

        bits = [1 << i for i in range(grid_size.size)]
        self.row_values: Dict[int, MaskStack] = {b: MaskStack() for b in bits}
        self.column_values: Dict[int, MaskStack] = {b: MaskStack() for b in bits}
        self.box_values: Dict[int, MaskStack] = {b: MaskStack() for b in bits}
        self.box_cells: Dict[int, MaskStack] = {b: MaskStack() for b in bits}
        self.boxes = MaskStack()

        self.conflicts: List[Location] = []
        self._frames: List[Frame] = []

    @classmethod
    def from_grid(cls, grid: Grid) -> "ConstraintState":
        state = cls(grid.grid_size)
        gs = grid.grid_size

        row_seed: Dict[int, int] = {}
        column_seed: Dict[int, int] = {}
        box_seed: Dict[int, int] = {}
        cells_seed: Dict[int, int] = {}

        for cell in grid.cells:
            loc = cell.location
            row = row_bit(loc)
            column = column_bit(loc)
            box = box_bit(loc, gs)
            value = value_bit(cell.value)

            row_seed[row] = row_seed.get(row, 0) | value
            column_seed[column] = column_seed.get(column, 0) | value
            box_seed[box] = box_seed.get(box, 0) | value

            if not cell.is_empty():
                cells_seed[box] = cells_seed.get(box, 0) | box_cell_bit(loc, gs)

        for b, m in row_seed.items():
            state.row_values[b] = MaskStack(m)
        for b, m in column_seed.items():
            state.column_values[b] = MaskStack(m)
        for b, m in box_seed.items():
            state.box_values[b] = MaskStack(m)

        boxes = 0
        for b, m in cells_seed.items():
            state.box_cells[b] = MaskStack(m)
            if m == state.complete:
                boxes |= b
        state.boxes = MaskStack(boxes)

        state.conflicts = [loc for loc, _ in find_conflicts(grid)]

        if state.conflicts:
            log.debug("grid has %d conflicting given(s)", len(state.conflicts))
        return state

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def top(self) -> Frame:
        return self._frames[-1]

    def is_complete(self) -> bool:
        return self.boxes.value == self.complete

    def is_consistent(self) -> bool:
        return not self.conflicts

    def assign(self, frame: Frame) -> None:
        self.row_values[frame.row].push(frame.value)
        self.column_values[frame.column].push(frame.value)
        self.box_values[frame.box].push(frame.value)
        occupied = self.box_cells[frame.box].push(frame.box_cell)
        # pushed even when unchanged so every stack pops in lockstep
        self.boxes.push(frame.box if occupied == self.complete else 0)
        self._frames.append(frame)

    def unassign(self) -> Frame:
        frame = self._frames.pop()
        self.row_values[frame.row].pop()
        self.column_values[frame.column].pop()
        self.box_values[frame.box].pop()
        self.box_cells[frame.box].pop()
        self.boxes.pop()
        return frame
