from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Sequence, Tuple

from .errors import InvalidGeometryError, InvalidGridError, InvalidLocationError


@dataclass(frozen=True)
class GridSize:
    box_width: int
    box_height: int

    DEFAULT: ClassVar["GridSize"]

    def __post_init__(self) -> None:
        if self.box_width <= 0:
            raise InvalidGeometryError(f"Box width is invalid: {self.box_width}")
        if self.box_height <= 0:
            raise InvalidGeometryError(f"Box height is invalid: {self.box_height}")

    @property
    def size(self) -> int:
        # values per row / column / box
        return self.box_width * self.box_height

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def band_size(self) -> int:
        # boxes side by side in one band
        return self.box_height

    @property
    def stack_size(self) -> int:
        # boxes on top of each other in one stack
        return self.box_width

    def __str__(self) -> str:
        return f"{self.size}x{self.size} ({self.box_width}x{self.box_height} boxes)"


GridSize.DEFAULT = GridSize(3, 3)


@dataclass(frozen=True)
class Location:
    row: int     # 1-based
    column: int  # 1-based

    def __post_init__(self) -> None:
        if self.row <= 0:
            raise InvalidLocationError(f"Row is invalid: {self.row}")
        if self.column <= 0:
            raise InvalidLocationError(f"Column is invalid: {self.column}")


@dataclass(frozen=True)
class Cell:
    location: Location
    value: int = 0  # 0 = empty

    def __post_init__(self) -> None:
        if self.value < 0:
            raise InvalidGridError(
                f"Cell value is invalid at ({self.location.row},{self.location.column}): {self.value}"
            )

    def is_empty(self) -> bool:
        return self.value == 0


@dataclass(frozen=True)
class Grid:
    """
    Immutable row-major sequence of cells.
    Build it with Grid.load(grid_size, values) rather than directly.
    """
    grid_size: GridSize
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.grid_size.cell_count:
            raise InvalidGridError(
                f"Cell count mismatch: {len(self.cells)} cells for a "
                f"{self.grid_size} grid (expected {self.grid_size.cell_count})."
            )

    @staticmethod
    def load(grid_size: GridSize, values: Sequence[int]) -> "Grid":
        """
        Checks:
          - values is not empty
          - exactly grid_size.cell_count values
          - every value is an integer in 0..size
        """
        from .geometry import location_from_index  # geometry imports this module

        if len(values) == 0:
            raise InvalidGridError("No values are present.")
        if len(values) != grid_size.cell_count:
            raise InvalidGridError(
                f"Invalid number of values: {len(values)} (expected {grid_size.cell_count} "
                f"for a {grid_size} grid)."
            )

        size = grid_size.size
        cells: List[Cell] = []
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidGridError(f"Invalid value at index {i}: {v!r} (not an integer).")
            loc = location_from_index(grid_size, i)
            if v > size:
                raise InvalidGridError(
                    f"Invalid value at ({loc.row},{loc.column}): {v} (allowed: 0..{size})."
                )
            cells.append(Cell(loc, v))

        return Grid(grid_size, tuple(cells))

    @property
    def values(self) -> List[int]:
        return [c.value for c in self.cells]

    def rows(self) -> List[List[int]]:
        n = self.grid_size.size
        flat = self.values
        return [flat[r * n:(r + 1) * n] for r in range(n)]

    def is_complete(self) -> bool:
        return all(not c.is_empty() for c in self.cells)

    def empty_count(self) -> int:
        return sum(1 for c in self.cells if c.is_empty())

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.values)


@dataclass(frozen=True)
class Frame:
    box: int        # box bit
    box_cell: int   # box-cell bit
    row: int        # row bit
    column: int     # column bit
    value: int = 0  # trial value bit
    tried: int = 0  # values already used or tried at this cell


@dataclass
class SearchStats:
    assignments: int = 0
    backtracks: int = 0
    elapsed: float = 0.0  # seconds

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass(frozen=True)
class Solution:
    original_grid: Grid
    grid: Grid
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    @property
    def values(self) -> List[int]:
        return self.grid.values

    @property
    def original_values(self) -> List[int]:
        return self.original_grid.values


@dataclass(frozen=True)
class NoSolution:
    original_grid: Grid
    reason: str = "No solution exists."
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    def __bool__(self) -> bool:
        return False
