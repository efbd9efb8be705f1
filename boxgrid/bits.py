from __future__ import annotations

from .geometry import box_cell_number, box_number
from .models import GridSize, Location

# Masks must fit one unsigned 32-bit word; Solver enforces size <= WORD_BITS.
WORD_BITS = 32


def bit(n: int) -> int:
    """Ordinal (1-based) -> single-bit mask."""
    return 1 << (n - 1)


def ordinal(mask: int) -> int:
    """Single-bit mask -> ordinal (1-based)."""
    if mask <= 0 or mask & (mask - 1):
        raise ValueError(f"Not a single-bit mask: {mask:#x}")
    return mask.bit_length()


def value_bit(value: int) -> int:
    # empty cells contribute nothing
    if value == 0:
        return 0
    return bit(value)


def full_mask(width: int) -> int:
    return (1 << width) - 1


def lowest_clear_bit(mask: int) -> int:
    return (mask + 1) & ~mask


def row_bit(location: Location) -> int:
    return bit(location.row)


def column_bit(location: Location) -> int:
    return bit(location.column)


def box_bit(location: Location, grid_size: GridSize) -> int:
    return bit(box_number(location, grid_size))


def box_cell_bit(location: Location, grid_size: GridSize) -> int:
    return bit(box_cell_number(location, grid_size))
