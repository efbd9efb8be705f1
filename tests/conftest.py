from typing import List

import pytest

from boxgrid.models import GridSize


def _pattern(gs: GridSize) -> List[int]:
    # a valid completed grid for any box shape
    w, h, n = gs.box_width, gs.box_height, gs.size
    return [(w * (r % h) + r // h + c) % n + 1 for r in range(n) for c in range(n)]


@pytest.fixture
def filled_values():
    return _pattern


@pytest.fixture
def assert_valid_solution():
    def check(gs: GridSize, values: List[int], givens: List[int] = None) -> None:
        n = gs.size
        full = set(range(1, n + 1))
        assert len(values) == gs.cell_count
        for r in range(n):
            assert set(values[r * n:(r + 1) * n]) == full, f"row {r + 1}"
        for c in range(n):
            assert {values[r * n + c] for r in range(n)} == full, f"column {c + 1}"
        for band in range(n // gs.box_height):
            for stack in range(n // gs.box_width):
                box = {
                    values[(band * gs.box_height + br) * n + stack * gs.box_width + bc]
                    for br in range(gs.box_height)
                    for bc in range(gs.box_width)
                }
                assert box == full, f"box at band {band + 1}, stack {stack + 1}"
        if givens is not None:
            for i, g in enumerate(givens):
                if g:
                    assert values[i] == g, f"given at index {i} changed"

    return check
