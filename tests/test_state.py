import pytest

from boxgrid.bits import bit, full_mask
from boxgrid.models import Frame, Grid, GridSize, Location
from boxgrid.state import ConstraintState, MaskStack
from boxgrid.validation import find_conflicts


def test_mask_stack_restores_previous_value():
    s = MaskStack(0b001)
    assert s.push(0b100) == 0b101
    assert s.push(0b100) == 0b101  # pushing a bit that is already set still adds a level
    assert len(s) == 2
    assert s.pop() == 0b101
    assert s.pop() == 0b001
    assert s.value == 0b001
    with pytest.raises(IndexError):
        s.pop()


def test_seeding_from_givens():
    gs = GridSize(2, 2)
    grid = Grid.load(gs, [
        1, 0, 0, 4,
        0, 0, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 2,
    ])
    state = ConstraintState.from_grid(grid)

    assert state.row_values[bit(1)].value == bit(1) | bit(4)
    assert state.row_values[bit(2)].value == 0
    assert state.column_values[bit(4)].value == bit(4) | bit(2)
    assert state.box_values[bit(1)].value == bit(1)
    assert state.box_values[bit(4)].value == bit(2)
    # (1,4) is box 2, box-cell 2
    assert state.box_cells[bit(2)].value == bit(2)
    assert state.boxes.value == 0
    assert state.is_consistent()
    assert not state.is_complete()
    assert state.depth == 0


def test_filled_grid_is_complete_on_load(filled_values):
    gs = GridSize(3, 2)
    state = ConstraintState.from_grid(Grid.load(gs, filled_values(gs)))
    assert state.boxes.value == full_mask(6)
    assert state.is_complete()


def test_assign_then_unassign_restores_every_mask():
    gs = GridSize(2, 2)
    values = [
        1, 2, 0, 0,
        3, 4, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
    ]
    state = ConstraintState.from_grid(Grid.load(gs, values))
    assert state.boxes.value == bit(1)

    before = (
        state.row_values[bit(1)].value,
        state.column_values[bit(3)].value,
        state.box_values[bit(2)].value,
        state.box_cells[bit(2)].value,
        state.boxes.value,
    )

    f = Frame(box=bit(2), box_cell=bit(1), row=bit(1), column=bit(3), value=bit(3), tried=0b0111)
    state.assign(f)
    assert state.depth == 1
    assert state.top == f
    assert state.row_values[bit(1)].value == 0b0111
    assert state.box_cells[bit(2)].value == bit(1)

    assert state.unassign() == f
    after = (
        state.row_values[bit(1)].value,
        state.column_values[bit(3)].value,
        state.box_values[bit(2)].value,
        state.box_cells[bit(2)].value,
        state.boxes.value,
    )
    assert after == before
    assert state.depth == 0


def test_box_marked_complete_when_last_cell_assigned():
    gs = GridSize(2, 2)
    values = [
        1, 2, 0, 0,
        3, 0, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
    ]
    state = ConstraintState.from_grid(Grid.load(gs, values))
    assert state.boxes.value == 0

    state.assign(Frame(box=bit(1), box_cell=bit(4), row=bit(2), column=bit(2), value=bit(4)))
    assert state.boxes.value == bit(1)
    state.unassign()
    assert state.boxes.value == 0


def test_duplicate_givens_are_recorded():
    gs = GridSize(2, 2)
    values = [
        1, 0, 0, 1,
        0, 0, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0,
    ]
    state = ConstraintState.from_grid(Grid.load(gs, values))
    assert not state.is_consistent()
    assert state.conflicts == [Location(1, 4)]


def test_conflicts_agree_with_validation():
    gs = GridSize(2, 2)
    grid = Grid.load(gs, [
        1, 0, 0, 1,
        0, 0, 0, 0,
        2, 0, 0, 0,
        0, 2, 0, 0,
    ])
    state = ConstraintState.from_grid(grid)
    assert state.conflicts == [loc for loc, _ in find_conflicts(grid)]
    assert state.conflicts == [Location(1, 4), Location(4, 2)]
