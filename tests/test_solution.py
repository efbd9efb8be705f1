from boxgrid.bits import bit
from boxgrid.models import Frame, Grid, GridSize
from boxgrid.solution import assemble


def test_frames_fill_their_cells():
    gs = GridSize(2, 2)
    givens = [
        1, 2, 3, 4,
        3, 4, 1, 2,
        2, 3, 4, 1,
        4, 1, 2, 0,
    ]
    grid = Grid.load(gs, givens)
    # (4,4) is box 4, box-cell 4
    frames = [Frame(box=bit(4), box_cell=bit(4), row=bit(4), column=bit(4), value=bit(3))]

    out = assemble(grid, frames)

    assert out.values[-1] == 3
    assert out.values[:-1] == givens[:-1]
    assert grid.values == givens


def test_frames_in_non_square_boxes():
    gs = GridSize(3, 2)
    grid = Grid.load(gs, [0] * 36)
    # box 4 is band 2, stack 2; box-cell 5 is its second row, second column
    frames = [Frame(box=bit(4), box_cell=bit(5), row=bit(4), column=bit(5), value=bit(6))]

    out = assemble(grid, frames)
    assert out.rows()[3][4] == 6
    assert sum(out.values) == 6
