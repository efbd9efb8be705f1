from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from boxgrid.engine import Solver
from boxgrid.errors import GridError
from boxgrid.models import Grid, GridSize, Solution
from boxgrid.puzzles import PRESETS, preset
from boxgrid.storage import list_saved, load_values, resolve_data_dir, save_values
from boxgrid.validation import validate_grid

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

# (box width, box height)
SUPPORTED_BOXES: List[Tuple[int, int]] = [(2, 2), (3, 2), (2, 3), (3, 3), (4, 3), (3, 4), (4, 4)]
DEFAULT_BOX = (3, 3)


def box_label(box: Tuple[int, int]) -> str:
    w, h = box
    n = w * h
    return f"{n}x{n} (boxes {w} wide x {h} tall)"


def cell_key(gs: GridSize, r: int, c: int) -> str:
    # include the box shape so changing it doesn't collide with old widget state
    return f"cell_{gs.box_width}x{gs.box_height}_{r}_{c}"


def reset_board(gs: GridSize) -> None:
    n = gs.size
    for r in range(n):
        for c in range(n):
            st.session_state[cell_key(gs, r, c)] = ""


def fill_board(gs: GridSize, values: List[int]) -> None:
    n = gs.size
    for i, v in enumerate(values):
        st.session_state[cell_key(gs, i // n, i % n)] = "" if v == 0 else str(v)


def parse_board(gs: GridSize) -> Tuple[List[int], List[str]]:
    """
    Read cell widget values from session_state and build a flat int list.
    Returns (values, errors). Empty string or '0' => 0.
    """
    n = gs.size
    errors: List[str] = []
    values: List[int] = [0] * gs.cell_count

    for r in range(n):
        for c in range(n):
            raw = str(st.session_state.get(cell_key(gs, r, c), "")).strip()
            if raw == "":
                continue

            if not raw.isdigit():
                errors.append(f"Cell ({r+1},{c+1}) is not a number: '{raw}'")
                continue

            v = int(raw)
            if 0 <= v <= n:
                values[r * n + c] = v
            else:
                errors.append(f"Cell ({r+1},{c+1}) out of range: {v} (allowed 1..{n}, or blank/0).")

    return values, errors


def grid_to_csv(grid: Grid) -> bytes:
    lines = [",".join(str(v) for v in row) for row in grid.rows()]
    return ("\n".join(lines) + "\n").encode("utf-8")


def render_grid_html(grid: Grid, title: str, givens: Optional[Grid] = None) -> None:
    """
    Render the grid with thick box borders using HTML/CSS.
    Cells that were empty in `givens` are highlighted.
    """
    gs = grid.grid_size
    n = gs.size
    rows = grid.rows()
    given_rows = givens.rows() if givens is not None else None

    html = [f"<div class='grid-wrap'><div class='grid-title'>{title}</div>"]
    html.append("<table class='boxgrid'>")
    for r in range(n):
        html.append("<tr>")
        for c in range(n):
            v = rows[r][c]
            cls = []
            if r % gs.box_height == 0:
                cls.append("top")
            if c % gs.box_width == 0:
                cls.append("left")
            if (r + 1) % gs.box_height == 0:
                cls.append("bottom")
            if (c + 1) % gs.box_width == 0:
                cls.append("right")
            if given_rows is not None and given_rows[r][c] == 0:
                cls.append("filled")
            cls_attr = f" class='{' '.join(cls)}'" if cls else ""
            disp = "" if v == 0 else str(v)
            html.append(f"<td{cls_attr}>{disp}</td>")
        html.append("</tr>")
    html.append("</table></div>")

    st.markdown("".join(html), unsafe_allow_html=True)


def history_df() -> pd.DataFrame:
    rows = st.session_state.get("history", [])
    if not rows:
        return pd.DataFrame(columns=["grid", "empty", "outcome", "ms", "assignments", "backtracks"])
    return pd.DataFrame(rows)


st.set_page_config(page_title="Box Grid Solver", layout="wide")

st.markdown(
    """
<style>
/* Make inputs larger and centered */
div[data-testid="stTextInput"] input {
    text-align: center;
    font-size: 20px !important;
    height: 2.6rem;
    padding: 0.25rem 0.25rem;
}
div[data-testid="stTextInput"] { margin-bottom: 0rem; }

/* Grid HTML output */
.grid-wrap { margin-top: 0.5rem; }
.grid-title { font-size: 1.05rem; font-weight: 600; margin: 0.5rem 0 0.35rem 0; }
table.boxgrid { border-collapse: collapse; }
table.boxgrid td {
    width: 2.6rem;
    height: 2.6rem;
    text-align: center;
    vertical-align: middle;
    font-size: 20px;
    border: 1px solid rgba(49, 51, 63, 0.25);
}
table.boxgrid td.top { border-top: 3px solid rgba(49, 51, 63, 0.65); }
table.boxgrid td.left { border-left: 3px solid rgba(49, 51, 63, 0.65); }
table.boxgrid td.bottom { border-bottom: 3px solid rgba(49, 51, 63, 0.65); }
table.boxgrid td.right { border-right: 3px solid rgba(49, 51, 63, 0.65); }
table.boxgrid td.filled { color: #1f6feb; }

.grid-spacer { height: 0.25rem; }
</style>
""",
    unsafe_allow_html=True,
)

st.title("Box Grid Solver")
st.caption("Leave cells blank (or enter 0). Allowed values: 1..N. Click **Solve** to get the first solution.")

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Settings")
    if "box" not in st.session_state:
        st.session_state.box = DEFAULT_BOX

    box = st.selectbox(
        "Grid shape",
        SUPPORTED_BOXES,
        index=SUPPORTED_BOXES.index(st.session_state.box),
        format_func=box_label,
    )
    if box != st.session_state.box:
        st.session_state.box = box
        reset_board(GridSize(*box))

    st.divider()
    preset_name = st.selectbox("Preset puzzle", list(PRESETS.keys()), key="preset_name")
    if st.button("Load preset", key="load_preset", use_container_width=True):
        gs_p, values_p = preset(preset_name)
        st.session_state.box = (gs_p.box_width, gs_p.box_height)
        fill_board(gs_p, values_p)
        st.rerun()

    if st.button("Reset board", use_container_width=True):
        reset_board(GridSize(*st.session_state.box))

    st.divider()
    st.caption(f"Saved puzzles: `{resolve_data_dir()}`")
    saved = list_saved()
    if saved:
        saved_name = st.selectbox("Saved puzzle", saved)
        if st.button("Load saved", use_container_width=True):
            gs_s = GridSize(*st.session_state.box)
            try:
                grid_s = Grid.load(gs_s, load_values(saved_name))
            except (GridError, ValueError) as e:
                st.error(str(e))
            else:
                fill_board(gs_s, grid_s.values)
                st.rerun()

    save_name = st.text_input("Save current board as", value="", key="save_name")
    if st.button("Save", key="save", use_container_width=True) and save_name.strip():
        values_s, errs = parse_board(GridSize(*st.session_state.box))
        if errs:
            st.error("Fix the input before saving.")
        else:
            try:
                saved_path = save_values(save_name.strip(), values_s)
            except ValueError as e:
                st.error(str(e))
            else:
                st.success(f"Saved to {saved_path}")

gs = GridSize(*st.session_state.box)
n = gs.size

# ---- Input grid in a form (prevents rerun on every keystroke) ----
st.subheader("Input")

with st.form("grid_form", clear_on_submit=False):
    # Build column widths with spacer columns between boxes
    spacer_w = 0.18
    widths = []
    for g in range(gs.box_height):
        widths.extend([1.0] * gs.box_width)
        if g != gs.box_height - 1:
            widths.append(spacer_w)

    for r in range(n):
        cols = st.columns(widths, gap="small")
        col_idx = 0
        for c in range(n):
            # insert a spacer column after each box
            if c > 0 and c % gs.box_width == 0:
                col_idx += 1  # skip spacer column
            with cols[col_idx]:
                key = cell_key(gs, r, c)
                if key not in st.session_state:
                    st.session_state[key] = ""
                st.text_input(
                    label="",
                    key=key,
                    label_visibility="collapsed",
                    placeholder="",
                )
            col_idx += 1

        # horizontal spacer between bands
        if (r + 1) % gs.box_height == 0 and (r + 1) != n:
            st.markdown("<div class='grid-spacer'></div>", unsafe_allow_html=True)

    colA, colB, colC = st.columns([1, 1, 2])
    validate_clicked = colA.form_submit_button("Validate", use_container_width=True)
    solve_clicked = colB.form_submit_button("Solve", use_container_width=True)

# ---- Actions ----
if validate_clicked or solve_clicked:
    values, parse_errors = parse_board(gs)
    if parse_errors:
        st.error("Please fix these input issues:")
        st.write("\n".join([f"- {e}" for e in parse_errors]))
    else:
        try:
            grid = Grid.load(gs, values)
        except GridError as e:
            st.error(str(e))
            st.stop()

        ok, msg = validate_grid(grid)
        if not ok:
            st.error(msg)
        else:
            st.success("Board looks valid.")
            render_grid_html(grid, "Current board (preview)")

            if solve_clicked:
                with st.spinner("Solving..."):
                    result = Solver(grid).solve()

                stats = result.stats
                st.session_state.setdefault("history", []).append(
                    {
                        "grid": str(gs),
                        "empty": grid.empty_count(),
                        "outcome": "solved" if isinstance(result, Solution) else "no solution",
                        "ms": round(stats.elapsed_ms, 2),
                        "assignments": stats.assignments,
                        "backtracks": stats.backtracks,
                    }
                )

                if not isinstance(result, Solution):
                    st.error(f"No solution found. {result.reason}")
                else:
                    st.success(f"Solution found in {stats.elapsed_ms:.1f} ms ✅")
                    render_grid_html(result.grid, "Solution", givens=grid)

                    st.download_button(
                        "Download solution as CSV",
                        data=grid_to_csv(result.grid),
                        file_name=f"boxgrid_solution_{n}x{n}.csv",
                        mime="text/csv",
                        use_container_width=False,
                    )
else:
    # Always show a preview (readable) even before submitting
    values, _ = parse_board(gs)
    render_grid_html(Grid.load(gs, values), "Current board (preview)")

st.subheader("Run history")
st.dataframe(history_df(), use_container_width=True, hide_index=True)
