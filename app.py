from __future__ import annotations

from typing import List, Optional, Tuple

import streamlit as st

from dynamic_sudoku import SUPPORTED_SIZES, Board, Sudoku, SudokuError, can_generate, resolve_config
from dynamic_sudoku.log import get_logger
from dynamic_sudoku.render import block_edges, board_to_csv

logger = get_logger("app")
CONFIG = resolve_config()


def cell_key(n: int, r: int, c: int) -> str:
    # include N so changing size doesn't collide with old widget state
    return f"cell_{n}_{r}_{c}"


def game() -> Sudoku:
    return st.session_state.game


def sync_inputs(g: Sudoku) -> None:
    """Copy the engine's board into the cell widgets."""
    board = g.board
    for r in range(g.size):
        for c in range(g.size):
            v = board[r][c]
            st.session_state[cell_key(g.size, r, c)] = "" if v == 0 else str(v)


def parse_seed(raw: str) -> Optional[int]:
    raw = raw.strip()
    if raw == "":
        return None
    if not raw.lstrip("-").isdigit():
        st.session_state.flash = [("error", f"Seed must be an integer, got '{raw}'.")]
        return None
    return int(raw)


def parse_board(n: int) -> Tuple[Board, List[str]]:
    """
    Read cell widget values from session_state and build an int board.
    Returns (board, errors). Empty string or '0' => 0.
    """
    errors: List[str] = []
    board: Board = [[0] * n for _ in range(n)]

    for r in range(n):
        for c in range(n):
            raw = str(st.session_state.get(cell_key(n, r, c), "")).strip()
            if raw == "":
                continue

            if not raw.isdigit():
                errors.append(f"Cell ({r+1},{c+1}) is not a number: '{raw}'")
                continue

            board[r][c] = int(raw)

    return board, errors


def apply_inputs() -> List[str]:
    """Push edited cells into the engine; the engine decides what is allowed."""
    g = game()
    board, errors = parse_board(g.size)
    current = g.board
    for r in range(g.size):
        for c in range(g.size):
            if g.is_locked(r, c) or board[r][c] == current[r][c]:
                continue
            try:
                g.set_cell(r, c, board[r][c])
            except SudokuError as e:
                errors.append(f"Cell ({r+1},{c+1}): {e}")
    return errors


# -----------------------------
# Callbacks (run before the rerun, so widget state may be written)
# -----------------------------

def new_game(generate: bool) -> None:
    n = int(st.session_state.size)
    seed = parse_seed(st.session_state.seed)
    g = Sudoku(n, seed=seed)
    g.memorized_solution = bool(st.session_state.memorized)
    if generate and can_generate(n):
        g.generate()
        logger.info("New %dx%d puzzle (seed=%s)", n, n, seed)
    st.session_state.game = g
    sync_inputs(g)


def on_validate() -> None:
    errors = apply_inputs()
    if errors:
        st.session_state.flash = [("error", "Please fix these input issues:\n" + "\n".join(f"- {e}" for e in errors))]
    elif game().validate():
        st.session_state.flash = [("success", "Board looks valid.")]
    else:
        st.session_state.flash = [("error", "Conflict: a value appears twice in a row, column or box.")]


def on_solve() -> None:
    errors = apply_inputs()
    if errors:
        st.session_state.flash = [("error", "Please fix these input issues:\n" + "\n".join(f"- {e}" for e in errors))]
        return

    g = game()
    g.memorized_solution = bool(st.session_state.memorized)
    if g.solve_current():
        sync_inputs(g)
        st.session_state.flash = [("success", "Solution found ✅")]
        st.session_state.solved = g.board
    else:
        st.session_state.flash = [("error", "No solution found (the puzzle may be unsolvable).")]


THIN = "1px solid #ccc"
THICK = "3px solid #555"


def cell_style(r: int, c: int, base: int) -> str:
    """Inline borders: thick on every block edge, thin elsewhere."""
    top, left, bottom, right = (THICK if edge else THIN for edge in block_edges(r, c, base))
    return f"border-top:{top};border-left:{left};border-bottom:{bottom};border-right:{right}"


def render_board_html(g: Sudoku, board: Board, title: str) -> None:
    """Board as an HTML table with block borders taken from the engine."""
    html = [f"<p><b>{title}</b></p><table class='sudoku'>"]
    for r in range(g.size):
        html.append("<tr>")
        for c in range(g.size):
            v = board[r][c]
            html.append(f"<td style='{cell_style(r, c, g.base)}'>{'' if v == 0 else v}</td>")
        html.append("</tr>")
    html.append("</table>")

    st.markdown("".join(html), unsafe_allow_html=True)


st.set_page_config(page_title="Dynamic Sudoku", layout="wide")

st.markdown(
    """
<style>
div[data-testid="stTextInput"] input { text-align: center; font-size: 20px !important; }
table.sudoku { border-collapse: collapse; }
table.sudoku td { width: 2.6rem; height: 2.6rem; text-align: center; font-size: 20px; }
.sudoku-spacer { height: 0.25rem; }
</style>
""",
    unsafe_allow_html=True,
)

st.title("Dynamic Sudoku")
st.caption(
    "Generate a puzzle, or leave the board blank and type your own (blank or 0 = empty). "
    "Grey cells are clues and cannot be changed."
)

# ---- Session defaults ----
if "size" not in st.session_state:
    st.session_state.size = CONFIG.size if CONFIG.size in SUPPORTED_SIZES else SUPPORTED_SIZES[1]
if "seed" not in st.session_state:
    st.session_state.seed = "" if CONFIG.seed is None else str(CONFIG.seed)
if "memorized" not in st.session_state:
    st.session_state.memorized = CONFIG.memorized_solution
if "game" not in st.session_state:
    st.session_state.game = Sudoku(int(st.session_state.size), seed=CONFIG.seed)

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Settings")
    st.selectbox("Grid size", SUPPORTED_SIZES, key="size", on_change=new_game, args=(False,))
    st.text_input("Seed (optional)", key="seed")
    st.checkbox("Reveal memorized solution on Solve", key="memorized")

    st.divider()
    generatable = can_generate(int(st.session_state.size))
    st.button(
        "New puzzle", use_container_width=True, on_click=new_game, args=(True,), disabled=not generatable
    )
    if not generatable:
        st.warning("Random puzzles are only generated up to 9x9. Use the blank board to enter a 16x16 puzzle.")
    st.button("Blank board", use_container_width=True, on_click=new_game, args=(False,))

g = game()
n, base = g.size, g.base

# ---- Input grid in a form (prevents rerun on every keystroke) ----
st.subheader("Board")

with st.form("sudoku_form", clear_on_submit=False):
    # Build column widths with spacer columns between subgrids
    spacer_w = 0.18
    widths = []
    for b in range(base):
        widths.extend([1.0] * base)
        if b != base - 1:
            widths.append(spacer_w)

    for r in range(n):
        cols = st.columns(widths, gap="small")
        col_idx = 0
        for c in range(n):
            if c > 0 and c % base == 0:
                col_idx += 1  # skip spacer column
            with cols[col_idx]:
                key = cell_key(n, r, c)
                if key not in st.session_state:
                    st.session_state[key] = ""
                st.text_input(
                    label=f"r{r+1}c{c+1}",
                    key=key,
                    label_visibility="collapsed",
                    disabled=g.is_locked(r, c),
                )
            col_idx += 1

        if (r + 1) % base == 0 and (r + 1) != n:
            st.markdown("<div class='sudoku-spacer'></div>", unsafe_allow_html=True)

    colA, colB, _ = st.columns([1, 1, 2])
    colA.form_submit_button("Validate", use_container_width=True, on_click=on_validate)
    colB.form_submit_button("Solve", use_container_width=True, on_click=on_solve)

# ---- Feedback ----
for kind, msg in st.session_state.pop("flash", []):
    if kind == "success":
        st.success(msg)
    else:
        st.error(msg)

solved = st.session_state.pop("solved", None)
if solved is not None:
    render_board_html(g, solved, "Solution")
    st.download_button(
        "Download solution as CSV",
        data=board_to_csv(solved),
        file_name=f"sudoku_solution_{n}x{n}.csv",
        mime="text/csv",
    )
else:
    render_board_html(g, g.board, "Current board (preview)")
