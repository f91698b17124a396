"""Input checks for callers of the engine.

The search assumes a well-formed position and does not check ranges or
overlaps itself; every transport layer runs ``validate_position`` first.
"""

from typing import List, Sequence, Tuple

from ttt_engine.core.board import CELLS, has_line

MAX_CELLS_PER_SIDE = 5


class InvalidPositionError(ValueError):
    """Raised when a position cannot occur in a game of tic-tac-toe."""


def _check_side(name: str, cells: Sequence[int]) -> List[int]:
    checked = []
    for cell in cells:
        # bool is an int subclass but never a cell
        if isinstance(cell, bool) or not isinstance(cell, int):
            raise InvalidPositionError(f"{name}: cell {cell!r} is not an integer")
        if cell not in CELLS:
            raise InvalidPositionError(f"{name}: cell {cell} is outside 1-9")
        if cell in checked:
            raise InvalidPositionError(f"{name}: cell {cell} is listed twice")
        checked.append(cell)
    if len(checked) > MAX_CELLS_PER_SIDE:
        raise InvalidPositionError(
            f"{name}: {len(checked)} cells claimed, at most {MAX_CELLS_PER_SIDE} allowed"
        )
    return checked


def validate_position(agent_cells: Sequence[int], opponent_cells: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Check both cell lists and return them as plain lists.

    Raises InvalidPositionError for cells outside 1-9, duplicates, a cell
    claimed by both sides, more than five cells for one side, or a position
    in which both sides hold a winning line.
    """
    agent = _check_side("agent_cells", agent_cells)
    opponent = _check_side("opponent_cells", opponent_cells)

    shared = sorted(set(agent) & set(opponent))
    if shared:
        raise InvalidPositionError(f"cells claimed by both sides: {shared}")
    if has_line(agent) and has_line(opponent):
        raise InvalidPositionError("both sides hold a winning line")
    return agent, opponent
