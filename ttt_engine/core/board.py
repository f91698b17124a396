"""Immutable 3x3 board: cells 1..9 claimed by the agent or its opponent."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional

CELLS = tuple(range(1, 10))

WINNING_LINES = (
    frozenset((1, 2, 3)),
    frozenset((4, 5, 6)),
    frozenset((7, 8, 9)),
    frozenset((1, 4, 7)),
    frozenset((2, 5, 8)),
    frozenset((3, 6, 9)),
    frozenset((1, 5, 9)),
    frozenset((3, 5, 7)),
)


class Player(Enum):
    AGENT = "agent"
    OPPONENT = "opponent"


def has_line(cells: Iterable[int]) -> bool:
    """True if ``cells`` fully contains one of the eight winning triples."""
    cells = frozenset(cells)
    if len(cells) < 3:
        return False
    return any(line <= cells for line in WINNING_LINES)


@dataclass(frozen=True)
class Board:
    agent_cells: FrozenSet[int] = field(default_factory=frozenset)
    opponent_cells: FrozenSet[int] = field(default_factory=frozenset)
    agent_moves_first: Optional[bool] = None

    def __post_init__(self):
        # accept any iterable, store frozensets
        object.__setattr__(self, "agent_cells", frozenset(self.agent_cells))
        object.__setattr__(self, "opponent_cells", frozenset(self.opponent_cells))

    def occupied_count(self) -> int:
        return len(self.agent_cells | self.opponent_cells)

    def is_draw(self) -> bool:
        """Full board. Callers check for a winner first."""
        return self.occupied_count() == 9

    def agent_has_won(self) -> bool:
        return has_line(self.agent_cells)

    def opponent_has_won(self) -> bool:
        return has_line(self.opponent_cells)

    def available_moves(self) -> List[int]:
        occupied = self.agent_cells | self.opponent_cells
        return [cell for cell in CELLS if cell not in occupied]

    def current_player(self) -> Player:
        """Side to move, from move parity and who opened.

        An unset ``agent_moves_first`` counts as False: the opponent opens.
        """
        agent_first = bool(self.agent_moves_first)
        even = self.occupied_count() % 2 == 0
        if even == agent_first:
            return Player.AGENT
        return Player.OPPONENT

    def apply_hypothetical(self, cell: int) -> "Board":
        """Return a copy with ``cell`` claimed by the side to move."""
        if self.current_player() is Player.AGENT:
            return Board(self.agent_cells | {cell}, self.opponent_cells, self.agent_moves_first)
        return Board(self.agent_cells, self.opponent_cells | {cell}, self.agent_moves_first)
