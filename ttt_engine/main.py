from typing import List, Optional, Sequence

from ttt_engine.config import CONFIG
from ttt_engine.core.board import Board, Player
from ttt_engine.core.search import NO_MOVE, SearchEngine


def make_search(seed: Optional[int] = None) -> SearchEngine:
    """SearchEngine set up from CONFIG; an explicit seed wins over the configured one."""
    return SearchEngine(opening_book=CONFIG.opening_book(),
                        seed=seed if seed is not None else CONFIG.search.seed)


def play(agent_cells: Sequence[int], opponent_cells: Sequence[int], agent_moves_first: bool = False,
         search: Optional[SearchEngine] = None) -> int:
    """Return the agent's best cell for this position, or -1 on a full board."""
    board = Board(agent_cells, opponent_cells, agent_moves_first)
    search = search or make_search()
    return search.search_best_move(board).move


class Engine:
    """One game between a human and the agent.

    The side that moves first plays ``X``.
    """

    def __init__(self, agent_moves_first: bool = False, search: Optional[SearchEngine] = None):
        self.agent_moves_first = agent_moves_first
        self.search = search or make_search()
        self.agent_cells: List[int] = []
        self.opponent_cells: List[int] = []

    @property
    def board(self) -> Board:
        return Board(self.agent_cells, self.opponent_cells, self.agent_moves_first)

    @property
    def agent_mark(self) -> str:
        return "X" if self.agent_moves_first else "O"

    @property
    def opponent_mark(self) -> str:
        return "O" if self.agent_moves_first else "X"

    def winner(self) -> Optional[Player]:
        board = self.board
        if board.agent_has_won():
            return Player.AGENT
        if board.opponent_has_won():
            return Player.OPPONENT
        return None

    def is_over(self) -> bool:
        return self.winner() is not None or self.board.is_draw()

    def make_move(self, cell: int) -> bool:
        """Claim a cell for the human. Returns True if legal."""
        board = self.board
        if self.is_over() or board.current_player() is not Player.OPPONENT:
            return False
        if cell not in board.available_moves():
            return False
        self.opponent_cells.append(cell)
        return True

    def agent_move(self) -> int:
        """Let the agent pick and claim a cell. Returns -1 if it cannot move."""
        board = self.board
        if self.is_over() or board.current_player() is not Player.AGENT:
            return NO_MOVE
        move = self.search.search_best_move(board).move
        if move != NO_MOVE:
            self.agent_cells.append(move)
        return move

    def result(self) -> str:
        """Outcome from the human's side, empty while the game is running."""
        winner = self.winner()
        if winner is Player.AGENT:
            return "You lose"
        if winner is Player.OPPONENT:
            return "You win"
        if self.board.is_draw():
            return "It's a draw"
        return ""

    def render(self) -> str:
        marks = []
        for cell in range(1, 10):
            if cell in self.agent_cells:
                marks.append(self.agent_mark)
            elif cell in self.opponent_cells:
                marks.append(self.opponent_mark)
            else:
                marks.append(str(cell))
        rows = [" | ".join(marks[i:i + 3]) for i in range(0, 9, 3)]
        return "\n---------\n".join(rows)
