import logging
import random
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from ttt_engine.core.board import Board
from ttt_engine.core.utils import format_info

logger = logging.getLogger(__name__)

BASE_SCORE = 10
NO_MOVE = -1

# corners and center: every one of them is an optimal first move
OPENING_BOOK = (1, 3, 5, 7, 9)


@dataclass(frozen=True)
class Node:
    move: int
    score: Optional[int]


class SearchEngine:
    """Exhaustive minimax over the tic-tac-toe game tree.

    Scores are always from the agent's point of view: a win found at depth
    ``d`` scores ``10 - d``, a loss ``d - 10``, a draw 0. Even depths
    maximize and odd depths minimize.

    ``rng`` is anything with a ``choice(seq)`` method; it is only consulted
    for the opening move of an empty board.
    """

    def __init__(self, rng=None, opening_book: Optional[Sequence[int]] = OPENING_BOOK,
                 seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.opening_book = tuple(opening_book) if opening_book else ()
        self.nodes = 0

    def get_book_move(self, board: Board) -> Optional[int]:
        """Pick an opening move for an empty board, or None."""
        if board.occupied_count() != 0 or not self.opening_book:
            return None
        move = self.rng.choice(self.opening_book)
        logger.debug("Book move: %d", move)
        return move

    def search_best_move(self, board: Board) -> Node:
        book_move = self.get_book_move(board)
        if book_move is not None:
            return Node(book_move, None)

        self.nodes = 0
        start_time = time.perf_counter()
        node = self.minimax(board, 0)
        elapsed = time.perf_counter() - start_time
        logger.debug(format_info(node.move, node.score, self.nodes, elapsed))
        return node

    def minimax(self, board: Board, depth: int) -> Node:
        self.nodes += 1
        if board.is_draw():
            return Node(NO_MOVE, 0)

        candidates = []
        for cell in board.available_moves():
            child = board.apply_hypothetical(cell)
            # an immediate result ends the ply, remaining cells are not tried
            if child.agent_has_won():
                return Node(cell, BASE_SCORE - depth)
            if child.opponent_has_won():
                return Node(cell, depth - BASE_SCORE)
            score = self.minimax(child, depth + 1).score
            candidates.append(Node(cell, score))

        if depth % 2 == 0:
            # ties go to the highest cell
            return max(reversed(candidates), key=lambda node: node.score)
        # ties go to the lowest cell
        return min(candidates, key=lambda node: node.score)


def best_move(board: Board, rng=None) -> Node:
    return SearchEngine(rng=rng).search_best_move(board)
