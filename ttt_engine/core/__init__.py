"""Core engine components: board model and minimax search."""

from .board import Board, Player, WINNING_LINES, has_line
from .search import SearchEngine, Node, NO_MOVE, OPENING_BOOK, best_move
