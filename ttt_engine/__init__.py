"""Perfect-play tic-tac-toe: board model, minimax search and a game wrapper."""

from .core import Board, Player, SearchEngine, Node, NO_MOVE
from .main import Engine, play
from .validation import InvalidPositionError, validate_position

__version__ = "1.0.0"
