"""FastAPI REST interface for the engine.

Stateless: every request carries the whole position and gets its own search.
Serve with any ASGI server, e.g. ``uvicorn interface.api:app``.
"""

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ttt_engine import __version__
from ttt_engine.config import CONFIG
from ttt_engine.core.board import Board
from ttt_engine.core.search import SearchEngine
from ttt_engine.validation import InvalidPositionError, validate_position

logger = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.ui.engine_name, version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.ui.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


class PositionRequest(BaseModel):
    agent_cells: List[int] = []
    opponent_cells: List[int] = []
    agent_moves_first: bool = False


def _board_from(req: PositionRequest) -> Board:
    try:
        agent, opponent = validate_position(req.agent_cells, req.opponent_cells)
    except InvalidPositionError as e:
        logger.info("Rejected position: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return Board(agent, opponent, req.agent_moves_first)


@app.get("/health")
def health():
    return {"status": "ok", "engine": CONFIG.ui.engine_name}


@app.post("/status")
def position_status(req: PositionRequest):
    board = _board_from(req)
    return {
        "agent_won": board.agent_has_won(),
        "opponent_won": board.opponent_has_won(),
        "draw": board.is_draw() and not (board.agent_has_won() or board.opponent_has_won()),
        "next_player": board.current_player().value,
        "available_moves": board.available_moves(),
    }


@app.post("/play")
def play_move(req: PositionRequest):
    board = _board_from(req)
    if board.agent_has_won() or board.opponent_has_won():
        raise HTTPException(status_code=400, detail="Game is already over")

    engine = SearchEngine(opening_book=CONFIG.opening_book(), seed=CONFIG.search.seed)
    node = engine.search_best_move(board)
    return {
        "move": node.move,
        "score": node.score,
        "next_player": board.current_player().value,
    }
