"""FastAPI REST interface for the engine."""

import threading

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from senet.config import CONFIG
from senet.core.search import SearchEngine
from senet.core.types import IllegalMoveError, Side
from senet.main import Engine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared engine instance, one live game.
engine = Engine()
_state_lock = threading.Lock()


class MoveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    src: int = Field(..., alias="from", ge=0, le=30)
    dst: int = Field(..., alias="to", ge=0, le=30)


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(None, ge=1)


class ResetRequest(BaseModel):
    seed: Optional[int] = None


def _side_name(side: Side) -> str:
    return side.name.lower()


def _snapshot():
    state = engine.state
    winner = state.get_winner()
    return {
        "board": [_side_name(Side(c)) for c in state.board[1:]],
        "turn": _side_name(state.get_current_player()),
        "last_roll": state.last_roll,
        "white_out": state.white_out,
        "black_out": state.black_out,
        "special_conditions": {str(sq): req for sq, req in state.special_conditions.items()},
        "legal_moves": [{"from": m.src, "to": m.dst} for m in state.get_possible_moves()],
        "is_game_over": state.is_game_over(),
        "winner": _side_name(winner) if winner != Side.EMPTY else None,
    }


@app.get("/board")
def get_board():
    with _state_lock:
        return _snapshot()


@app.post("/roll")
def roll():
    with _state_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        value = engine.roll_dice()
        return {"roll": value, "legal_moves": [{"from": m.src, "to": m.dst}
                                               for m in engine.get_possible_moves()]}


@app.post("/move")
def make_move(req: MoveRequest):
    with _state_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            engine.apply_move(req.src, req.dst)
        except IllegalMoveError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _snapshot()


@app.post("/pass")
def pass_turn():
    with _state_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if engine.get_possible_moves():
            raise HTTPException(status_code=400, detail="A legal move is available")
        engine.pass_turn()
        return _snapshot()


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _state_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if engine.state.last_roll == 0:
            raise HTTPException(status_code=409, detail="Roll before searching")
        depth = req.depth or engine.search.max_depth
        search_state = engine.state.copy()
        # per-request engine: node count and value are not shared between requests
        search = SearchEngine(engine.evaluator, depth, engine.search.debug)

    best = search.find_best_move(search_state)
    return {
        "best_move": {"from": best.src, "to": best.dst} if best else None,
        "value": search.best_value,
        "nodes": search.get_nodes_visited(),
        "depth": depth,
    }


@app.post("/reset")
def reset(req: ResetRequest = ResetRequest()):
    with _state_lock:
        engine.reset(seed=req.seed)
        return _snapshot()


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port)
