from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .schemas import ClickRequest, MoveRequest, ResetRequest, RulesRequest, VariantRequest
from .session import GameSession


def create_app(session: Optional[GameSession] = None) -> FastAPI:
    app = FastAPI(title="Checkers Rules Engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = session if session is not None else GameSession()

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/valid-moves")
    def read_valid_moves(
        x: int = Query(..., ge=0),
        y: int = Query(..., ge=0),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_valid_moves(x, y)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/click")
    def click_cell(payload: ClickRequest, session: GameSession = Depends(get_session)):
        return session.click(payload)

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.make_move(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/reset")
    def reset_game(payload: Optional[ResetRequest] = None, session: GameSession = Depends(get_session)):
        return session.reset(payload)

    @app.post("/variant")
    def change_variant(payload: VariantRequest, session: GameSession = Depends(get_session)):
        return session.set_variant(payload)

    @app.post("/rules")
    def configure_rules(payload: RulesRequest, session: GameSession = Depends(get_session)):
        return session.configure_rules(payload)

    return app


app = create_app()
