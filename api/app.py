"""HTTP API entrypoint for driving arena matches from a web UI."""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from arena.core.actions import Command
from infra.logger import configure_logging, get_logger
from infra.settings import Settings, load_settings
from runtime.registry import SessionRegistry

log = get_logger(__name__)

SideName = Literal["up", "left", "down", "right"]


class CreateMatchRequest(BaseModel):
    match_id: Optional[str] = None


class CommandRequest(BaseModel):
    actor: SideName
    action: Literal["move", "shield", "shoot"]
    direction: SideName


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[SessionRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Logging configuration; when omitted logging is left untouched
        registry: Session registry (a fresh one by default)
    """
    if settings is not None:
        configure_logging(settings.log_level, json=settings.log_json, logfile=settings.log_file)

    app = FastAPI(title="Laser Arena")
    app.state.registry = registry if registry is not None else SessionRegistry()

    # Allow the browser-based board (served from file:// or other origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _session(match_id: str):
        try:
            return app.state.registry.get(match_id)
        except KeyError as exc:
            raise HTTPException(404, f"Unknown match: {match_id}") from exc

    @app.post("/matches")
    def create_match(request: Optional[CreateMatchRequest] = None):
        match_id = request.match_id if request else None
        try:
            session = app.state.registry.create(match_id)
        except ValueError as exc:
            raise HTTPException(409, str(exc)) from exc
        frame = session.start()
        return {"match_id": session.match_id, "frame": frame.to_dict()}

    @app.get("/matches/{match_id}")
    def get_match(match_id: str):
        return _session(match_id).frame().to_dict()

    @app.post("/matches/{match_id}/commands")
    def submit_command(match_id: str, request: CommandRequest):
        session = _session(match_id)
        command = Command.from_dict(request.model_dump())
        return session.submit(command).to_dict()

    @app.post("/matches/{match_id}/reset")
    def reset_match(match_id: str):
        return _session(match_id).reset().to_dict()

    @app.delete("/matches/{match_id}")
    def delete_match(match_id: str):
        _session(match_id)
        app.state.registry.discard(match_id)
        return {"success": True}

    @app.get("/status")
    def status():
        return {"matches": len(app.state.registry)}

    log.info("Laser Arena API ready")
    return app


app = create_app(load_settings())
