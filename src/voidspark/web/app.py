from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
import uvicorn

from ..config import Config, default_config, load_config
from ..repository import WorldRepository
from ..service import WorldService
from ..store import SessionStore, WorldNotFoundError

ASSETS_DIR = Path(__file__).resolve().parent / "assets"

logger = logging.getLogger(__name__)


class PromptBody(BaseModel):
    prompt: str


class WorldRef(BaseModel):
    id: str


def create_app(config: Optional[Config] = None, service: Optional[WorldService] = None) -> FastAPI:
    config = config or default_config()
    if service is None:
        service = WorldService(SessionStore(), WorldRepository(config.storage.worlds_dir))
    repository = service.repository or WorldRepository(config.storage.worlds_dir)

    app = FastAPI(title="Void Spark", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.mount("/worlds", StaticFiles(directory=repository.directory), name="worlds")

    @app.get("/", response_class=HTMLResponse)
    async def serve_index() -> HTMLResponse:
        index_path = ASSETS_DIR / "index.html"
        if not index_path.exists():
            raise HTTPException(status_code=500, detail="Index file missing.")
        return HTMLResponse(index_path.read_text(encoding="utf-8"))

    @app.post("/generate")
    def generate(body: PromptBody) -> dict:
        return service.generate(body.prompt).to_dict()

    @app.post("/party")
    def party(body: WorldRef) -> dict:
        try:
            return service.form_party(body.id).to_dict()
        except WorldNotFoundError:
            raise HTTPException(status_code=404, detail="session not found")

    @app.post("/explore")
    def explore(body: WorldRef) -> dict:
        try:
            return service.explore(body.id).to_dict()
        except WorldNotFoundError:
            raise HTTPException(status_code=404, detail="session not found")

    @app.get("/state")
    def state(id: str = "") -> dict:
        if not id:
            raise HTTPException(status_code=400, detail="id required")
        try:
            return service.state(id).to_dict()
        except WorldNotFoundError:
            raise HTTPException(status_code=404, detail="not found")

    @app.get("/api/latest-world")
    def latest_world() -> dict:
        latest = service.latest()
        if latest is None:
            raise HTTPException(status_code=404, detail="no worlds found")
        return {"latest": latest}

    return app


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the Void Spark world service.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML configuration file (built-in defaults when omitted).",
    )
    parser.add_argument("--host", default=None, help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on.")
    args = parser.parse_args(argv)

    config = load_config(args.config.resolve()) if args.config else default_config()
    logging.basicConfig(level=config.logging.level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = args.host or config.server.host
    port = args.port or config.server.port

    app = create_app(config)
    logger.info(f"Void Spark running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
