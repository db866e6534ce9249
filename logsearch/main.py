"""FastAPI application serving the reference log search endpoint."""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request

from .config import settings
from .engine import SearchEngine
from .logging_setup import configure_logging
from .models import SearchResponse

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Log Search Service")


def get_engine(request: Request) -> SearchEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Search index is not loaded")
    return engine


@app.on_event("startup")
async def startup_event() -> None:
    if getattr(app.state, "engine", None) is None:
        app.state.engine = SearchEngine.from_directory(settings.data_dir)


@app.get("/health")
async def health(request: Request) -> dict:
    engine = get_engine(request)
    return {"records": len(engine.records), "terms": len(engine.index)}


@app.get("/search", response_model=SearchResponse)
async def search(request: Request, q: str = Query("", description="Search query")) -> SearchResponse:
    if not q:
        raise HTTPException(status_code=400, detail="Missing query parameter 'q'")
    return get_engine(request).search(q)


def run() -> None:
    logger.info("Starting server on %s:%s", settings.service_host, settings.service_port)
    uvicorn.run(app, host=settings.service_host, port=settings.service_port, log_config=None)


if __name__ == "__main__":
    run()
