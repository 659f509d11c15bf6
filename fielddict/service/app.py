"""FastAPI application entrypoint for fielddict service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..config import ConfigError
from ..logging import configure_logging
from ..orchestrator import DEFAULT_OBJECT, Orchestrator, RunOptions


class AnalyzeRequest(BaseModel):
    """Body of ``POST /analyze``; ``out_dir`` is only read for a cached LastModified CSV."""

    model_config = ConfigDict(populate_by_name=True)

    repo_root: str
    object_name: str = Field(default=DEFAULT_OBJECT, alias="object")
    org: Optional[str] = None
    out_dir: Optional[str] = None
    include_standard: bool = False
    dry_run: bool = False
    workers: int = 1


class AnalyzeResponse(BaseModel):
    object_name: str
    count: int
    rows: List[Dict[str, str]]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing the field analysis."""

    app = FastAPI(title="fielddict Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        options = RunOptions(
            object_name=payload.object_name,
            org=payload.org,
            out_dir=Path(payload.out_dir) if payload.out_dir else Path(payload.repo_root),
            repo_root=Path(payload.repo_root),
            include_standard=payload.include_standard,
            export_csv=False,
            open_output=False,
            dry_run=payload.dry_run,
            workers=max(payload.workers, 1),
            write_cache=False,
        )
        loop = asyncio.get_running_loop()
        rows = await loop.run_in_executor(None, orchestrator.analyze, options)
        return AnalyzeResponse(
            object_name=payload.object_name,
            count=len(rows),
            rows=[row.as_dict() for row in rows],
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, *, verbose: bool = False
) -> None:  # pragma: no cover - integration path
    import uvicorn

    configure_logging(verbose=verbose)
    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["create_app", "run_service"]
