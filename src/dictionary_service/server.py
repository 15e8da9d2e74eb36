"""HTTP API.

Routes:
  GET /health                    liveness
  GET /api/v1/words/{word}       exact lookup
  GET /api/v1/suggest/{prefix}   prefix autocomplete (?limit=N)
  GET /api/v1/stats              dictionary size

Anything else falls through to the optional static frontend.

Run with ``python -m dictionary_service.server`` or ``dictionary-service serve``.
"""

from __future__ import annotations

import asyncio
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, cast

import structlog
import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from dictionary_service import __version__
from dictionary_service.config import Settings
from dictionary_service.engine import DEFAULT_SUGGEST_LIMIT, LookupEngine
from dictionary_service.errors import DictionaryError, ErrorCode
from dictionary_service.logging_config import configure_logging
from dictionary_service.models.api import HealthOutput, LookupOutput, StatsOutput, SuggestOutput
from dictionary_service.state import AppState, load_state

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from starlette.responses import Response

log = structlog.get_logger()

_STATUS_BY_CODE = {
    ErrorCode.WORD_NOT_FOUND: 404,
    ErrorCode.INVALID_INPUT: 400,
}


def get_engine(request: Request) -> LookupEngine:
    state: AppState = request.app.state.dictionary
    return state.engine


EngineDep = Annotated[LookupEngine, Depends(get_engine)]

router = APIRouter()


@router.get("/health")
async def health() -> HealthOutput:
    return HealthOutput()


# ":path" keeps words such as "and/or" in one parameter
@router.get("/api/v1/words/{word:path}")
async def lookup_word(word: str, engine: EngineDep) -> LookupOutput:
    meanings, found = engine.lookup(word)
    if not found:
        raise DictionaryError(ErrorCode.WORD_NOT_FOUND, f"Word not found: {word!r}")
    return LookupOutput(word=word, meanings=list(meanings or ()))


@router.get("/api/v1/suggest/{prefix:path}")
async def suggest_words(
    prefix: str, engine: EngineDep, limit: int = DEFAULT_SUGGEST_LIMIT
) -> SuggestOutput:
    suggestions = engine.suggest(prefix, limit)
    return SuggestOutput(prefix=prefix, suggestions=suggestions, count=len(suggestions))


@router.get("/api/v1/stats")
async def stats(request: Request) -> StatsOutput:
    state: AppState = request.app.state.dictionary
    return StatsOutput(total_words=state.engine.count(), built_at=state.built_at)


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


async def _dictionary_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = cast(DictionaryError, exc)
    status = _STATUS_BY_CODE.get(error.code, 500)
    return JSONResponse(status_code=status, content=error.to_dict())


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    validation = cast(RequestValidationError, exc)
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in validation.errors()
    )
    error = DictionaryError(ErrorCode.INVALID_INPUT, detail)
    return JSONResponse(status_code=400, content=error.to_dict())


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def _log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    log.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


# ---------------------------------------------------------------------------
# Static frontend
# ---------------------------------------------------------------------------


def _mount_static(app: FastAPI, static_dir: Path) -> None:
    if not static_dir.is_dir():
        log.debug("static_dir_missing", static_dir=str(static_dir))
        return

    root = static_dir.resolve()
    index = root / "index.html"

    @app.get("/{path:path}", include_in_schema=False)
    async def serve_static(path: str) -> FileResponse:
        # API paths never fall through to the frontend
        if path.startswith("api/") or path == "health":
            raise HTTPException(status_code=404)
        candidate = (root / path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
        # Unknown paths go to the SPA router
        if index.is_file():
            return FileResponse(index)
        raise HTTPException(status_code=404)

    log.info("static_files_enabled", static_dir=str(root))


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(settings: Settings | None = None, state: AppState | None = None) -> FastAPI:
    """Build the FastAPI app.

    With ``state`` the dictionary is already loaded; otherwise the lifespan
    loads ``settings.dictionary.path`` before the first request is accepted.
    """
    settings = settings or (state.settings if state else Settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_state = state if state is not None else await load_state(settings)
        app.state.dictionary = app_state
        log.info(
            "server_ready",
            word_count=app_state.engine.count(),
            source=app_state.source_path,
        )
        yield

    app = FastAPI(title="Dictionary Service", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    # Registered last so it wraps CORS and sees every response
    app.middleware("http")(_log_requests)

    app.add_exception_handler(DictionaryError, _dictionary_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(router)
    if settings.server.static_dir:
        _mount_static(app, Path(settings.server.static_dir))
    return app


def run(settings: Settings) -> None:
    """Load the dictionary, then serve until interrupted.

    The dictionary is loaded before binding the port so a bad path fails fast
    with a non-zero exit instead of a half-started server.
    """
    configure_logging(settings.logging)
    try:
        state = asyncio.run(load_state(settings))
    except DictionaryError as exc:
        log.error("startup_failed", code=exc.code.value, message=exc.message)
        sys.exit(1)

    app = create_app(settings, state)
    log.info("server_starting", host=settings.server.host, port=settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


def main() -> None:
    run(Settings())


if __name__ == "__main__":
    main()
