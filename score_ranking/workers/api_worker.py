from __future__ import annotations

import logging
from typing import Annotated, Any

import uvicorn
from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Query, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from score_ranking.config.runtime import RuntimeSettings
from score_ranking.entities.score_entry import ScoreEntry
from score_ranking.errors import ValidationError
from score_ranking.infrastructure.db.db_score_entry_repository import DBScoreEntryRepository
from score_ranking.infrastructure.db.session import build_engine, create_session
from score_ranking.infrastructure.memory.in_memory_score_entry_repository import InMemoryScoreEntryRepository
from score_ranking.infrastructure.storage.json_file_score_entry_repository import JsonFileScoreEntryRepository
from score_ranking.services.demo_data import populate_demo_data
from score_ranking.services.interfaces.score_entry_repository import ScoreEntryRepository
from score_ranking.services.persistence import StoreMirror, hydrate_store
from score_ranking.services.selectors import ScoreSelectors
from score_ranking.services.store import RankedScoreStore
from score_ranking.services.validation import parse_score_submission
from score_ranking.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def entry_payload(entry: ScoreEntry, rank: int | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": entry.id,
        "score": entry.score,
        "time": entry.time,
        "timestamp": entry.timestamp.isoformat(),
        "status": entry.status.value,
    }
    if rank is not None:
        payload["rank"] = rank
    return payload


def ranked_payload(entries: tuple[ScoreEntry, ...]) -> list[dict[str, Any]]:
    return [entry_payload(entry, rank) for rank, entry in enumerate(entries, start=1)]


def get_store(request: Request) -> RankedScoreStore:
    return request.app.state.store


def get_selectors(request: Request) -> ScoreSelectors:
    return request.app.state.selectors


StoreDep = Annotated[RankedScoreStore, Depends(get_store)]
SelectorsDep = Annotated[ScoreSelectors, Depends(get_selectors)]

router = APIRouter(prefix="/scores")


@router.get("")
def list_scores(selectors: SelectorsDep) -> list[dict[str, Any]]:
    return ranked_payload(selectors.select_all())


@router.get("/top")
def top_scores(
    request: Request,
    selectors: SelectorsDep,
    limit: Annotated[int | None, Query(ge=0)] = None,
) -> list[dict[str, Any]]:
    if limit is None:
        limit = request.app.state.settings.top_limit
    return ranked_payload(selectors.select_top_n(limit))


@router.get("/top-three")
def top_three(selectors: SelectorsDep) -> list[dict[str, Any]]:
    return ranked_payload(selectors.select_top_three())


@router.get("/stats")
def score_stats(selectors: SelectorsDep) -> dict[str, Any]:
    return selectors.select_stats().to_payload()


@router.post("", status_code=status.HTTP_201_CREATED)
def add_score(store: StoreDep, payload: Annotated[dict[str, Any], Body()]) -> dict[str, Any]:
    try:
        submission = parse_score_submission(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"field": exc.field, "message": exc.message, "errors": exc.errors},
        ) from exc

    entry_id = store.add_score(submission.score, submission.time)
    for rank, entry in enumerate(store.entries, start=1):
        if entry.id == entry_id:
            return entry_payload(entry, rank)
    # another command removed it between add and lookup
    raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"entry {entry_id} no longer present")


@router.post("/demo")
def load_demo(store: StoreDep, selectors: SelectorsDep) -> list[dict[str, Any]]:
    populate_demo_data(store)
    return ranked_payload(selectors.select_all())


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_score(entry_id: str, store: StoreDep) -> Response:
    store.remove_score(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_scores(store: StoreDep) -> Response:
    store.clear_all_scores()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def create_app(store: RankedScoreStore, settings: RuntimeSettings) -> FastAPI:
    app = FastAPI(title="Score Ranking API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store
    app.state.selectors = ScoreSelectors(store)
    app.state.settings = settings

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)
    return app


def build_repository(settings: RuntimeSettings) -> ScoreEntryRepository:
    if settings.storage_backend == "json":
        return JsonFileScoreEntryRepository(settings.storage_path)
    if settings.storage_backend == "sqlite":
        return DBScoreEntryRepository(create_session(build_engine(settings.database_url)))
    return InMemoryScoreEntryRepository()


def build_app(settings: RuntimeSettings) -> FastAPI:
    store = RankedScoreStore()
    repository = build_repository(settings)

    hydrate_store(store, repository)
    if settings.load_demo_data and len(store) == 0:
        populate_demo_data(store)
    repository.save_all(store.entries)

    app = create_app(store, settings)
    app.state.mirror = StoreMirror(store, repository)
    return app


def main() -> None:
    settings = RuntimeSettings.from_env()
    configure_logging(settings.log_level)
    logger.info("api worker bootstrap (storage=%s)", settings.storage_backend)

    app = build_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
