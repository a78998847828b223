from __future__ import annotations

import os

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

DEFAULT_DATABASE_URL = "sqlite:///scores.db"


def database_url() -> str:
    return os.getenv("SCORE_DATABASE_URL", DEFAULT_DATABASE_URL)


def build_engine(url: str | None = None) -> Engine:
    url = url or database_url()
    if not url.startswith("sqlite"):
        return create_engine(url)
    if url in ("sqlite://", "sqlite:///:memory:"):
        # single shared connection, otherwise every session opens its own empty database
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    return create_engine(url, connect_args={"check_same_thread": False})


def init_db(engine: Engine) -> None:
    # registers ScoreEntryRow on the metadata
    from score_ranking.infrastructure.db import tables  # noqa: F401

    SQLModel.metadata.create_all(engine)


def create_session(engine: Engine) -> Session:
    init_db(engine)
    return Session(engine)
