from __future__ import annotations

from dataclasses import dataclass
import os

STORAGE_BACKENDS = ("memory", "json", "sqlite")


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RuntimeSettings:
    storage_backend: str
    storage_path: str
    database_url: str
    top_limit: int
    load_demo_data: bool
    api_host: str
    api_port: int
    log_level: str

    @classmethod
    def from_env(cls) -> "RuntimeSettings":
        backend = os.getenv("SCORE_STORAGE_BACKEND", "memory").strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"SCORE_STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, got {backend!r}"
            )
        return cls(
            storage_backend=backend,
            storage_path=os.getenv("SCORE_STORAGE_PATH", "scores.json"),
            database_url=os.getenv("SCORE_DATABASE_URL", "sqlite:///scores.db"),
            top_limit=max(1, int(os.getenv("SCORE_TOP_LIMIT", "10"))),
            load_demo_data=_parse_bool(os.getenv("SCORE_LOAD_DEMO_DATA"), False),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
