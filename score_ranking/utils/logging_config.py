import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"

# per-request lines from uvicorn drown out store activity below WARNING
QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Route every record to stdout at `level` (a number or a LOG_LEVEL name)."""
    if isinstance(level, str):
        level = level.strip().upper()

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))

    return root
