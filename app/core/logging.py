from __future__ import annotations

import logging
from collections.abc import Iterable

QUIET_PATHS = frozenset({"/healthz", "/ping", "/api/health"})


class _QuietPathFilter(logging.Filter):
    """Drop uvicorn access lines for health-check endpoints.

    uvicorn.access records carry ``(client, method, path, http_version, status)``
    as their args; anything shaped differently is passed through.
    """

    def __init__(self, paths: Iterable[str]) -> None:
        super().__init__()
        self._paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        path = str(args[2]).partition("?")[0]
        return path not in self._paths


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("uvicorn.access").addFilter(_QuietPathFilter(QUIET_PATHS))
