"""Root logging setup shared by the API server and the CLI."""

from __future__ import annotations

import logging

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, logging.INFO)


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    resolved_level = _resolve_level(level)
    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT)
    logging.getLogger("kabir_api").setLevel(resolved_level)
    _CONFIGURED = True
