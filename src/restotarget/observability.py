"""Observability: structured logs for targeting edit events."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("restotarget.session")


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Basic stderr logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_edit(
    logger: logging.Logger,
    operation: str,
    anchor_kind: str,
    anchor_id: int,
    edges_before: int,
    edges_after: int,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured record per relation edit."""
    payload: dict[str, Any] = {
        "operation": operation,
        "anchor_kind": anchor_kind,
        "anchor_id": anchor_id,
        "edges_before": edges_before,
        "edges_after": edges_after,
    }
    if extra:
        payload.update(extra)
    logger.debug("relation_edit", extra=payload)
