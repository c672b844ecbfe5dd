"""SQLite-backed store for persisted targeting relations."""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from ..ports.targeting_store import Anchor, TargetingStoreError


class SqliteTargetingStore:
    """Stores one JSON edge list per anchor."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_parent_dir()
        self._init_schema()

    def _ensure_parent_dir(self) -> None:
        path = Path(self._db_path)
        if path.parent.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Commit on success, roll back on error, always close."""
        conn = self._connect()
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS targeting_relations (
                    anchor_kind TEXT NOT NULL,
                    anchor_id INTEGER NOT NULL,
                    edges TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    PRIMARY KEY (anchor_kind, anchor_id)
                )
                """
            )

    def load(self, anchor: Anchor) -> list[dict[str, Any]]:
        try:
            with self._connection() as conn:
                row = conn.execute(
                    "SELECT edges FROM targeting_relations WHERE anchor_kind = ? AND anchor_id = ?",
                    (anchor.kind, anchor.id),
                ).fetchone()
        except sqlite3.Error as e:
            raise TargetingStoreError(f"load failed for {anchor.kind} {anchor.id}: {e}") from e
        if row is None:
            return []
        return json.loads(row["edges"])

    def save(self, anchor: Anchor, edges: list[dict[str, Any]]) -> None:
        payload = json.dumps(edges)
        try:
            with self._connection() as conn:
                conn.execute(
                    """
                    INSERT INTO targeting_relations (anchor_kind, anchor_id, edges, updated_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT (anchor_kind, anchor_id)
                    DO UPDATE SET edges = excluded.edges, updated_at = excluded.updated_at
                    """,
                    (anchor.kind, anchor.id, payload, datetime.now(timezone.utc).isoformat()),
                )
        except sqlite3.Error as e:
            raise TargetingStoreError(f"save failed for {anchor.kind} {anchor.id}: {e}") from e

    def updated_at(self, anchor: Anchor) -> datetime | None:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT updated_at FROM targeting_relations WHERE anchor_kind = ? AND anchor_id = ?",
                (anchor.kind, anchor.id),
            ).fetchone()
        if row is None:
            return None
        return datetime.fromisoformat(row["updated_at"])

    def anchors(self) -> list[Anchor]:
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT anchor_kind, anchor_id FROM targeting_relations ORDER BY anchor_kind, anchor_id"
            ).fetchall()
        return [Anchor(kind=row["anchor_kind"], id=row["anchor_id"]) for row in rows]
