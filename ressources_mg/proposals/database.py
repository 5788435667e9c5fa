"""
Proposals Database
==================
SQLite storage for community resource proposals.
"""

import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import get_config


class ProposalsDB:
    """SQLite database for resource proposals."""

    def __init__(self, db_path: Optional[str] = None):
        if db_path is None:
            db_path = get_config().db_path("proposals.db")

        self.db_path = db_path
        self._init_database()

    @contextmanager
    def _get_connection(self):
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_database(self):
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS resource_proposals (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    url TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    status TEXT NOT NULL DEFAULT 'pending',
                    category_id TEXT,
                    created_at TEXT NOT NULL
                )
            """)

    def insert(self, name: str, url: str, description: str) -> Dict[str, Any]:
        record = {
            "id": str(uuid.uuid4()),
            "name": name,
            "url": url,
            "description": description,
            "status": "pending",
            "category_id": None,
            "created_at": datetime.now().isoformat(),
        }
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO resource_proposals (id, name, url, description, status, category_id, created_at)
                VALUES (:id, :name, :url, :description, :status, :category_id, :created_at)
            """, record)
        return record

    def get(self, proposal_id: str) -> Optional[Dict[str, Any]]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM resource_proposals WHERE id = ?", (proposal_id,)
            ).fetchone()
        return dict(row) if row else None

    def list_proposals(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Proposals, newest first."""
        query = "SELECT * FROM resource_proposals"
        params: tuple = ()
        if status:
            query += " WHERE status = ?"
            params = (status,)
        query += " ORDER BY created_at DESC, rowid DESC"
        with self._get_connection() as conn:
            rows = conn.execute(query, params).fetchall()
        return [dict(r) for r in rows]

    def update(self, proposal_id: str, fields: Dict[str, Any]) -> bool:
        allowed = {k: v for k, v in fields.items() if k in ("name", "url", "description", "status", "category_id")}
        if not allowed:
            return self.get(proposal_id) is not None
        assignments = ", ".join(f"{column} = ?" for column in allowed)
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE resource_proposals SET {assignments} WHERE id = ?",
                (*allowed.values(), proposal_id),
            )
            return cursor.rowcount > 0
