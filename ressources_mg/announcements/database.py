"""
Announcements Database
======================
SQLite storage for announcement banners.
"""

import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import get_config


class AnnouncementsDB:
    """SQLite database for announcements."""

    def __init__(self, db_path: Optional[str] = None):
        if db_path is None:
            db_path = get_config().db_path("announcements.db")

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
                CREATE TABLE IF NOT EXISTS announcements (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    message TEXT NOT NULL,
                    type TEXT NOT NULL DEFAULT 'info',
                    is_active INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT NOT NULL,
                    updated_at TEXT
                )
            """)

    def insert(self, title: str, message: str, type_: str, is_active: bool) -> Dict[str, Any]:
        now = datetime.now().isoformat()
        record = {
            "id": str(uuid.uuid4()),
            "title": title,
            "message": message,
            "type": type_,
            "is_active": is_active,
            "created_at": now,
            "updated_at": now,
        }
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO announcements (id, title, message, type, is_active, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (
                record["id"], title, message, type_, int(is_active),
                record["created_at"], record["updated_at"],
            ))
        return record

    def list_announcements(self, active_only: bool) -> List[Dict[str, Any]]:
        """Announcements, newest first."""
        query = "SELECT * FROM announcements"
        if active_only:
            query += " WHERE is_active = 1"
        query += " ORDER BY created_at DESC, rowid DESC"
        with self._get_connection() as conn:
            rows = conn.execute(query).fetchall()
        return [self._row(r) for r in rows]

    def get(self, announcement_id: str) -> Optional[Dict[str, Any]]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM announcements WHERE id = ?", (announcement_id,)
            ).fetchone()
        return self._row(row) if row else None

    def update(self, announcement_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields and stamp updated_at."""
        allowed = {k: v for k, v in fields.items() if k in ("title", "message", "type", "is_active")}
        allowed["updated_at"] = datetime.now().isoformat()
        values = [int(v) if isinstance(v, bool) else v for v in allowed.values()]
        assignments = ", ".join(f"{column} = ?" for column in allowed)
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE announcements SET {assignments} WHERE id = ?",
                (*values, announcement_id),
            )
            return cursor.rowcount > 0

    def delete(self, announcement_id: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM announcements WHERE id = ?", (announcement_id,))
            return cursor.rowcount > 0

    @staticmethod
    def _row(row: sqlite3.Row) -> Dict[str, Any]:
        record = dict(row)
        record["is_active"] = bool(record["is_active"])
        return record
