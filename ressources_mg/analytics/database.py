"""
Analytics Database
==================
SQLite storage for resource clicks and search queries.
"""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import get_config


class AnalyticsDB:
    """SQLite database for analytics events."""

    def __init__(self, db_path: Optional[str] = None):
        if db_path is None:
            db_path = get_config().db_path("analytics.db")

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
                CREATE TABLE IF NOT EXISTS analytics_resource_clicks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    resource_id TEXT NOT NULL,
                    resource_name TEXT NOT NULL,
                    category_id TEXT NOT NULL,
                    clicked_at TEXT NOT NULL
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS analytics_search_queries (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    query TEXT NOT NULL,
                    result_count INTEGER NOT NULL DEFAULT 0,
                    searched_at TEXT NOT NULL
                )
            """)

            conn.execute("CREATE INDEX IF NOT EXISTS idx_clicks_at ON analytics_resource_clicks(clicked_at)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_searches_at ON analytics_search_queries(searched_at)")

    def insert_click(self, resource_id: str, resource_name: str, category_id: str,
                     clicked_at: Optional[datetime] = None):
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO analytics_resource_clicks (resource_id, resource_name, category_id, clicked_at)
                VALUES (?, ?, ?, ?)
            """, (resource_id, resource_name, category_id, (clicked_at or datetime.now()).isoformat()))

    def insert_search(self, query: str, result_count: int, searched_at: Optional[datetime] = None):
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO analytics_search_queries (query, result_count, searched_at)
                VALUES (?, ?, ?)
            """, (query, result_count, (searched_at or datetime.now()).isoformat()))

    def get_clicks_since(self, since: datetime) -> List[Dict[str, Any]]:
        """Clicks recorded at or after `since`, oldest first."""
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT resource_id, resource_name, category_id, clicked_at
                FROM analytics_resource_clicks
                WHERE clicked_at >= ?
                ORDER BY id ASC
            """, (since.isoformat(),)).fetchall()
        return [dict(r) for r in rows]

    def get_searches_since(self, since: datetime) -> List[Dict[str, Any]]:
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT query, result_count, searched_at
                FROM analytics_search_queries
                WHERE searched_at >= ?
                ORDER BY id ASC
            """, (since.isoformat(),)).fetchall()
        return [dict(r) for r in rows]
