"""
Catalog Database
================
SQLite storage for categories and resources.
"""

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

from ..config import get_config


# Columns a resource update may touch
RESOURCE_COLUMNS = (
    "category_id", "name", "description", "url",
    "requires_auth", "note", "sort_order", "is_hidden",
)
CATEGORY_COLUMNS = ("name", "icon", "sort_order", "is_specialty")


class CatalogDB:
    """SQLite database for the managed catalog."""

    def __init__(self, db_path: Optional[str] = None):
        """Initialize catalog database.

        Args:
            db_path: Path to SQLite database. Defaults to <DATA_DIR>/catalog.db
        """
        if db_path is None:
            db_path = get_config().db_path("catalog.db")

        self.db_path = db_path
        self._init_database()

    @contextmanager
    def _get_connection(self):
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_database(self):
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS managed_categories (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    icon TEXT NOT NULL DEFAULT 'Circle',
                    sort_order INTEGER NOT NULL DEFAULT 0,
                    is_specialty INTEGER NOT NULL DEFAULT 1
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS managed_resources (
                    id TEXT PRIMARY KEY,
                    category_id TEXT NOT NULL
                        REFERENCES managed_categories(id) ON DELETE CASCADE,
                    name TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    url TEXT NOT NULL,
                    requires_auth INTEGER NOT NULL DEFAULT 0,
                    note TEXT,
                    sort_order INTEGER NOT NULL DEFAULT 0,
                    is_hidden INTEGER NOT NULL DEFAULT 0
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_resources_category
                ON managed_resources(category_id, sort_order)
            """)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_categories(self) -> List[Dict[str, Any]]:
        """All categories, general ones first, then by sort order."""
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT * FROM managed_categories
                ORDER BY is_specialty ASC, sort_order ASC
            """).fetchall()
        return [self._category_row(r) for r in rows]

    def get_category(self, category_id: str) -> Optional[Dict[str, Any]]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM managed_categories WHERE id = ?", (category_id,)
            ).fetchone()
        return self._category_row(row) if row else None

    def get_resources(self, category_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Resources ordered by sort order, optionally for one category."""
        with self._get_connection() as conn:
            if category_id is None:
                rows = conn.execute(
                    "SELECT * FROM managed_resources ORDER BY sort_order ASC, rowid ASC"
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM managed_resources WHERE category_id = ? "
                    "ORDER BY sort_order ASC, rowid ASC",
                    (category_id,),
                ).fetchall()
        return [self._resource_row(r) for r in rows]

    def get_resource(self, resource_id: str) -> Optional[Dict[str, Any]]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM managed_resources WHERE id = ?", (resource_id,)
            ).fetchone()
        return self._resource_row(row) if row else None

    def max_category_order(self, is_specialty: bool) -> int:
        """Highest sort order in a section (-1 when empty)."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT MAX(sort_order) FROM managed_categories WHERE is_specialty = ?",
                (int(is_specialty),),
            ).fetchone()
        return row[0] if row[0] is not None else -1

    def max_resource_order(self, category_id: str) -> int:
        """Highest sort order in a category (-1 when empty)."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT MAX(sort_order) FROM managed_resources WHERE category_id = ?",
                (category_id,),
            ).fetchone()
        return row[0] if row[0] is not None else -1

    def count_categories(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM managed_categories").fetchone()[0]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert_category(self, category: Dict[str, Any]):
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO managed_categories (id, name, icon, sort_order, is_specialty)
                VALUES (?, ?, ?, ?, ?)
            """, (
                category["id"],
                category["name"],
                category.get("icon") or "Circle",
                category.get("sort_order", 0),
                int(category.get("is_specialty", True)),
            ))

    def insert_resource(self, resource: Dict[str, Any]):
        with self._get_connection() as conn:
            self._insert_resource(conn, resource)

    def insert_many(self, categories: Iterable[Dict[str, Any]], resources: Iterable[Dict[str, Any]]):
        """Insert categories and resources in one transaction."""
        with self._get_connection() as conn:
            for category in categories:
                conn.execute("""
                    INSERT INTO managed_categories (id, name, icon, sort_order, is_specialty)
                    VALUES (?, ?, ?, ?, ?)
                """, (
                    category["id"],
                    category["name"],
                    category.get("icon") or "Circle",
                    category.get("sort_order", 0),
                    int(category.get("is_specialty", True)),
                ))
            for resource in resources:
                self._insert_resource(conn, resource)

    def _insert_resource(self, conn: sqlite3.Connection, resource: Dict[str, Any]):
        conn.execute("""
            INSERT INTO managed_resources (
                id, category_id, name, description, url,
                requires_auth, note, sort_order, is_hidden
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, (
            resource["id"],
            resource["category_id"],
            resource["name"],
            resource.get("description") or "",
            resource["url"],
            int(bool(resource.get("requires_auth", False))),
            resource.get("note"),
            resource.get("sort_order", 0),
            int(bool(resource.get("is_hidden", False))),
        ))

    def update_resource(self, resource_id: str, fields: Dict[str, Any]) -> bool:
        """Update the given columns. Returns False if the resource does not exist."""
        return self._update("managed_resources", RESOURCE_COLUMNS, resource_id, fields)

    def update_category(self, category_id: str, fields: Dict[str, Any]) -> bool:
        return self._update("managed_categories", CATEGORY_COLUMNS, category_id, fields)

    def _update(self, table: str, allowed: tuple, record_id: str, fields: Dict[str, Any]) -> bool:
        updates = {k: v for k, v in fields.items() if k in allowed}
        if not updates:
            return self._exists(table, record_id)

        values = [int(v) if isinstance(v, bool) else v for v in updates.values()]
        assignments = ", ".join(f"{column} = ?" for column in updates)
        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {table} SET {assignments} WHERE id = ?",
                (*values, record_id),
            )
            return cursor.rowcount > 0

    def _exists(self, table: str, record_id: str) -> bool:
        with self._get_connection() as conn:
            row = conn.execute(f"SELECT 1 FROM {table} WHERE id = ?", (record_id,)).fetchone()
        return row is not None

    def set_category_orders(self, orders: Dict[str, int]):
        with self._get_connection() as conn:
            conn.executemany(
                "UPDATE managed_categories SET sort_order = ? WHERE id = ?",
                [(order, category_id) for category_id, order in orders.items()],
            )

    def set_resource_orders(self, category_id: str, orders: Dict[str, int]):
        with self._get_connection() as conn:
            conn.executemany(
                "UPDATE managed_resources SET sort_order = ? WHERE id = ? AND category_id = ?",
                [(order, resource_id, category_id) for resource_id, order in orders.items()],
            )

    def delete_resource(self, resource_id: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM managed_resources WHERE id = ?", (resource_id,))
            return cursor.rowcount > 0

    def delete_category(self, category_id: str) -> int:
        """Delete a category and its resources. Returns the number of resources removed, -1 if absent."""
        with self._get_connection() as conn:
            removed = conn.execute(
                "DELETE FROM managed_resources WHERE category_id = ?", (category_id,)
            ).rowcount
            cursor = conn.execute("DELETE FROM managed_categories WHERE id = ?", (category_id,))
            if cursor.rowcount == 0:
                return -1
            return removed

    # ------------------------------------------------------------------
    # Row mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _category_row(row: sqlite3.Row) -> Dict[str, Any]:
        return {
            "id": row["id"],
            "name": row["name"],
            "icon": row["icon"],
            "sort_order": row["sort_order"],
            "is_specialty": bool(row["is_specialty"]),
        }

    @staticmethod
    def _resource_row(row: sqlite3.Row) -> Dict[str, Any]:
        return {
            "id": row["id"],
            "category_id": row["category_id"],
            "name": row["name"],
            "description": row["description"],
            "url": row["url"],
            "requires_auth": bool(row["requires_auth"]),
            "note": row["note"],
            "sort_order": row["sort_order"],
            "is_hidden": bool(row["is_hidden"]),
        }
