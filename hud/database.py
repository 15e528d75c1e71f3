# hud/database.py
"""
Persists the overlay's last screen position with aiosqlite.
One row per installation; nothing else about the overlay is stored.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import aiosqlite

import config

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenPosition:
    x: float
    y: float


class PositionStore:
    """A class to manage the SQLite connection holding screen positions."""

    def __init__(self, db_path: str = config.DB_NAME):
        self.db_path = db_path
        self.conn: Optional[aiosqlite.Connection] = None

    async def connect(self):
        """Opens the connection and makes sure the schema exists."""
        try:
            self.conn = await aiosqlite.connect(self.db_path)
            self.conn.row_factory = aiosqlite.Row
            log.info("Opened position store at %s.", self.db_path)
        except Exception:
            log.exception("!!! Failed to open position store at %s.", self.db_path)
            raise
        await self.init_db()

    async def close(self):
        """Closes the connection."""
        if self.conn:
            await self.conn.close()
            self.conn = None
            log.info("Position store closed.")

    async def init_db(self):
        await self.execute_query("""
            CREATE TABLE IF NOT EXISTS hud_positions (
                installation_id TEXT PRIMARY KEY,
                x REAL NOT NULL,
                y REAL NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
        """)

    async def execute_query(self, query: str, *params):
        """Executes a data-modifying query and commits it."""
        if not self.conn: raise ConnectionError("Position store not connected.")
        await self.conn.execute(query, params)
        await self.conn.commit()

    async def fetch_one_query(self, query: str, *params) -> Optional[aiosqlite.Row]:
        """Executes a query that is expected to return at most one row."""
        if not self.conn: raise ConnectionError("Position store not connected.")
        async with self.conn.execute(query, params) as cursor:
            return await cursor.fetchone()

    async def get_position(self, installation_id: str = config.INSTALLATION_ID) -> Optional[ScreenPosition]:
        row = await self.fetch_one_query(
            "SELECT x, y FROM hud_positions WHERE installation_id = ?", installation_id
        )
        if row is None:
            return None
        return ScreenPosition(x=row["x"], y=row["y"])

    async def save_position(self, position: ScreenPosition, installation_id: str = config.INSTALLATION_ID):
        await self.execute_query(
            """
            INSERT INTO hud_positions (installation_id, x, y, updated_at)
            VALUES (?, ?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT(installation_id) DO UPDATE SET
                x = excluded.x, y = excluded.y, updated_at = CURRENT_TIMESTAMP
            """,
            installation_id, position.x, position.y,
        )
        log.debug("Saved HUD position (%.1f, %.1f) for '%s'.", position.x, position.y, installation_id)
