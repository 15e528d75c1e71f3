# tests/test_position_store.py
import unittest
import tempfile
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hud.database import PositionStore, ScreenPosition

class TestPositionStore(unittest.IsolatedAsyncioTestCase):
    """Test suite for the persisted screen position."""

    async def asyncSetUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.store = PositionStore(os.path.join(self.tmpdir.name, "hud.db"))
        await self.store.connect()

    async def asyncTearDown(self):
        await self.store.close()
        self.tmpdir.cleanup()

    async def test_no_position_saved(self):
        self.assertIsNone(await self.store.get_position())

    async def test_save_and_load(self):
        await self.store.save_position(ScreenPosition(x=120.0, y=48.5))
        self.assertEqual(await self.store.get_position(), ScreenPosition(x=120.0, y=48.5))

    async def test_save_replaces_previous(self):
        await self.store.save_position(ScreenPosition(x=1, y=2))
        await self.store.save_position(ScreenPosition(x=3, y=4))
        self.assertEqual(await self.store.get_position(), ScreenPosition(x=3, y=4))

    async def test_positions_are_per_installation(self):
        await self.store.save_position(ScreenPosition(x=1, y=2), installation_id="table-a")
        await self.store.save_position(ScreenPosition(x=9, y=9), installation_id="table-b")
        self.assertEqual(await self.store.get_position("table-a"), ScreenPosition(x=1, y=2))
        self.assertIsNone(await self.store.get_position())

    async def test_position_survives_reconnect(self):
        await self.store.save_position(ScreenPosition(x=5, y=6))
        await self.store.close()
        await self.store.connect()
        self.assertEqual(await self.store.get_position(), ScreenPosition(x=5, y=6))

    async def test_queries_need_connection(self):
        await self.store.close()
        with self.assertRaises(ConnectionError):
            await self.store.get_position()
        await self.store.connect()

if __name__ == '__main__':
    unittest.main()
