from __future__ import annotations

import unittest
from unittest import mock
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from findfile.config import settings
from findfile.db import mongodb
from findfile.db.mongodb import MongoDB, get_documents_collection
from findfile.errors import ErrorKind, StoreError


class TestMongoDBLifecycle(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.client = MagicMock()
        self.client.admin.command = AsyncMock(return_value={"ok": 1})
        self.database = MagicMock()
        self.client.__getitem__.return_value = self.database
        patcher = mock.patch.object(mongodb, "AsyncIOMotorClient", return_value=self.client)
        self.client_class = patcher.start()
        self.addCleanup(patcher.stop)

    async def asyncTearDown(self) -> None:
        await MongoDB.close_db()

    async def test_connect_pings_and_selects_database(self) -> None:
        await MongoDB.connect_db("mongodb://db.internal:27017", "scans")

        self.client_class.assert_called_once_with(
            "mongodb://db.internal:27017", serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
        self.client.admin.command.assert_awaited_once_with("ping")
        self.client.__getitem__.assert_called_once_with("scans")
        self.assertTrue(MongoDB.is_connected())
        self.assertIs(MongoDB.get_database(), self.database)

    async def test_connect_defaults_to_settings(self) -> None:
        await MongoDB.connect_db()

        self.client_class.assert_called_once_with(
            settings.mongodb_url, serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
        self.client.__getitem__.assert_called_once_with(settings.mongodb_db_name)

    async def test_unreachable_server_is_store_error(self) -> None:
        self.client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        with self.assertRaises(StoreError) as ctx:
            await MongoDB.connect_db()

        self.assertEqual(ctx.exception.kind, ErrorKind.STORE_READ)
        self.client.close.assert_called_once_with()
        self.assertFalse(MongoDB.is_connected())

    async def test_close_releases_client(self) -> None:
        await MongoDB.connect_db()
        await MongoDB.close_db()

        self.client.close.assert_called_once_with()
        self.assertFalse(MongoDB.is_connected())
        with self.assertRaises(RuntimeError):
            MongoDB.get_database()

    async def test_close_without_connection_is_a_no_op(self) -> None:
        await MongoDB.close_db()
        self.client.close.assert_not_called()

    async def test_documents_collection_uses_configured_name(self) -> None:
        await MongoDB.connect_db()

        get_documents_collection()

        self.database.__getitem__.assert_called_once_with(settings.documents_collection)


if __name__ == "__main__":
    unittest.main()
