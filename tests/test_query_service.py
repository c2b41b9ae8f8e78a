from __future__ import annotations

import unittest
from unittest.mock import AsyncMock, MagicMock

from findfile.db.document_store import DocumentStore
from findfile.errors import ErrorKind, QueryValidationError
from findfile.models.document import Document
from findfile.services.query_compiler import QueryCompiler
from findfile.services.query_service import QueryService, group_by_bucket


def doc(bucket: str, key: str) -> Document:
    return Document(id=f"{bucket}/{key}", bucket=bucket, key=key, pages=[])


class TestGroupByBucket(unittest.TestCase):
    def test_keeps_first_seen_order(self) -> None:
        grouped = group_by_bucket([doc("b2", "z.png"), doc("b1", "b.jpg"), doc("b2", "a.png"), doc("b1", "a.jpg")])
        self.assertEqual(grouped, {"b2": ["z.png", "a.png"], "b1": ["b.jpg", "a.jpg"]})
        self.assertEqual(list(grouped), ["b2", "b1"])

    def test_duplicate_keys_appear_once(self) -> None:
        self.assertEqual(group_by_bucket([doc("b1", "p.jpg"), doc("b1", "p.jpg")]), {"b1": ["p.jpg"]})

    def test_empty(self) -> None:
        self.assertEqual(group_by_bucket([]), {})


class TestQueryService(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.store = MagicMock(spec=DocumentStore)
        self.store.query_documents = AsyncMock(return_value=[doc("b1", "p.jpg")])
        self.compiler = QueryCompiler()
        self.service = QueryService(self.compiler, self.store)

    async def test_runs_compiled_query(self) -> None:
        value = {"search": {"text": "alpha", "page_number": 1, "coordinates": [[0.1, 0.1], [0.5, 0.5]]}}

        data = await self.service.search(value)

        self.store.query_documents.assert_awaited_once_with(self.compiler.compile(value))
        self.assertEqual(data, {"b1": ["p.jpg"]})

    async def test_invalid_query_never_reaches_store(self) -> None:
        with self.assertRaises(QueryValidationError) as ctx:
            await self.service.search({"search": {"text": "alpha", "page_number": 0}})
        self.assertEqual(ctx.exception.kind, ErrorKind.PAGE_ZERO)
        self.store.query_documents.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
