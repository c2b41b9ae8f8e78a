"""Document store backed by a MongoDB collection of embedded document trees"""
from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from typing import Any, Dict, List
import logging
from ..errors import ErrorKind, StoreError
from ..models.document import Document

logger = logging.getLogger(__name__)

Query = Dict[str, Any]


class DocumentStore:
    """
    Persist, replace, delete and query document trees

    Each document is one MongoDB record embedding its pages, lines and
    coordinates, so removing the record removes the whole subtree. Records
    are addressed by ``(bucket, key)`` for upserts and by ``id`` (the
    identity key) for deletes.
    """

    def __init__(self, collection, result_limit: int = 1000):
        """
        Initialize the store

        Args:
            collection: Motor collection holding the documents
            result_limit: Maximum number of records read per query
        """
        self.collection = collection
        self.result_limit = result_limit

    async def setup(self) -> None:
        """Ensure the collection's indexes exist; safe to call repeatedly"""
        try:
            await self.collection.create_index(
                [("bucket", ASCENDING), ("key", ASCENDING)],
                unique=True,
                name="bucket_key_unique",
            )
            await self.collection.create_index("id", unique=True, name="id_unique")
            await self.collection.create_index("pages.lines.text", name="line_text")
            logger.info("Document store indexes ensured")
        except PyMongoError as e:
            logger.error(f"Error creating document store indexes: {e}")
            raise StoreError(ErrorKind.STORE_DDL, "error setting up document store") from e

    async def upsert(self, documents: List[Document]) -> None:
        """
        Insert or wholesale replace documents keyed by (bucket, key)

        Each replacement is atomic per document; the batch is not. The first
        failure stops the batch and is raised.
        """
        for document in documents:
            try:
                await self.collection.replace_one(
                    {"bucket": document.bucket, "key": document.key},
                    document.model_dump(),
                    upsert=True,
                )
            except PyMongoError as e:
                logger.error(f"Error upserting {document.bucket}/{document.key}: {e}")
                raise StoreError(
                    ErrorKind.STORE_WRITE,
                    f"error upserting document [{document.bucket}/{document.key}]",
                ) from e

        logger.info(f"Upserted {len(documents)} documents")

    async def delete(self, keys: List[str]) -> None:
        """Delete documents by identity key"""
        if not keys:
            return

        try:
            result = await self.collection.delete_many({"id": {"$in": list(keys)}})
        except PyMongoError as e:
            logger.error(f"Error deleting documents by key: {e}")
            raise StoreError(ErrorKind.STORE_WRITE, "error deleting documents") from e

        logger.info(f"Deleted {result.deleted_count} documents for {len(keys)} keys")

    async def delete_by_file_info(self, query: Query) -> None:
        """Delete every document matching a file-info predicate"""
        try:
            result = await self.collection.delete_many(query)
        except PyMongoError as e:
            logger.error(f"Error deleting documents by file info: {e}")
            raise StoreError(ErrorKind.STORE_WRITE, "error deleting documents") from e

        logger.info(f"Deleted {result.deleted_count} documents by file info")

    async def query_documents(self, query: Query) -> List[Document]:
        """Run a compiled query and decode at most ``result_limit`` matching documents"""
        try:
            cursor = self.collection.find(query, {"_id": 0})
            records = await cursor.to_list(length=self.result_limit)
        except PyMongoError as e:
            logger.error(f"Error querying documents: {e}")
            raise StoreError(ErrorKind.STORE_READ, "error querying documents") from e

        if len(records) >= self.result_limit:
            logger.warning(f"Query results truncated at {self.result_limit} documents")

        try:
            return [Document.model_validate(record) for record in records]
        except ValidationError as e:
            logger.error(f"Error decoding queried documents: {e}")
            raise StoreError(ErrorKind.DECODE, "error decoding documents") from e

    async def query_document_keys(self, query: Query) -> List[str]:
        """Run a query and return only the identity keys of the matches"""
        try:
            cursor = self.collection.find(query, {"_id": 0, "id": 1})
            records = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error querying document keys: {e}")
            raise StoreError(ErrorKind.STORE_READ, "error querying document keys") from e

        keys = []
        for record in records:
            if "id" not in record:
                raise StoreError(ErrorKind.STORE_READ, "document record without identity key")
            keys.append(record["id"])
        return keys


def file_info_query(bucket: str, keys: List[str]) -> Query:
    """Predicate selecting the documents indexed for the given files"""
    return {"bucket": bucket, "key": {"$in": list(keys)}}
