"""Query service: compile a search, run it, group matching files by bucket"""
from typing import Any, Dict, List
import logging
from ..db.document_store import DocumentStore
from ..models.document import Document
from .query_compiler import QueryCompiler

logger = logging.getLogger(__name__)


def group_by_bucket(documents: List[Document]) -> Dict[str, List[str]]:
    """Map bucket → keys, keeping the first-seen order of keys"""
    grouped: Dict[str, List[str]] = {}
    for document in documents:
        keys = grouped.setdefault(document.bucket, [])
        if document.key not in keys:
            keys.append(document.key)
    return grouped


class QueryService:
    """Answer spatial-text searches with the files that match"""

    def __init__(self, compiler: QueryCompiler, document_store: DocumentStore):
        self.compiler = compiler
        self.document_store = document_store

    async def search(self, value: Any) -> Dict[str, List[str]]:
        """
        Run a search DSL value against the store

        Args:
            value: Decoded JSON request body

        Returns:
            Matching file keys grouped by bucket
        """
        query = self.compiler.compile(value)
        documents = await self.document_store.query_documents(query)
        grouped = group_by_bucket(documents)
        logger.info(f"Search matched {len(documents)} documents in {len(grouped)} buckets")
        return grouped
