"""Indexing pipeline: routes change events to OCR + upsert or resolve + delete"""
from dataclasses import dataclass
from pydantic import ValidationError
from typing import Dict, Iterable, List
import logging
from ..db.document_store import DocumentStore, file_info_query
from ..errors import ErrorKind, OCRError, PipelineError, StoreError
from ..models.document import Document
from ..models.events import ChangeEvent, EventName
from ..utils.helpers import has_supported_extension
from .normalizer import DocumentNormalizer
from .ocr_service import OCRService

logger = logging.getLogger(__name__)


@dataclass
class IndexingResult:
    """Counts of store operations performed for a batch"""
    upserted: int = 0
    deleted: int = 0


@dataclass
class RoutedEvents:
    """Change events split into files to index and files to remove"""
    upserts: List[ChangeEvent]
    deletes: Dict[str, List[str]]


class IndexingPipeline:
    """Consume change event batches and keep the document store in sync"""

    def __init__(
        self,
        ocr_service: OCRService,
        normalizer: DocumentNormalizer,
        document_store: DocumentStore,
        supported_extensions: Iterable[str] = (".jpg", ".jpeg", ".png")
    ):
        self.ocr_service = ocr_service
        self.normalizer = normalizer
        self.document_store = document_store
        self.supported_extensions = list(supported_extensions)

    def route(self, events: List[ChangeEvent]) -> RoutedEvents:
        """
        Split a batch into upserts and per-bucket deletes

        Keys without a supported extension are dropped silently. Any other
        event name fails the whole batch before anything is processed.
        """
        upserts: List[ChangeEvent] = []
        deletes: Dict[str, List[str]] = {}

        for event in events:
            if not has_supported_extension(event.key, self.supported_extensions):
                logger.info(f"Skipping unsupported file {event.bucket}/{event.key}")
                continue

            if event.event_name == EventName.OBJECT_CREATED.value:
                upserts.append(event)
            elif event.event_name == EventName.OBJECT_REMOVED.value:
                deletes.setdefault(event.bucket, []).append(event.key)
            else:
                logger.error(f"Event [{event.event_name}] not supported")
                raise PipelineError(
                    ErrorKind.UNSUPPORTED_EVENT,
                    f"event type [{event.event_name}] not supported",
                )

        return RoutedEvents(upserts=upserts, deletes=deletes)

    async def process(self, events: List[ChangeEvent]) -> IndexingResult:
        """
        Process one batch of change events

        Steps:
        1. Route events into upserts and deletes
        2. OCR and normalize every upserted file
        3. Resolve deleted files to document identity keys
        4. Upsert the normalized documents
        5. Delete the resolved documents

        All upserts commit before any delete starts.

        Args:
            events: Change events delivered together

        Returns:
            IndexingResult with the number of documents upserted and deleted

        Raises:
            PipelineError: The batch failed; the cause is chained
        """
        logger.info(f"Processing batch of {len(events)} events")
        routed = self.route(events)

        documents = await self._parse_files(routed.upserts)
        delete_keys = await self._resolve_delete_keys(routed.deletes)

        if documents:
            try:
                await self.document_store.upsert(documents)
            except StoreError as e:
                logger.error(f"Upsert failed: {e}")
                raise PipelineError(ErrorKind.UPSERT_FAILED, "upsert documents error") from e

        if delete_keys:
            try:
                await self.document_store.delete(delete_keys)
            except StoreError as e:
                logger.error(f"Delete failed: {e}")
                raise PipelineError(ErrorKind.DELETE_FAILED, "delete documents error") from e

        logger.info(f"Batch complete: {len(documents)} upserted, {len(delete_keys)} deleted")
        return IndexingResult(upserted=len(documents), deleted=len(delete_keys))

    async def _parse_files(self, upserts: List[ChangeEvent]) -> List[Document]:
        documents = []
        for event in upserts:
            try:
                blocks = await self.ocr_service.analyze(event.bucket, event.key)
                documents.append(self.normalizer.normalize(event.bucket, event.key, blocks))
            except (OCRError, ValidationError) as e:
                logger.error(f"Parse failed for {event.bucket}/{event.key}: {e}")
                raise PipelineError(ErrorKind.PARSE_FAILED, "parse file error") from e
        return documents

    async def _resolve_delete_keys(self, deletes: Dict[str, List[str]]) -> List[str]:
        keys: List[str] = []
        for bucket, file_keys in deletes.items():
            try:
                resolved = await self.document_store.query_document_keys(
                    file_info_query(bucket, file_keys)
                )
            except StoreError as e:
                logger.error(f"Resolving documents in {bucket} failed: {e}")
                raise PipelineError(ErrorKind.QUERY_KEYS_FAILED, "query documents error") from e

            logger.info(f"Resolved {len(resolved)} documents for {len(file_keys)} files in {bucket}")
            keys.extend(resolved)
        return keys
