"""Dependency injection for API routes"""
from ..config import settings
from ..db import DocumentStore, get_documents_collection
from ..services import (
    OCRService,
    DocumentNormalizer,
    QueryCompiler,
    IndexingPipeline,
    QueryService,
)


# Singleton instances
_ocr_service = None
_normalizer = None
_query_compiler = None
_document_store = None
_indexing_pipeline = None
_query_service = None


def get_ocr_service() -> OCRService:
    """Get OCRService singleton"""
    global _ocr_service
    if _ocr_service is None:
        _ocr_service = OCRService(
            region_name=settings.aws_region,
            feature_types=settings.textract_feature_types
        )
    return _ocr_service


def get_normalizer() -> DocumentNormalizer:
    """Get DocumentNormalizer singleton"""
    global _normalizer
    if _normalizer is None:
        _normalizer = DocumentNormalizer()
    return _normalizer


def get_query_compiler() -> QueryCompiler:
    """Get QueryCompiler singleton"""
    global _query_compiler
    if _query_compiler is None:
        _query_compiler = QueryCompiler()
    return _query_compiler


def get_document_store() -> DocumentStore:
    """Get DocumentStore singleton (requires a connected database)"""
    global _document_store
    if _document_store is None:
        _document_store = DocumentStore(
            collection=get_documents_collection(),
            result_limit=settings.query_result_limit
        )
    return _document_store


def get_indexing_pipeline() -> IndexingPipeline:
    """Get IndexingPipeline singleton"""
    global _indexing_pipeline
    if _indexing_pipeline is None:
        _indexing_pipeline = IndexingPipeline(
            ocr_service=get_ocr_service(),
            normalizer=get_normalizer(),
            document_store=get_document_store(),
            supported_extensions=settings.supported_extensions
        )
    return _indexing_pipeline


def get_query_service() -> QueryService:
    """Get QueryService singleton"""
    global _query_service
    if _query_service is None:
        _query_service = QueryService(
            compiler=get_query_compiler(),
            document_store=get_document_store()
        )
    return _query_service


def reset_dependencies():
    """Drop cached singletons, e.g. after the database connection changes"""
    global _ocr_service, _normalizer, _query_compiler
    global _document_store, _indexing_pipeline, _query_service
    _ocr_service = None
    _normalizer = None
    _query_compiler = None
    _document_store = None
    _indexing_pipeline = None
    _query_service = None
