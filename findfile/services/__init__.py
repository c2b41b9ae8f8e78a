"""Service layer for business logic"""
from .ocr_service import OCRService
from .normalizer import DocumentNormalizer, flatten
from .query_compiler import QueryCompiler
from .indexing_pipeline import IndexingPipeline, IndexingResult
from .query_service import QueryService

__all__ = [
    "OCRService",
    "DocumentNormalizer",
    "flatten",
    "QueryCompiler",
    "IndexingPipeline",
    "IndexingResult",
    "QueryService",
]
