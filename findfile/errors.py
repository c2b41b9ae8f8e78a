"""Error kinds and exception types shared by every component"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Generic error kinds surfaced to callers"""

    # Query compiler: search object validation
    MISSING_TEXT = "MISSING_TEXT"
    PAGE_ZERO = "PAGE_ZERO"
    BOTTOM_COORD_ZERO = "BOTTOM_COORD_ZERO"
    COORD_MISPLACED = "COORD_MISPLACED"

    # Query compiler: structural validation
    TOO_MANY_ATTRS = "TOO_MANY_ATTRS"
    KEY_UNSUPPORTED = "KEY_UNSUPPORTED"
    TYPE_INCORRECT = "TYPE_INCORRECT"

    # Indexing pipeline
    UNSUPPORTED_EVENT = "UNSUPPORTED_EVENT"
    PARSE_FAILED = "PARSE_FAILED"
    QUERY_KEYS_FAILED = "QUERY_KEYS_FAILED"
    UPSERT_FAILED = "UPSERT_FAILED"
    DELETE_FAILED = "DELETE_FAILED"

    # OCR adapter
    OCR_UNAVAILABLE = "OCR_UNAVAILABLE"
    OCR_REJECTED = "OCR_REJECTED"

    # Document store
    STORE_WRITE = "STORE_WRITE"
    STORE_READ = "STORE_READ"
    DECODE = "DECODE"
    STORE_DDL = "STORE_DDL"


class FindFileError(Exception):
    """
    Base error carrying a generic kind and the component that raised it

    The message is what callers see; ``str(error)`` adds provenance for logs.
    """

    component = "core"
    status_code = 500

    def __init__(self, kind: ErrorKind, message: str, component: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        if component is not None:
            self.component = component

    def __str__(self) -> str:
        return f"[{self.component}] {self.kind.value}: {self.message}"


class QueryValidationError(FindFileError):
    """Search DSL value rejected by the query compiler"""

    component = "compiler"
    status_code = 400


class OCRError(FindFileError):
    """OCR service could not be reached or refused the request"""

    component = "ocr"


class StoreError(FindFileError):
    """Document store read, write, decode or schema failure"""

    component = "store"


class PipelineError(FindFileError):
    """Indexing pipeline failed the current batch"""

    component = "pipeline"
