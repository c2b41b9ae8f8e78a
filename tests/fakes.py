"""Shared test doubles: canned Textract output and an in-memory OCR adapter"""
from typing import Dict, List, Optional, Tuple

from mongomock_motor import AsyncMongoMockClient

from findfile.db.document_store import DocumentStore
from findfile.errors import ErrorKind, OCRError
from findfile.models.ocr import Block


def textract_page(block_id: str, child_ids: List[str], page: Optional[int] = None) -> dict:
    raw = {
        "Id": block_id,
        "BlockType": "PAGE",
        "Geometry": {"BoundingBox": {"Left": 0.0, "Top": 0.0, "Width": 1.0, "Height": 1.0}},
        "Relationships": [{"Type": "CHILD", "Ids": child_ids}],
    }
    if page is not None:
        raw["Page"] = page
    return raw


def textract_line(block_id: str, text: str, left: float, top: float, width: float, height: float) -> dict:
    return {
        "Id": block_id,
        "BlockType": "LINE",
        "Text": text,
        "Geometry": {"BoundingBox": {"Left": left, "Top": top, "Width": width, "Height": height}},
    }


def textract_word(block_id: str, text: str) -> dict:
    return {
        "Id": block_id,
        "BlockType": "WORD",
        "Text": text,
        "Geometry": {"BoundingBox": {"Left": 0.1, "Top": 0.1, "Width": 0.1, "Height": 0.1}},
    }


def single_line_blocks(text: str = "alpha", box=(0.1, 0.1, 0.4, 0.2), page: Optional[int] = 1) -> List[Block]:
    """One page holding one line, as OCR returns for a simple scan"""
    raw = [
        textract_page("page-1", ["line-1", "word-1"], page=page),
        textract_line("line-1", text, *box),
        textract_word("word-1", text),
    ]
    return [Block.from_textract(r) for r in raw]


class FakeOCRService:
    """OCR adapter returning canned blocks per (bucket, key)"""

    def __init__(self, blocks: Optional[Dict[Tuple[str, str], List[Block]]] = None):
        self.blocks = blocks or {}
        self.calls: List[Tuple[str, str]] = []
        self.error: Optional[OCRError] = None

    async def analyze(self, bucket: str, key: str) -> List[Block]:
        self.calls.append((bucket, key))
        if self.error is not None:
            raise self.error
        if (bucket, key) not in self.blocks:
            raise OCRError(ErrorKind.OCR_REJECTED, f"no such object [{bucket}/{key}]")
        return self.blocks[(bucket, key)]


def make_store() -> DocumentStore:
    """Document store over a fresh in-memory MongoDB collection"""
    client = AsyncMongoMockClient()
    return DocumentStore(client["findfile_test"]["documents"], result_limit=100)
