"""OCR block models, shaped after the Textract AnalyzeDocument response"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

PAGE_BLOCK = "PAGE"
LINE_BLOCK = "LINE"
CHILD_RELATIONSHIP = "CHILD"


class BoundingBox(BaseModel):
    """Bounding box normalized to the page; (left, top) is the upper-left corner"""
    left: float
    top: float
    width: float
    height: float


class Relationship(BaseModel):
    """Reference from a block to other blocks by identifier"""
    type: str = CHILD_RELATIONSHIP
    ids: List[str] = Field(default_factory=list)


class Block(BaseModel):
    """One entry of the flat OCR block list"""
    id: str
    block_type: str
    text: Optional[str] = None
    page: Optional[int] = None
    bounding_box: Optional[BoundingBox] = None
    relationships: List[Relationship] = Field(default_factory=list)

    def child_ids(self) -> List[str]:
        """Identifiers referenced through CHILD relationships, in order"""
        ids = []
        for relationship in self.relationships:
            if relationship.type == CHILD_RELATIONSHIP:
                ids.extend(relationship.ids)
        return ids

    @classmethod
    def from_textract(cls, raw: Dict[str, Any]) -> "Block":
        """Build a block from a raw Textract ``Blocks`` entry"""
        bounding_box = None
        box = (raw.get("Geometry") or {}).get("BoundingBox")
        if box:
            bounding_box = BoundingBox(
                left=box["Left"],
                top=box["Top"],
                width=box["Width"],
                height=box["Height"],
            )

        return cls(
            id=raw["Id"],
            block_type=raw["BlockType"],
            text=raw.get("Text"),
            page=raw.get("Page"),
            bounding_box=bounding_box,
            relationships=[
                Relationship(type=rel.get("Type", CHILD_RELATIONSHIP), ids=rel.get("Ids", []))
                for rel in raw.get("Relationships") or []
            ],
        )
