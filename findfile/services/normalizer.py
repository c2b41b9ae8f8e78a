"""Document normalizer: folds a flat OCR block list into a document tree"""
from typing import Callable, Dict, List, Optional
import logging
from ..models.document import Document, Page, Line, Coordinates, Point
from ..models.ocr import Block, BoundingBox, Relationship, PAGE_BLOCK, LINE_BLOCK
from ..utils.helpers import generate_id, clamp_unit

logger = logging.getLogger(__name__)


class DocumentNormalizer:
    """Build document → pages → lines → coordinates trees from OCR blocks"""

    def __init__(self, id_factory: Callable[[], str] = generate_id):
        """
        Initialize the normalizer

        Args:
            id_factory: Source of fresh identifiers for every tree node
        """
        self.id_factory = id_factory

    def normalize(self, bucket: str, key: str, blocks: List[Block]) -> Document:
        """
        Convert an OCR block list into a document tree

        Page blocks are emitted in order. A page's child identifiers that do
        not resolve to a LINE block are skipped; pages without lines are kept.

        Args:
            bucket: Source bucket of the file
            key: Source key of the file
            blocks: Flat block list as returned by the OCR adapter

        Returns:
            Document with freshly assigned identifiers
        """
        page_blocks: List[Block] = []
        line_blocks: Dict[str, Block] = {}

        for block in blocks:
            if block.block_type == PAGE_BLOCK:
                page_blocks.append(block)
            elif block.block_type == LINE_BLOCK:
                line_blocks[block.id] = block

        pages = []
        for page_block in page_blocks:
            lines = []
            for child_id in page_block.child_ids():
                line_block = line_blocks.get(child_id)
                if line_block is None:
                    continue
                lines.append(self._build_line(line_block))

            pages.append(Page(
                id=self.id_factory(),
                page_number=page_block.page or 1,
                lines=lines,
            ))

        document = Document(
            id=self.id_factory(),
            bucket=bucket,
            key=key,
            pages=pages,
        )

        logger.info(
            f"Normalized {bucket}/{key}: {len(pages)} pages, "
            f"{sum(len(page.lines) for page in pages)} lines"
        )
        return document

    def _build_line(self, block: Block) -> Line:
        return Line(
            id=self.id_factory(),
            text=block.text or "",
            coordinates=self.build_coordinates(block.bounding_box),
        )

    def build_coordinates(self, box: Optional[BoundingBox]) -> Coordinates:
        """Derive the four corners (y-down) from (left, top, width, height)"""
        if box is None:
            box = BoundingBox(left=0.0, top=0.0, width=0.0, height=0.0)

        left = clamp_unit(box.left)
        top = clamp_unit(box.top)
        right = clamp_unit(box.left + max(box.width, 0.0))
        bottom = clamp_unit(box.top + max(box.height, 0.0))

        return Coordinates(
            id=self.id_factory(),
            top_left=Point(x=left, y=top),
            top_right=Point(x=right, y=top),
            bottom_left=Point(x=left, y=bottom),
            bottom_right=Point(x=right, y=bottom),
        )


def flatten(document: Document) -> List[Block]:
    """
    Render a document tree back into an OCR block list

    Each page becomes a PAGE block whose CHILD relationship lists one LINE
    block per line. Block identifiers reuse the tree's identifiers.
    """
    blocks: List[Block] = []
    for page in document.pages:
        line_blocks = []
        for line in page.lines:
            corners = line.coordinates
            line_blocks.append(Block(
                id=line.id,
                block_type=LINE_BLOCK,
                text=line.text,
                page=page.page_number,
                bounding_box=BoundingBox(
                    left=corners.top_left.x,
                    top=corners.top_left.y,
                    width=corners.bottom_right.x - corners.top_left.x,
                    height=corners.bottom_right.y - corners.top_left.y,
                ),
            ))

        blocks.append(Block(
            id=page.id,
            block_type=PAGE_BLOCK,
            page=page.page_number,
            relationships=[Relationship(ids=[b.id for b in line_blocks])],
        ))
        blocks.extend(line_blocks)

    return blocks
