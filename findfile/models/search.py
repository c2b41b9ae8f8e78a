"""Search DSL models: the search object and the Boolean query tree"""
from dataclasses import dataclass, field
from pydantic import BaseModel
from typing import ClassVar, List, Tuple, Union

Corner = Tuple[float, float]


class SearchObject(BaseModel):
    """
    Atomic search unit: text on a page inside a region
    
    Coordinates are in the caller's convention (y increases upward);
    index 0 is the top-left corner and index 1 the bottom-right corner.
    """
    text: str = ""
    page_number: int = 0
    coordinates: Tuple[Corner, Corner] = ((0.0, 0.0), (0.0, 0.0))


@dataclass(frozen=True)
class Search:
    """Leaf node matching documents for a single search object"""
    search: SearchObject


@dataclass(frozen=True)
class BooleanNode:
    """Combinator over child nodes"""
    operator: ClassVar[str] = ""
    children: List["Node"] = field(default_factory=list)


@dataclass(frozen=True)
class And(BooleanNode):
    operator: ClassVar[str] = "and"


@dataclass(frozen=True)
class Or(BooleanNode):
    operator: ClassVar[str] = "or"


@dataclass(frozen=True)
class Not(BooleanNode):
    operator: ClassVar[str] = "not"


Node = Union[Search, And, Or, Not]

BOOLEAN_NODES = {node.operator: node for node in (And, Or, Not)}
