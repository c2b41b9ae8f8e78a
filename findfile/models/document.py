"""Document tree data models (pages, lines and coordinates)"""
from pydantic import BaseModel, Field
from typing import List


class Point(BaseModel):
    """A point normalized to the page; y increases downward"""
    x: float
    y: float


class Coordinates(BaseModel):
    """Four corner points of a line's bounding box"""
    id: str
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point


class Line(BaseModel):
    """A single line of recognized text"""
    id: str
    text: str
    coordinates: Coordinates


class Page(BaseModel):
    """A single page within a document"""
    id: str
    page_number: int = Field(1, ge=1)
    lines: List[Line] = Field(default_factory=list)


class Document(BaseModel):
    """An indexed file, unique per (bucket, key)"""
    id: str
    bucket: str
    key: str
    pages: List[Page] = Field(default_factory=list)
