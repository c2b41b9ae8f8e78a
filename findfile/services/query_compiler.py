"""Query compiler: search DSL values to MongoDB filter documents"""
from pydantic import ValidationError
from typing import Any, Dict
import logging
from ..errors import ErrorKind, QueryValidationError
from ..models.search import SearchObject, Search, BooleanNode, Node, BOOLEAN_NODES

logger = logging.getLogger(__name__)

SEARCH_KEY = "search"

# Boolean combinators as MongoDB logical operators; "not" complements the
# union of its children within the collection.
MONGO_OPERATORS = {
    "and": "$and",
    "or": "$or",
    "not": "$nor",
}


def parse_query(value: Any) -> Node:
    """
    Parse and validate a search DSL value into a query tree

    Args:
        value: Decoded JSON request body

    Returns:
        Root node of the query tree

    Raises:
        QueryValidationError: If the value or any nested search object is invalid
    """
    if not isinstance(value, dict):
        raise QueryValidationError(
            ErrorKind.TYPE_INCORRECT, "query must be a json object"
        )

    if len(value) > 1:
        raise QueryValidationError(
            ErrorKind.TOO_MANY_ATTRS, "search object contains too many attributes"
        )

    if not value:
        raise QueryValidationError(
            ErrorKind.KEY_UNSUPPORTED,
            "query must contain one of \"search\", \"and\", \"or\", \"not\"",
        )

    key, inner = next(iter(value.items()))

    if key == SEARCH_KEY:
        return Search(search=_parse_search_object(inner))

    if key in BOOLEAN_NODES:
        if not isinstance(inner, list) or not inner:
            raise QueryValidationError(
                ErrorKind.TYPE_INCORRECT,
                f"\"{key}\" must hold a non-empty list of query objects",
            )
        return BOOLEAN_NODES[key](children=[parse_query(child) for child in inner])

    raise QueryValidationError(ErrorKind.KEY_UNSUPPORTED, f"key \"{key}\" not supported")


def _parse_search_object(inner: Any) -> SearchObject:
    if not isinstance(inner, dict):
        raise QueryValidationError(
            ErrorKind.TYPE_INCORRECT, "search object must be search object type"
        )

    try:
        search = SearchObject.model_validate(inner)
    except ValidationError as e:
        raise QueryValidationError(
            ErrorKind.TYPE_INCORRECT, "search object must be search object type"
        ) from e

    validate_search_object(search)
    return search


def validate_search_object(search: SearchObject) -> None:
    """Apply the per-object rules, raising on the first violation"""
    if search.text == "":
        raise QueryValidationError(ErrorKind.MISSING_TEXT, "search object must contain text")

    if search.page_number == 0:
        raise QueryValidationError(
            ErrorKind.PAGE_ZERO, "search object page number must not be \"0\""
        )

    top_left, bottom_right = search.coordinates

    if bottom_right[0] == 0 or bottom_right[1] == 0:
        raise QueryValidationError(
            ErrorKind.BOTTOM_COORD_ZERO,
            "search object bottom coordinates cannot include zero",
        )

    if top_left[0] >= bottom_right[0] or top_left[1] >= bottom_right[1]:
        raise QueryValidationError(
            ErrorKind.COORD_MISPLACED,
            "search object bottom coordinates cannot be less than or equal to top coordinates",
        )


def compile_search(search: SearchObject) -> Dict[str, Any]:
    """
    Build the filter for one search object

    Axis swap: the caller's y axis points up, stored coordinates point down.
    Exchanging the corners along y, the caller's first corner gives the
    region's top edge in store space and the second corner its bottom edge.
    A line matches when its box intersects the region (closed intervals).
    """
    (left, top), (right, bottom) = search.coordinates

    line_filter = {
        "text": search.text,
        "coordinates.bottom_right.x": {"$gte": left},
        "coordinates.top_left.x": {"$lte": right},
        "coordinates.bottom_left.y": {"$gte": top},
        "coordinates.top_right.y": {"$lte": bottom},
    }

    return {
        "pages": {
            "$elemMatch": {
                "page_number": search.page_number,
                "lines": {"$elemMatch": line_filter},
            }
        }
    }


def compile_node(node: Node) -> Dict[str, Any]:
    """Fold a query tree into a MongoDB filter document"""
    if isinstance(node, Search):
        return compile_search(node.search)

    if isinstance(node, BooleanNode):
        operator = MONGO_OPERATORS[node.operator]
        return {operator: [compile_node(child) for child in node.children]}

    raise TypeError(f"unsupported query node: {node!r}")


class QueryCompiler:
    """Translate search DSL request bodies into store queries"""

    def compile(self, value: Any) -> Dict[str, Any]:
        """
        Validate a search DSL value and compile it

        Validation of the whole tree completes before anything is emitted.

        Args:
            value: Decoded JSON request body

        Returns:
            MongoDB filter document, opaque to callers
        """
        node = parse_query(value)
        query = compile_node(node)
        logger.info(f"Compiled {type(node).__name__.lower()} query")
        return query
