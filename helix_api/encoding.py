"""Parameter encoding for Helix requests.

Parameter sets are pydantic models. Defaults are declared on the model fields
and resolved when the model is built, so encoding only has to decide which
fields are present and how each value is written on the wire. Query strings
and JSON bodies are built from the same field walk, so both carry the same
fields and values.

Documented upstream limits (page sizes, batch sizes) are deliberately not
checked here. Values are passed through as given and the API decides.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic_core import to_jsonable_python

QueryPairs = List[Tuple[str, str]]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _is_empty(value: Any) -> bool:
    """None, empty strings, numeric zero and empty sequences count as absent."""
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return True
    if isinstance(value, _SEQUENCE_TYPES) and len(value) == 0:
        return True
    return False


def _field_default(field: FieldInfo) -> Any:
    if field.is_required():
        return None
    return field.get_default(call_default_factory=True)


def _format_value(value: Any) -> str:
    """Render a scalar as a query string value."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def wire_name(name: str, field: FieldInfo) -> str:
    """Name a field is sent under: its alias if declared, else the field name."""
    return field.serialization_alias or field.alias or name


def iter_wire_fields(params: BaseModel) -> Iterator[Tuple[str, Any]]:
    """
    Yield (wire_name, value) for every field that will be sent.

    Empty fields fall back to their declared default when it is not itself
    empty, otherwise they are skipped.
    """
    for name, field in type(params).model_fields.items():
        value = getattr(params, name)
        if _is_empty(value):
            value = _field_default(field)
            if _is_empty(value):
                continue
        yield wire_name(name, field), value


def encode_query(params: Optional[BaseModel]) -> QueryPairs:
    """
    Encode a parameter model into query string pairs.

    Sequence fields produce one pair per element under the same key, in input
    order.

    Args:
        params: Parameter model, or None for no parameters

    Returns:
        List of (wire_name, value) pairs
    """
    if params is None:
        return []

    pairs: QueryPairs = []
    for key, value in iter_wire_fields(params):
        if isinstance(value, _SEQUENCE_TYPES):
            pairs.extend((key, _format_value(item)) for item in value)
        else:
            pairs.append((key, _format_value(value)))

    return pairs


def encode_body(params: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    """Encode a parameter model into a JSON request body; sequences stay arrays."""
    if params is None:
        return None
    return {
        key: to_jsonable_python(value) for key, value in iter_wire_fields(params)
    }
