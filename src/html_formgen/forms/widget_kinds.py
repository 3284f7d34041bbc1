"""
Semantic field types and the type-to-widget mapping.

Type annotations are reduced to a small closed set of semantic types
(SemanticType); the semantic type together with the 'subtype' attribute
selects one of the widget kinds (WidgetKind). The mapping is a pure
function and is consulted by every rendering phase of a field.
"""

import datetime
import logging
import types
from decimal import Decimal
from enum import Enum
from typing import Any, Tuple, Union, get_args, get_origin

from html_formgen.forms.attribute_tags import tag_value

logger = logging.getLogger(__name__)


class SemanticType(Enum):
    """Closed set of field types the renderers distinguish."""
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    BYTES = "bytes"
    DATE = "date"
    TIME = "time"
    ENUM = "enum"


class WidgetKind(Enum):
    """Widget kinds emitted by the form renderer."""
    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    DATE = "date"
    TIME = "time"
    TEXTAREA = "textarea"
    SELECT = "select"
    FILE = "file"
    SEPARATOR = "separator"
    FIELDSET = "fieldset"

    @property
    def is_structural(self) -> bool:
        """Separators and fieldsets emit structure, not data."""
        return self in (WidgetKind.SEPARATOR, WidgetKind.FIELDSET)


# subtype values honoured per semantic type
_STRING_SUBTYPES = {
    "separator": WidgetKind.SEPARATOR,
    "fieldset": WidgetKind.FIELDSET,
    "date": WidgetKind.DATE,
    "time": WidgetKind.TIME,
    "textarea": WidgetKind.TEXTAREA,
    "select": WidgetKind.SELECT,
}
_SELECT_ONLY = {"select": WidgetKind.SELECT}

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


class FieldTypeUtils:
    """
    Utility class for reducing type annotations to semantic types.

    Handles Optional unwrapping and sequence detection so that
    list[str] and Optional[int] resolve like their scalar counterparts.
    """

    @staticmethod
    def resolve_optional(field_type: Any) -> Any:
        """
        Extract the inner type from Optional[T].

        Non-optional types are returned unchanged.

        Example:
            >>> FieldTypeUtils.resolve_optional(Optional[str])
            <class 'str'>
        """
        origin = get_origin(field_type)
        if origin is Union or origin is types.UnionType:
            non_none = [arg for arg in get_args(field_type) if arg is not type(None)]
            if non_none:
                return non_none[0]
        return field_type

    @staticmethod
    def split_sequence(field_type: Any) -> Tuple[Any, bool]:
        """
        Split a sequence annotation into (element type, is_multi).

        bytes and str are scalars here, not sequences.

        Example:
            >>> FieldTypeUtils.split_sequence(list[str])
            (<class 'str'>, True)
        """
        origin = get_origin(field_type)
        if origin in _SEQUENCE_ORIGINS:
            args = [arg for arg in get_args(field_type) if arg is not Ellipsis]
            inner = args[0] if args else str
            return FieldTypeUtils.resolve_optional(inner), True
        if field_type in _SEQUENCE_ORIGINS:
            return str, True
        return field_type, False

    @staticmethod
    def semantic_type(field_type: Any) -> SemanticType:
        """
        Map a scalar annotation to its semantic type.

        bool is checked before int because bool subclasses int.
        datetime is checked before date for the same reason.
        Unknown types render as strings.
        """
        if not isinstance(field_type, type):
            return SemanticType.STRING
        if issubclass(field_type, bool):
            return SemanticType.BOOL
        if issubclass(field_type, Enum):
            return SemanticType.ENUM
        if issubclass(field_type, (int, float, Decimal)):
            return SemanticType.NUMBER
        if issubclass(field_type, (bytes, bytearray)):
            return SemanticType.BYTES
        if issubclass(field_type, datetime.datetime):
            return SemanticType.STRING
        if issubclass(field_type, datetime.date):
            return SemanticType.DATE
        if issubclass(field_type, datetime.time):
            return SemanticType.TIME
        return SemanticType.STRING

    @staticmethod
    def analyze(field_type: Any) -> Tuple[SemanticType, bool, Any]:
        """
        Analyze a field annotation.

        Returns:
            Tuple of (semantic type, is_multi, scalar element type)
        """
        scalar = FieldTypeUtils.resolve_optional(field_type)
        scalar, multi = FieldTypeUtils.split_sequence(scalar)
        return FieldTypeUtils.semantic_type(scalar), multi, scalar


def to_widget_kind(semantic: SemanticType, attrs: str = "") -> WidgetKind:
    """
    Map a semantic type plus the 'subtype' attribute to a widget kind.

    Args:
        semantic: The field's semantic type
        attrs: The field's attribute string

    Returns:
        The widget kind; string-like types default to TEXT, numbers to
        NUMBER, booleans to CHECKBOX and byte sequences always to FILE

    Example:
        >>> to_widget_kind(SemanticType.STRING, "subtype='textarea'")
        <WidgetKind.TEXTAREA: 'textarea'>
    """
    subtype = tag_value(attrs, "subtype").lower()
    if semantic is SemanticType.STRING:
        return _STRING_SUBTYPES.get(subtype, WidgetKind.TEXT)
    if semantic is SemanticType.NUMBER:
        return _SELECT_ONLY.get(subtype, WidgetKind.NUMBER)
    if semantic is SemanticType.BOOL:
        return _SELECT_ONLY.get(subtype, WidgetKind.CHECKBOX)
    if semantic is SemanticType.BYTES:
        return WidgetKind.FILE
    if semantic is SemanticType.DATE:
        return WidgetKind.DATE
    if semantic is SemanticType.TIME:
        return WidgetKind.TIME
    if semantic is SemanticType.ENUM:
        return WidgetKind.SELECT
    logger.debug(f"No widget mapping for {semantic}, falling back to text")
    return WidgetKind.TEXT
