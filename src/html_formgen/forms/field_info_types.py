"""
Field descriptors derived from dataclass records.

A record is any dataclass instance. Per-field rendering metadata is declared
through ``dataclasses.field(metadata=...)``, most conveniently with
form_field()::

    @dataclass
    class EntryForm:
        department: str = form_field("", attrs="subtype='select',accesskey='p'")
        hash_key: str = form_field("", key="hashkey", attrs="maxlength='16'")
        _cache: str = ""   # internal, never rendered

Descriptors are recomputed on every render call; nothing is cached.
"""

import dataclasses
import datetime
import logging
import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, get_type_hints

from html_formgen.exceptions import RecordTypeError
from html_formgen.forms.attribute_tags import check_attributes, tag_value
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.labels import labelize
from html_formgen.forms.widget_kinds import FieldTypeUtils, SemanticType, WidgetKind, to_widget_kind

logger = logging.getLogger(__name__)


def form_field(default: Any = dataclasses.MISSING, *, key: Optional[str] = None,
               attrs: str = "", **field_kwargs) -> Any:
    """
    Declare a dataclass field with form metadata.

    Args:
        default: Default value, as for dataclasses.field
        key: External key (input name, CSV position); defaults to the attribute name
        attrs: Attribute string, e.g. "maxlength='16',size='16'"
        **field_kwargs: Passed on to dataclasses.field (default_factory, ...)
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if key is not None:
        metadata[FORM_CONSTANTS.METADATA_KEY] = key
    metadata[FORM_CONSTANTS.METADATA_FORM] = attrs
    return dataclasses.field(default=default, metadata=metadata, **field_kwargs)


@dataclass
class FieldDescriptor:
    """Everything the renderers need to know about one field."""
    name: str
    key: str
    attrs: str
    semantic: SemanticType
    multi: bool
    value: Any
    scalar_type: Any = str
    init: bool = True

    @property
    def enum_type(self) -> Optional[Type[Enum]]:
        if self.semantic is SemanticType.ENUM:
            return self.scalar_type
        return None

    @property
    def exported(self) -> bool:
        return not self.name.startswith(FORM_CONSTANTS.INTERNAL_FIELD_PREFIX)

    @property
    def skipped(self) -> bool:
        """True for fields explicitly excluded with the skip marker."""
        return self.attrs == FORM_CONSTANTS.SKIP_MARKER

    @property
    def is_status(self) -> bool:
        return self.key.lower() in FORM_CONSTANTS.STATUS_KEYS

    @property
    def is_separator_key(self) -> bool:
        return self.key.lower().startswith(FORM_CONSTANTS.SEPARATOR_KEY_PREFIX)

    @property
    def structural(self) -> bool:
        """Separator or fieldset marker, by key or by subtype."""
        return self.is_separator_key or self.kind.is_structural

    @property
    def label(self) -> str:
        """Explicit 'label' attribute, or the labelized external key."""
        return tag_value(self.attrs, "label") or labelize(self.key)

    @property
    def suffix(self) -> str:
        return tag_value(self.attrs, "suffix")

    @property
    def kind(self) -> WidgetKind:
        return to_widget_kind(self.semantic, self.attrs)

    def check(self, mode: str) -> None:
        """Validate the attribute string; raises AttributeTagError."""
        check_attributes(self.attrs, self.key, mode)

    def values(self) -> List[Any]:
        """The field value as a list; scalars become a one-element list."""
        if not self.multi:
            return [self.value]
        if self.value is None:
            return []
        if isinstance(self.value, (str, bytes, bytearray)):
            return [self.value]
        return list(self.value)

    def formatted(self) -> str:
        """The raw value formatted as text (multi values space-joined)."""
        if self.multi:
            return FORM_CONSTANTS.CSV_MULTI_VALUE_JOINER.join(format_value(v) for v in self.values())
        return format_value(self.value)


def format_value(value: Any) -> str:
    """
    Format a single field value as text.

    Booleans render lower case, integral floats without a fraction,
    dates as ISO dates and times as HH:MM.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return FORM_CONSTANTS.TRUE_STRING if value else FORM_CONSTANTS.FALSE_STRING
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, datetime.datetime):
        return value.isoformat(sep=" ", timespec="minutes")
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, datetime.time):
        return value.strftime("%H:%M")
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def ensure_record(record: Any, mode: str) -> None:
    """
    Fail with RecordTypeError unless record is a dataclass instance.

    Dataclass classes themselves are rejected as well.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise RecordTypeError(FORM_CONSTANTS.NOT_A_RECORD_MSG.format(mode, type(record).__name__))


def external_key(field: dataclasses.Field) -> str:
    """External key of a dataclass field; a trailing ',omitempty' is dropped."""
    key = field.metadata.get(FORM_CONSTANTS.METADATA_KEY) or field.name
    return key.replace(FORM_CONSTANTS.OMITEMPTY_SUFFIX, "")


def resolve_field_types(record_type: type) -> Dict[str, Any]:
    """
    Resolve the annotations of a dataclass type.

    Postponed annotations naming types that are not visible at module level
    (e.g. classes local to a function) cannot be resolved as a whole. In
    that case each field is resolved on its own against the module globals;
    annotations that still fail stay strings and render as text.
    """
    try:
        return get_type_hints(record_type)
    except (NameError, TypeError) as exc:
        logger.debug(f"Resolving {record_type.__name__} field by field: {exc}")

    module = sys.modules.get(record_type.__module__)
    module_globals = vars(module) if module is not None else {}
    resolved = {}
    for field in dataclasses.fields(record_type):
        annotation = field.type
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, module_globals)
            except (NameError, AttributeError, SyntaxError, TypeError) as exc:
                logger.debug(f"Field {field.name}: unresolved annotation {annotation!r} ({exc})")
        resolved[field.name] = annotation
    return resolved


def describe_fields(record: Any) -> List[FieldDescriptor]:
    """
    Build descriptors for all fields of a record, in declaration order.

    Args:
        record: A dataclass instance

    Returns:
        One FieldDescriptor per dataclass field

    Raises:
        RecordTypeError: If record is not a dataclass instance
    """
    ensure_record(record, "describe_fields")
    hints = resolve_field_types(type(record))
    descriptors = []
    for field in dataclasses.fields(record):
        semantic, multi, scalar_type = FieldTypeUtils.analyze(hints.get(field.name, field.type))
        descriptors.append(FieldDescriptor(
            name=field.name,
            key=external_key(field),
            attrs=field.metadata.get(FORM_CONSTANTS.METADATA_FORM, ""),
            semantic=semantic,
            multi=multi,
            value=getattr(record, field.name),
            scalar_type=scalar_type,
            init=field.init,
        ))
    return descriptors


def record_title(record: Any) -> str:
    """Headline text derived from the record's class name."""
    return labelize(type(record).__name__)


def status_message(descriptors: Iterable[FieldDescriptor]) -> str:
    """Join the string values of status/message carrier fields."""
    messages = [
        d.value for d in descriptors
        if d.exported and not d.skipped and d.is_status and isinstance(d.value, str) and d.value
    ]
    return FORM_CONSTANTS.STATUS_JOINER.join(messages)
