"""
Decode submitted form parameters back into a record.

Request parsing is left to the web framework; decode_form() receives the
already parsed parameters as a mapping of input name to submitted values,
e.g. ``request.form.to_dict(flat=False)`` in Flask or ``parse_qs(body)``.
"""

import dataclasses
import datetime
import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from html_formgen.exceptions import FormDecodeError
from html_formgen.forms.field_info_types import FieldDescriptor, describe_fields, ensure_record
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.widget_kinds import SemanticType, WidgetKind
from html_formgen.protocols.form_config import RendererConfig

logger = logging.getLogger(__name__)

Params = Mapping[str, Union[str, Sequence[str]]]

_TRUTHY = (FORM_CONSTANTS.TRUE_STRING, "on", "1")


def _normalize(params: Params) -> Dict[str, List[str]]:
    return {
        key: [value] if isinstance(value, str) else list(value)
        for key, value in params.items()
    }


def coerce_value(descriptor: FieldDescriptor, raw: str) -> Any:
    """
    Convert one submitted string into the field's scalar type.

    Raises:
        FormDecodeError: If the string is not a valid value for the field
    """
    scalar = descriptor.scalar_type
    semantic = descriptor.semantic
    try:
        if semantic is SemanticType.BOOL:
            return raw.lower() in _TRUTHY
        if semantic is SemanticType.ENUM:
            for member in scalar:
                if str(member.value) == raw:
                    return member
            raise ValueError(f"no member of {scalar.__name__} has value {raw!r}")
        if semantic is SemanticType.NUMBER:
            if scalar is Decimal:
                return Decimal(raw)
            if scalar is float:
                return float(raw)
            return int(raw)
        if semantic is SemanticType.DATE:
            return datetime.date.fromisoformat(raw)
        if semantic is SemanticType.TIME:
            return datetime.time.fromisoformat(raw)
        if scalar is datetime.datetime:
            return datetime.datetime.fromisoformat(raw)
    except (ValueError, ArithmeticError) as exc:
        raise FormDecodeError(descriptor.key, f"field {descriptor.key}: cannot decode {raw!r}: {exc}") from exc
    return raw


def _pair_checkboxes(submitted: List[str]) -> List[bool]:
    """
    Collapse repeated checkbox/shadow pairs into one bool per element.

    A checked box arrives as 'true' followed by its shadow 'false';
    an unchecked box arrives as the shadow 'false' alone.
    """
    flags = []
    idx = 0
    while idx < len(submitted):
        if submitted[idx] == FORM_CONSTANTS.TRUE_STRING:
            flags.append(True)
            if idx + 1 < len(submitted) and submitted[idx + 1] == FORM_CONSTANTS.FALSE_STRING:
                idx += 1
        else:
            flags.append(False)
        idx += 1
    return flags


def _decode_field(descriptor: FieldDescriptor, submitted: List[str]) -> Any:
    if descriptor.kind is WidgetKind.CHECKBOX:
        if descriptor.multi:
            container = type(descriptor.value) if isinstance(descriptor.value, (list, tuple)) else list
            return container(_pair_checkboxes(submitted))
        # checkbox plus hidden shadow input: any 'true' wins
        return FORM_CONSTANTS.TRUE_STRING in submitted

    if descriptor.multi:
        values = [
            coerce_value(descriptor, raw) for raw in submitted
            if raw != "" or descriptor.semantic is SemanticType.STRING
        ]
        container = type(descriptor.value) if isinstance(descriptor.value, (list, tuple, set, frozenset)) else list
        return container(values)

    raw = submitted[-1] if submitted else ""
    if raw == "" and descriptor.semantic is not SemanticType.STRING:
        # empty numeric, date or enum input keeps the current value
        return descriptor.value
    return coerce_value(descriptor, raw)


def decode_form(params: Params, record: Any, config: RendererConfig) -> Tuple[bool, Any]:
    """
    Populate a record from submitted form parameters.

    Args:
        params: Parsed request parameters, name -> submitted values
        record: Dataclass instance providing defaults and field types
        config: Configuration the form was rendered with (salt, timeout)

    Returns:
        (populated, record): populated is False and record unchanged if the
        request carried no parameters or no token; otherwise a new record
        with the submitted values

    Raises:
        FormTokenError: If the token is expired or invalid
        FormDecodeError: If a submitted value cannot be coerced
        RecordTypeError: If record is not a dataclass instance
    """
    ensure_record(record, "decode_form")
    submitted = _normalize(params or {})

    token_values = submitted.get(FORM_CONSTANTS.TOKEN_FIELD)
    if submitted and not token_values:
        logger.warning("Request params ignored, due to missing validation token")
    if not submitted or not token_values:
        return False, record

    config.token_service().validate(token_values[0])

    changes = {}
    for descriptor in describe_fields(record):
        if not descriptor.exported or not descriptor.init:
            continue
        if descriptor.semantic is SemanticType.BYTES:
            continue
        if descriptor.key not in submitted:
            continue
        changes[descriptor.name] = _decode_field(descriptor, submitted[descriptor.key])

    logger.debug(f"decode_form(): {len(changes)} fields populated on {type(record).__name__}")
    return True, dataclasses.replace(record, **changes)
