"""
Record rendering.

Field descriptors, the attribute mini-language, the widget emitter registry
and the form, card, list and CSV renderers, plus the form decoder.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_renderer import FormRenderer
    from .card_renderer import CardRenderer
    from .csv_renderer import CsvRenderer
    from .list_renderer import ListRenderer
    from .renderer_base import RecordRenderer
    from .form_decoder import decode_form
    from .field_info_types import FieldDescriptor, describe_fields, form_field
    from .widget_registry import WidgetMeta, WIDGET_IMPLEMENTATIONS, get_widget_class
    from .widget_kinds import SemanticType, WidgetKind, to_widget_kind
    from .select_options import Option, SelectOptions
    from .labels import labelize, access_keyify
    from .attribute_tags import tag_value, comma_inside_quotes
    from .form_constants import FORM_CONSTANTS

_EXPORTS = {
    "FormRenderer": ("html_formgen.forms.form_renderer", "FormRenderer"),
    "CardRenderer": ("html_formgen.forms.card_renderer", "CardRenderer"),
    "CsvRenderer": ("html_formgen.forms.csv_renderer", "CsvRenderer"),
    "ListRenderer": ("html_formgen.forms.list_renderer", "ListRenderer"),
    "RecordRenderer": ("html_formgen.forms.renderer_base", "RecordRenderer"),
    "decode_form": ("html_formgen.forms.form_decoder", "decode_form"),
    "FieldDescriptor": ("html_formgen.forms.field_info_types", "FieldDescriptor"),
    "describe_fields": ("html_formgen.forms.field_info_types", "describe_fields"),
    "form_field": ("html_formgen.forms.field_info_types", "form_field"),
    "WidgetMeta": ("html_formgen.forms.widget_registry", "WidgetMeta"),
    "WIDGET_IMPLEMENTATIONS": ("html_formgen.forms.widget_registry", "WIDGET_IMPLEMENTATIONS"),
    "get_widget_class": ("html_formgen.forms.widget_registry", "get_widget_class"),
    "SemanticType": ("html_formgen.forms.widget_kinds", "SemanticType"),
    "WidgetKind": ("html_formgen.forms.widget_kinds", "WidgetKind"),
    "to_widget_kind": ("html_formgen.forms.widget_kinds", "to_widget_kind"),
    "Option": ("html_formgen.forms.select_options", "Option"),
    "SelectOptions": ("html_formgen.forms.select_options", "SelectOptions"),
    "labelize": ("html_formgen.forms.labels", "labelize"),
    "access_keyify": ("html_formgen.forms.labels", "access_keyify"),
    "tag_value": ("html_formgen.forms.attribute_tags", "tag_value"),
    "comma_inside_quotes": ("html_formgen.forms.attribute_tags", "comma_inside_quotes"),
    "FORM_CONSTANTS": ("html_formgen.forms.form_constants", "FORM_CONSTANTS"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
