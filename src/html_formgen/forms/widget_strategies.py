"""
Per-kind widget emitters for the form renderer.

Each emitter handles one or more WidgetKind values and registers itself
through WidgetMeta. The form renderer looks the emitter up once per field
and asks it for the label decision, the submit decision and the markup.

Multi-value fields render one input per element (selects mark every
contained key instead). Only the first element carries the id.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List

from html_formgen.forms.attribute_tags import tag_value
from html_formgen.forms.field_info_types import FieldDescriptor, format_value
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.select_options import SelectOptions
from html_formgen.forms.widget_kinds import WidgetKind
from html_formgen.forms.widget_registry import WidgetMeta, get_widget_class

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    """Mutable state of one render pass; never shared between calls."""
    select_options: dict
    fieldset_open: bool = False
    need_submit: bool = False
    focused: bool = False


class WidgetEmitter(ABC, metaclass=WidgetMeta):
    """
    ABC for widget emitters.

    Subclasses declare _widget_kinds and implement emit().
    """

    _widget_kinds: tuple = ()
    needs_label: bool = True
    structural: bool = False

    def requires_submit(self, field: FieldDescriptor) -> bool:
        """Whether this widget needs a submit button to send its value."""
        return True

    @abstractmethod
    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        """
        Render the widget.

        Args:
            field: Descriptor of the field
            attrs_html: Pass-through HTML attributes, space prefixed
            state: Render pass state

        Returns:
            Widget markup without trailing newline
        """
        pass

    @staticmethod
    def _id_attr(field: FieldDescriptor, idx: int) -> str:
        return f" id='{field.key}'" if idx == 0 else ""

    @staticmethod
    def _element_values(field: FieldDescriptor) -> List[Any]:
        values = field.values()
        return values if values else [None]


class InputWidget(WidgetEmitter):
    """Plain vanilla input typed per widget kind, value injected verbatim."""
    _widget_kinds = (WidgetKind.TEXT, WidgetKind.NUMBER, WidgetKind.DATE, WidgetKind.TIME)

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        input_type = field.kind.value
        return "\n".join(
            f"\t<input type='{input_type}' name='{field.key}'{self._id_attr(field, idx)} "
            f"value='{format_value(value)}'{attrs_html} />"
            for idx, value in enumerate(self._element_values(field))
        )


class CheckboxWidget(WidgetEmitter):
    """
    Checkbox plus a hidden shadow input carrying 'false'.

    Browsers omit unchecked boxes from the submission; the shadow input
    makes sure a value arrives anyway.
    """
    _widget_kinds = (WidgetKind.CHECKBOX,)

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        lines = []
        for idx, value in enumerate(self._element_values(field)):
            checked = " checked" if value is True else ""
            lines.append(
                f"\t<input type='checkbox' name='{field.key}'{self._id_attr(field, idx)} "
                f"value='{FORM_CONSTANTS.TRUE_STRING}'{checked}{attrs_html} />"
            )
            lines.append(
                f"\t<input type='hidden' name='{field.key}' value='{FORM_CONSTANTS.FALSE_STRING}' />"
            )
        return "\n".join(lines)


class FileWidget(WidgetEmitter):
    """File input; binary content cannot be reflected, a placeholder value is used."""
    _widget_kinds = (WidgetKind.FILE,)

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        return (
            f"\t<input type='file' name='{field.key}' id='{field.key}' "
            f"value='{FORM_CONSTANTS.FILE_PLACEHOLDER_VALUE}'{attrs_html} />"
        )


class TextareaWidget(WidgetEmitter):
    _widget_kinds = (WidgetKind.TEXTAREA,)

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        content = "\n".join(format_value(v) for v in field.values())
        return f"\t<textarea name='{field.key}' id='{field.key}'{attrs_html}>{content}</textarea>"


class SelectWidget(WidgetEmitter):
    """
    Dropdown with one <option> per registered entry.

    Options come from the render's option table under the field key, then
    from the enum members for enum fields; otherwise the select is empty.
    """
    _widget_kinds = (WidgetKind.SELECT,)

    def requires_submit(self, field: FieldDescriptor) -> bool:
        # selects submitting themselves on change need no button
        return tag_value(field.attrs, "onchange") == ""

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        options = resolve_options(field, state.select_options)
        selected = {format_value(v) for v in field.values()}
        select_all = (
            tag_value(field.attrs, "wildcardselect") != ""
            and FORM_CONSTANTS.WILDCARD_VALUE in selected
        )
        return (
            "\t<div class='select-arrow'>\n"
            f"\t<select name='{field.key}' id='{field.key}'{attrs_html}>\n"
            f"{options.to_html(selected, select_all=select_all)}"
            "\t</select>\n"
            "\t</div>"
        )


class SeparatorWidget(WidgetEmitter):
    _widget_kinds = (WidgetKind.SEPARATOR,)
    needs_label = False
    structural = True

    def requires_submit(self, field: FieldDescriptor) -> bool:
        return False

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        return "\t<div class='separator'></div>"


class FieldsetWidget(WidgetEmitter):
    """Closes a previously open fieldset and opens a new one."""
    _widget_kinds = (WidgetKind.FIELDSET,)
    needs_label = False
    structural = True

    def requires_submit(self, field: FieldDescriptor) -> bool:
        return False

    def emit(self, field: FieldDescriptor, attrs_html: str, state: RenderState) -> str:
        closing = "</fieldset>\n" if state.fieldset_open else ""
        state.fieldset_open = True
        return f"{closing}<fieldset>\t<legend>&nbsp;{field.label}&nbsp;</legend>"


def resolve_options(field: FieldDescriptor, select_options: dict) -> SelectOptions:
    """Registered options for the field key, enum-derived options, or none."""
    if field.key in select_options:
        return select_options[field.key]
    if field.enum_type is not None:
        return SelectOptions.from_enum(field.enum_type)
    return SelectOptions()


def emitter_for(kind: WidgetKind) -> WidgetEmitter:
    """Instantiate the registered emitter for a widget kind."""
    return get_widget_class(kind)()
