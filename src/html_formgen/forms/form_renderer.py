"""
HTML form rendering.

FormRenderer walks the record's fields once, emitting label, widget,
suffix and spacer per field. Fieldset markers open a fieldset that stays
open until the next marker or the end of the fields.
"""

import logging
from typing import Any, List

from markupsafe import Markup

from html_formgen.forms.attribute_tags import tag_value, tags_to_attrs
from html_formgen.forms.field_info_types import FieldDescriptor
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.labels import access_keyify
from html_formgen.forms.renderer_base import RecordRenderer
from html_formgen.forms.widget_kinds import WidgetKind
from html_formgen.forms.widget_strategies import RenderState, emitter_for

logger = logging.getLogger(__name__)


class FormRenderer(RecordRenderer):
    """
    Render a dataclass instance as an HTML form.

    Example:
        config = RendererConfig(show_headline=True)
        config.set_options("department", ["ub", "fm"], ["UB", "FM"])
        html = FormRenderer(config).render(EntryForm())
    """

    mode = "form"

    def _render(self, record: Any) -> Markup:
        cfg = self.config
        descriptors = self._describe(record)
        rendered = [d for d in descriptors if self._is_rendered(d)]

        state = RenderState(select_options=cfg.select_options)
        parts = [self.render_css(), self._container_open(record)]

        if cfg.form_tag:
            parts.append(self._form_open(rendered))

        if FORM_CONSTANTS.GLOBAL_ERROR_KEY in cfg.errors:
            parts.append(self._error_block(cfg.errors[FORM_CONSTANTS.GLOBAL_ERROR_KEY]))

        parts.append(
            f"\t<input name='{FORM_CONSTANTS.TOKEN_FIELD}' type='hidden' "
            f"value='{cfg.token_service().issue()}' />\n"
        )

        for descriptor in rendered:
            parts.extend(self._render_field(descriptor, state))

        if state.fieldset_open:
            parts.append("</fieldset>\n")

        parts.append(self._submit_control(state.need_submit or cfg.force_submit))

        if cfg.form_tag:
            parts.append("</form>\n")
        parts.append(FORM_CONSTANTS.CONTAINER_CLOSE)
        return self._finish(parts)

    @staticmethod
    def _is_rendered(descriptor: FieldDescriptor) -> bool:
        return descriptor.exported and not descriptor.skipped and not descriptor.is_status

    def _form_open(self, rendered: List[FieldDescriptor]) -> str:
        # browsers only send file content with multipart post requests
        if any(d.kind is WidgetKind.FILE for d in rendered):
            return (
                f"<form name='{self.config.name}' method='post' "
                f"enctype='{FORM_CONSTANTS.MULTIPART_ENCTYPE}' >\n"
            )
        return f"<form name='{self.config.name}' method='{self.config.method}' >\n"

    @staticmethod
    def _error_block(message: str) -> str:
        return f"\t<p class='error-block' >{message}</p>\n"

    def _render_field(self, descriptor: FieldDescriptor, state: RenderState) -> List[str]:
        cfg = self.config
        kind = descriptor.kind
        emitter = emitter_for(kind)
        logger.debug(f"Field {descriptor.key}: {kind.value} via {type(emitter).__name__}")

        parts = []
        error = cfg.errors.get(descriptor.key)
        if error is not None:
            parts.append(self._error_block(error))

        attrs_html = tags_to_attrs(descriptor.attrs)
        if error is not None and cfg.focus_first_error and not state.focused and not emitter.structural:
            attrs_html += " autofocus"
            state.focused = True

        if emitter.needs_label:
            valign = "vertical-align: top;" if kind is WidgetKind.TEXTAREA else ""
            label = access_keyify(descriptor.label, tag_value(descriptor.attrs, "accesskey"))
            parts.append(f"\t<label for='{descriptor.key}' style='{valign}' >{label}</label>\n")

        parts.append(emitter.emit(descriptor, attrs_html, state))
        if emitter.requires_submit(descriptor):
            state.need_submit = True

        if descriptor.suffix:
            parts.append(f"<span class='postlabel' >{descriptor.suffix}</span>")

        if not emitter.structural and tag_value(descriptor.attrs, "nobreak") == "":
            parts.append("\n")
            parts.append(cfg.vertical_spacer_html())

        parts.append("\n")
        return parts

    def _submit_control(self, show_button: bool) -> str:
        # the button must not be named 'submit', this.form.submit() would break
        if show_button:
            return (
                f"\t<button type='submit' name='{FORM_CONSTANTS.SUBMIT_FIELD}' value='1' "
                f"accesskey='s' ><b>S</b>ubmit</button>\n{self.config.vertical_spacer_html()}\n"
            )
        return f"\t<input type='hidden' name='{FORM_CONSTANTS.SUBMIT_FIELD}' value='1' />\n"
