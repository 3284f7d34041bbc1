"""Read-only card view: labelled static values inside a list."""

import logging
from typing import Any, Dict, List, Optional

from markupsafe import Markup

from html_formgen.forms.field_info_types import FieldDescriptor, format_value, status_message
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.renderer_base import RecordRenderer
from html_formgen.forms.widget_strategies import resolve_options
from html_formgen.protocols.form_config import SuffixPosition
from html_formgen.protocols.record_protocols import ValidatorFunc, run_validator

logger = logging.getLogger(__name__)

SEPARATOR_ITEM = "\t<div class='separator'></div>\n"


class CardRenderer(RecordRenderer):
    """
    Render a dataclass instance as a card of label/value pairs.

    Option keys are replaced by their display labels. If the record's
    validator reports invalid content, the card shows the status message
    and the field errors instead of the values.
    """

    mode = "card"

    def _render(self, record: Any, validator: Optional[ValidatorFunc] = None) -> Markup:
        descriptors = self._describe(record)
        status = status_message(descriptors)

        items = []
        for descriptor in descriptors:
            if not descriptor.exported or descriptor.skipped or descriptor.is_status:
                continue
            # separators carry no value and render regardless of skip_empty
            if descriptor.structural:
                items.append(SEPARATOR_ITEM)
                continue
            if self.config.skip_empty and descriptor.formatted() == "":
                continue
            items.append(self._item(descriptor))

        errors, valid = run_validator(record, validator)
        if not valid:
            logger.debug(f"card(): {type(record).__name__} is invalid: {errors}")

        parts = [self.render_css(), self._container_open(record), "<ul>\n"]
        parts.extend(items if valid else [self._invalid_block(status, errors)])
        parts.append("</ul>\n")
        parts.append(FORM_CONSTANTS.CONTAINER_CLOSE)
        return self._finish(parts)

    def display_value(self, descriptor: FieldDescriptor) -> str:
        """Field value with option keys substituted by their display labels."""
        raw = [format_value(v) for v in descriptor.values()]
        options = resolve_options(descriptor, self.config.select_options)
        return FORM_CONSTANTS.MULTI_VALUE_JOINER.join(options.substitute(raw))

    def _item(self, descriptor: FieldDescriptor) -> str:
        position = self.config.suffix_position
        suffix = descriptor.suffix
        lines: List[str] = ["\t<li>\n"]
        if position is SuffixPosition.BELOW_LABEL and suffix:
            lines.append(
                f"\t<div class='card-label' >{descriptor.label}:\n"
                f"\t\t<br><span class='postlabel' >({suffix})</span>\n"
                f"\t</div>"
            )
        else:
            lines.append(f"\t<div class='card-label' >{descriptor.label}:</div>")
        lines.append(f"  {self.display_value(descriptor)}  \n")
        if position is SuffixPosition.AFTER_VALUE and suffix:
            lines.append(f"\t<span class='postlabel' >{suffix}</span>\n")
        lines.append("\t</li>\n")
        return "".join(lines)

    @staticmethod
    def _invalid_block(status: str, errors: Dict[str, str]) -> str:
        lines = ["\t<li>\n", f"\t  {FORM_CONSTANTS.INVALID_RECORD_MSG.format(status)}\n"]
        for key, msg in errors.items():
            lines.append(f"\t  Field: {key} - {msg}\n")
        lines.append("\t</li>\n")
        return "".join(lines)
