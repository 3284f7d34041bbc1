"""Compact list view for records implementing Completable."""

import logging
from typing import Any, List, Tuple

from markupsafe import Markup

from html_formgen.exceptions import RecordTypeError
from html_formgen.forms.field_info_types import status_message
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.renderer_base import RecordRenderer
from html_formgen.protocols.record_protocols import Completable

logger = logging.getLogger(__name__)


def title_words(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest as is."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


class ListRenderer(RecordRenderer):
    """
    Render the non-empty string and bool fields of a complete record.

    Incomplete records render a single item holding the status message.
    No container, stylesheet or headline is emitted.
    """

    mode = "list"

    def _render(self, record: Any) -> Markup:
        descriptors = self._describe(record)
        if not isinstance(record, Completable):
            raise RecordTypeError(
                FORM_CONSTANTS.NOT_COMPLETABLE_MSG.format(self.mode, type(record).__name__)
            )

        entries: List[Tuple[str, str]] = []
        for descriptor in descriptors:
            if not descriptor.exported or descriptor.structural or descriptor.is_status:
                continue
            value = descriptor.value
            if isinstance(value, bool):
                entries.append((descriptor.label, descriptor.formatted()))
            elif isinstance(value, str) and value != "":
                entries.append((descriptor.label, title_words(value)))

        parts = ["<ul>\n"]
        if record.complete():
            for label, value in entries:
                parts.append("\t<li>\n")
                parts.append(f"\t<span style='display: inline-block; width: 40%;' >{label}:</span>")
                parts.append(f"  {value}  \n")
                parts.append("\t</li>\n")
        else:
            status = status_message(descriptors)
            parts.append("\t<li>\n")
            parts.append(f"\t  {FORM_CONSTANTS.INCOMPLETE_RECORD_MSG.format(status)}\n")
            parts.append("\t</li>\n")
        parts.append("</ul>\n")
        return self._finish(parts)
