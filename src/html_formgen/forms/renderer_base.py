"""
Abstract base class for record renderers.

The form, card, list and CSV renderers share the same entry contract:
take a dataclass instance, walk its field descriptors in declaration order
and assemble a string. Caller-input problems (a malformed attribute string,
something that is not a record) never escape as exceptions; they are turned
into an inline diagnostic at the public boundary so the renderer stays
usable for the next call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from markupsafe import Markup

from html_formgen.exceptions import AttributeTagError, RecordTypeError
from html_formgen.forms.attribute_tags import unescape_commas
from html_formgen.forms.field_info_types import (
    FieldDescriptor,
    describe_fields,
    ensure_record,
    record_title,
)
from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.protocols.form_config import RendererConfig
from html_formgen.theming.style_generator import StyleSheetGenerator

logger = logging.getLogger(__name__)


class RecordRenderer(ABC):
    """
    Base class for all renderers.

    Subclasses set ``mode`` (used in diagnostics) and implement _render().
    """

    mode: str = "render"

    def __init__(self, config: RendererConfig):
        self.config = config

    def render(self, record: Any, *args, **kwargs):
        """
        Render a record.

        Returns:
            The rendered output, or an inline diagnostic for invalid
            attribute strings and non-record arguments
        """
        try:
            return self._render(record, *args, **kwargs)
        except (AttributeTagError, RecordTypeError) as exc:
            logger.warning(f"{self.mode}() rejected its input: {exc}")
            return self._diagnostic(str(exc))

    __call__ = render

    @abstractmethod
    def _render(self, record: Any, *args, **kwargs):
        """Render a record; may raise AttributeTagError or RecordTypeError."""
        pass

    def _diagnostic(self, message: str):
        return Markup(message)

    def _describe(self, record: Any) -> List[FieldDescriptor]:
        """
        Describe the record's fields and validate every exported attribute string.

        Validation happens before any output is assembled, so a malformed
        field anywhere in the record aborts the whole render.
        """
        ensure_record(record, self.mode)
        descriptors = describe_fields(record)
        for descriptor in descriptors:
            if descriptor.exported:
                descriptor.check(self.mode)
        logger.debug(f"{self.mode}(): {len(descriptors)} fields on {type(record).__name__}")
        return descriptors

    def render_css(self) -> str:
        """Generic stylesheet plus the instance block when a label indent is set."""
        css = self.config.css
        if self.config.indent == 0:
            return css
        return css + StyleSheetGenerator().generate_instance_style(
            self.config.instance_id, self.config.indent, self.config.indent_addendum
        )

    def _container_open(self, record: Any) -> str:
        # one class selector for general, one for the specific instance
        opening = (
            f"<div class='{FORM_CONSTANTS.CONTAINER_CLASS} "
            f"{FORM_CONSTANTS.CONTAINER_CLASS}-{self.config.instance_id}'>\n"
        )
        if self.config.show_headline:
            opening += f"<h3>{record_title(record)}</h3>\n"
        return opening

    @staticmethod
    def _finish(parts: List[str]) -> Markup:
        """Join the parts and resolve comma escapes once, on the whole markup."""
        return Markup(unescape_commas("".join(parts)))
