"""One delimited line of raw field values per record."""

import logging
from typing import Any, Optional

from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.renderer_base import RecordRenderer
from html_formgen.protocols.record_protocols import ValidatorFunc, run_validator

logger = logging.getLogger(__name__)


class CsvRenderer(RecordRenderer):
    """
    Render a dataclass instance as a CSV line.

    Values are not quoted and option keys are never substituted. Each value
    is followed by the separator; a validation annotation is appended for
    invalid records, then a newline.
    """

    mode = "csv_line"

    def _render(self, record: Any, sep: str = FORM_CONSTANTS.DEFAULT_CSV_SEPARATOR,
                validator: Optional[ValidatorFunc] = None) -> str:
        descriptors = self._describe(record)
        values = [
            d.formatted() for d in descriptors
            if d.exported and not d.structural
        ]
        line = "".join(f"{value}{sep}" for value in values)

        errors, valid = run_validator(record, validator)
        if not valid:
            line += "record content is invalid, "
            line += "".join(f"field '{key}' has error '{msg}', " for key, msg in errors.items())

        return line + "\n"

    def _diagnostic(self, message: str) -> str:
        return message
