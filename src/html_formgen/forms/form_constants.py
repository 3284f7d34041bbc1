"""
Form constants for eliminating magic strings throughout the renderers.

This module centralizes the reserved keys, markup fragments and diagnostic
templates shared by the form, card, list and CSV renderers.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class FormConstants:
    """
    Centralized constants for the renderers.

    Categories:
    - Attribute mini-language tokens
    - Reserved field keys
    - Markup fragments
    - Diagnostic message templates
    """

    # Attribute mini-language
    ATTR_SEPARATOR: str = ","
    ATTR_ASSIGN: str = "="
    ATTR_QUOTE: str = "'"
    COMMA_ESCAPE: str = "&comma;"
    SKIP_MARKER: str = "-"
    FORBIDDEN_SEQUENCES: tuple = (", ", " ,")
    OMITEMPTY_SUFFIX: str = ",omitempty"

    # Field metadata keys (dataclasses.field(metadata=...))
    METADATA_KEY: str = "key"
    METADATA_FORM: str = "form"

    # Reserved field keys
    GLOBAL_ERROR_KEY: str = "global"
    TOKEN_FIELD: str = "token"
    SUBMIT_FIELD: str = "btnSubmit"
    STATUS_KEYS: FrozenSet[str] = frozenset({"status", "msg"})
    STATUS_JOINER: str = " - "
    SEPARATOR_KEY_PREFIX: str = "separator"
    INTERNAL_FIELD_PREFIX: str = "_"

    # Values
    TRUE_STRING: str = "true"
    FALSE_STRING: str = "false"
    FILE_PLACEHOLDER_VALUE: str = "ignored.json"
    WILDCARD_VALUE: str = "*"
    ERROR_JOINER: str = "<br>\n"
    MULTI_VALUE_JOINER: str = ", "
    CSV_MULTI_VALUE_JOINER: str = " "
    DEFAULT_CSV_SEPARATOR: str = ";"

    # Markup fragments
    CONTAINER_CLASS: str = "struc2frm"
    CONTAINER_CLOSE: str = "</div><!-- </div class='struc2frm'... -->\n"
    AUTO_SUBMIT_ATTR: str = "onchange='javascript:this.form.submit();'"
    MULTIPART_ENCTYPE: str = "multipart/form-data"

    # Diagnostic message templates
    NOT_A_RECORD_MSG: str = "{}() - argument must be a dataclass instance - is {}"
    NOT_COMPLETABLE_MSG: str = "{}() - argument must implement Completable - is {}"
    FORBIDDEN_SEQUENCE_MSG: str = "{}() - field {}: attribute string cannot contain ', ' or ' ,'"
    COMMA_INSIDE_QUOTES_MSG: str = (
        "{}() - field {}: attribute string - use &comma; instead of ',' inside of single quoted values"
    )
    INVALID_RECORD_MSG: str = "Record content is invalid: {}"
    INCOMPLETE_RECORD_MSG: str = "Record is incomplete: {}"


# Create a singleton instance for easy access throughout the codebase
FORM_CONSTANTS = FormConstants()
