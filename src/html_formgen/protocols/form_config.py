"""Renderer configuration.

Each render call receives its configuration explicitly; there is no
process-wide default instance. Request handlers serving in parallel should
call clone_for_request() on a prepared configuration before adding errors.
"""

import copy
import logging
import time
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Sequence

from html_formgen.forms.form_constants import FORM_CONSTANTS
from html_formgen.forms.select_options import SelectOptions
from html_formgen.services.form_token_service import FormTokenService, default_salt
from html_formgen.theming.style_generator import DEFAULT_CSS

logger = logging.getLogger(__name__)


def new_instance_id() -> str:
    """Last 8 digits of a nanosecond clock; scopes CSS to one container."""
    return str(time.time_ns())[-8:]


class SuffixPosition(Enum):
    """Where the card view puts a field's suffix annotation."""
    NONE = 0
    BELOW_LABEL = 1
    AFTER_VALUE = 2


@dataclass
class RendererConfig:
    """Formatting options for converting a record into markup.

    Attributes:
        form_tag: Wrap the fields in <form ...> and </form>
        name: Form name
        method: Form method
        instance_id: Distinguishes several containers on one page
        form_timeout: Hours until a form post is rejected
        salt: Secret for form tokens
        select_options: Option lists by external key
        errors: Validation messages by external key; 'global' renders on top
        indent: Width of the label column in px; 0 leaves it to the CSS
        indent_addendum: Horizontal padding plus margin of label and input
        force_submit: Show the submit button even if only auto-submitting selects exist
        show_headline: Headline derived from the record's class name
        focus_first_error: Autofocus the first field carrying an error
        vertical_spacer: Height of the spacer after each field in rem
        css: Generic stylesheet, replaceable
        skip_empty: Card view only, fields with empty value are not rendered
        suffix_position: Card view only, placement of suffix annotations
    """

    form_tag: bool = True
    name: str = "frmMain"
    method: str = "POST"
    instance_id: str = field(default_factory=new_instance_id)
    form_timeout: int = 2
    salt: str = field(default_factory=default_salt)

    select_options: Dict[str, SelectOptions] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    indent: int = 0
    indent_addendum: int = 2 * (4 + 4)
    force_submit: bool = False
    show_headline: bool = False
    focus_first_error: bool = False
    vertical_spacer: float = 0.6

    css: str = DEFAULT_CSS

    skip_empty: bool = False
    suffix_position: SuffixPosition = SuffixPosition.AFTER_VALUE

    def clone_for_request(self) -> "RendererConfig":
        """
        Copy this configuration for use in a single request.

        The clone gets a fresh instance id, an empty error map and its own
        option table, so concurrent requests never share mutable state.
        """
        clone = copy.copy(self)
        clone.errors = {}
        clone.select_options = dict(self.select_options)
        clone.instance_id = new_instance_id()
        return clone

    def set_options(self, key: str, keys: Sequence[str], labels: Sequence[str]) -> None:
        """
        Register the dropdown options for a field.

        Always replaces earlier options for the key, so options never
        accumulate across clones.

        Raises:
            ValueError: If keys and labels differ in length
        """
        self.select_options[key] = SelectOptions.from_pairs(keys, labels)

    def add_options(self, key: str, keys: Sequence[str], labels: Sequence[str]) -> None:
        """Deprecated alias of set_options()."""
        warnings.warn("add_options() is deprecated, use set_options()", DeprecationWarning, stacklevel=2)
        self.set_options(key, keys, labels)

    def add_error(self, key: str, msg: str) -> None:
        """Add a validation message; key 'global' renders on top of the form."""
        if key in self.errors:
            self.errors[key] += FORM_CONSTANTS.ERROR_JOINER + msg
        else:
            self.errors[key] = msg

    def add_errors(self, errors: Mapping[str, str]) -> None:
        for key, msg in (errors or {}).items():
            self.add_error(key, msg)

    def default_option_key(self, key: str) -> str:
        """The option key selected on form init: the first registered one."""
        options = self.select_options.get(key)
        if not options:
            return ""
        return options[0].key

    def token_service(self) -> FormTokenService:
        return FormTokenService(salt=self.salt, timeout_hours=self.form_timeout)

    def vertical_spacer_html(self) -> str:
        return f"\t<div style='height:{self.vertical_spacer:3.1f}rem'>&nbsp;</div>"
