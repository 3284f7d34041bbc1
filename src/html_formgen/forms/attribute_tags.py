"""
Parser for the attribute mini-language embedded in field metadata.

An attribute string is a comma separated list of ``key='value'`` or
``key=value`` tokens, for instance::

    maxlength='42',size='28',suffix='optional'

Because the comma separates tokens, a literal comma inside a quoted value
must be written as ``&comma;``. The escape is resolved exactly once, on the
finished markup (see unescape_commas), never per attribute.
"""

import logging
from typing import List, Tuple

from html_formgen.exceptions import AttributeTagError
from html_formgen.forms.form_constants import FORM_CONSTANTS

logger = logging.getLogger(__name__)

# Keys copied verbatim into the rendered input element
PASS_THROUGH_KEYS: Tuple[str, ...] = (
    "size",            # visible width of input field
    "maxlength",       # digits of input data
    "max",             # input number
    "min",             # input number
    "step",            # input number, special value 'any'
    "pattern",         # client side validation
    "placeholder",     # watermark showing expected input
    "rows",            # textarea
    "cols",            # textarea
    "accept",          # file upload extension
    "accesskey",       # goes into input, not into label
    "title",           # mouse over tooltip
    "autocapitalize",  # 'off' prevents upper case first word on mobile phones
    "inputmode",       # 'numeric' shows number keyboard on mobile phones
    "multiple",
    "autofocus",
)


def split_tokens(attrs: str) -> List[str]:
    """Split an attribute string into its stripped, non-empty tokens."""
    tokens = (token.strip() for token in attrs.split(FORM_CONSTANTS.ATTR_SEPARATOR))
    return [token for token in tokens if token]


def _token_value(token: str) -> str:
    _, assign, value = token.partition(FORM_CONSTANTS.ATTR_ASSIGN)
    if not assign:
        return ""
    return value.strip().strip(FORM_CONSTANTS.ATTR_QUOTE)


def tag_value(attrs: str, key: str) -> str:
    """
    Return the value of a single key from an attribute string.

    Keys are matched case-insensitively. An exact key match wins; otherwise
    the first token whose key starts with the requested key is used.

    Args:
        attrs: Attribute string, e.g. "maxlength='42',size='28'"
        key: Key to look up, e.g. "size"

    Returns:
        The unquoted value, or "" if the key is absent

    Example:
        >>> tag_value("maxlength='42',size='28',suffix='optional'", "size")
        '28'
    """
    key = key.lower()
    prefixed = None
    for token in split_tokens(attrs):
        token_key = token.partition(FORM_CONSTANTS.ATTR_ASSIGN)[0].strip().lower()
        if token_key == key:
            return _token_value(token)
        if prefixed is None and token_key.startswith(key):
            prefixed = token
    if prefixed is None:
        return ""
    return _token_value(prefixed)


def comma_inside_quotes(attrs: str) -> bool:
    """
    Check for a raw comma inside a single quoted value.

    Splitting on the quote character leaves the quoted content in the odd
    indexed segments; only those are scanned.
    """
    segments = attrs.split(FORM_CONSTANTS.ATTR_QUOTE)
    return any(
        FORM_CONSTANTS.ATTR_SEPARATOR in segment
        for segment in segments[1::2]
    )


def check_attributes(attrs: str, key: str, mode: str) -> None:
    """
    Reject structurally invalid attribute strings.

    Args:
        attrs: Attribute string of the field
        key: External key of the field, used in the diagnostic
        mode: Name of the rendering operation, used in the diagnostic

    Raises:
        AttributeTagError: If attrs contains ", " or " ," or a raw comma
            inside a quoted value
    """
    if any(seq in attrs for seq in FORM_CONSTANTS.FORBIDDEN_SEQUENCES):
        raise AttributeTagError(key, FORM_CONSTANTS.FORBIDDEN_SEQUENCE_MSG.format(mode, key))
    if comma_inside_quotes(attrs):
        raise AttributeTagError(key, FORM_CONSTANTS.COMMA_INSIDE_QUOTES_MSG.format(mode, key))


def tags_to_attrs(attrs: str) -> str:
    """
    Convert an attribute string into HTML element attributes.

    Only the pass-through vocabulary is emitted; label, suffix, subtype,
    nobreak and wildcardselect steer rendering and are dropped here.
    Any onchange token becomes an auto-submit handler.

    Returns:
        Space prefixed attributes, e.g. " maxlength='42' size='28'"
    """
    rendered = []
    for token in split_tokens(attrs):
        lowered = token.lower()
        if lowered.startswith("onchange"):
            rendered.append(FORM_CONSTANTS.AUTO_SUBMIT_ATTR)
            continue
        if any(lowered.startswith(f"{key}=") for key in PASS_THROUGH_KEYS):
            rendered.append(token)
    return "".join(f" {attr}" for attr in rendered)


def unescape_commas(markup: str) -> str:
    """Resolve the comma escape on finished markup."""
    return markup.replace(FORM_CONSTANTS.COMMA_ESCAPE, FORM_CONSTANTS.ATTR_SEPARATOR)
