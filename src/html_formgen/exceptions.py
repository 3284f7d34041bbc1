"""Exceptions raised by html-formgen."""


class FormGenError(Exception):
    """Base class for all html-formgen errors."""


class AttributeTagError(FormGenError):
    """Raised when a field's attribute string is structurally invalid.

    Renderers catch this at their public boundary and return the message
    as inline markup instead of the rendered form.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class RecordTypeError(FormGenError, TypeError):
    """Raised when a renderer receives something other than a dataclass instance."""


class FormTokenError(FormGenError):
    """Raised when a form token is expired or was never issued."""


class FormDecodeError(FormGenError, ValueError):
    """Raised when a submitted value cannot be coerced into its field type."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)
