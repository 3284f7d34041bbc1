"""
Optional record capabilities.

Records opt into a capability by inheriting the ABC explicitly; renderers
check with isinstance instead of probing attributes. Callers may also pass
a validator callable directly to a renderer, which takes precedence.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

# validate() result: per-field messages keyed by external key, overall validity
ValidationResult = Tuple[Dict[str, str], bool]
ValidatorFunc = Callable[[], ValidationResult]


class Validatable(ABC):
    """
    ABC for records that can judge whether their content is submittable.

    Example:
        @dataclass
        class EntryForm(Validatable):
            department: str = ""

            def validate(self):
                errs = {}
                if not self.department:
                    errs["department"] = "Please choose a department"
                return errs, not errs
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """
        Check the record's content.

        Returns:
            Tuple of (error messages by external key, overall validity)
        """
        pass


class Completable(ABC):
    """ABC for records rendered by the list view."""

    @abstractmethod
    def complete(self) -> bool:
        """Return True if every required entry is present."""
        pass


def resolve_validator(record: Any, validator: Optional[ValidatorFunc] = None) -> Optional[ValidatorFunc]:
    """
    Pick the validator for a render call.

    Args:
        record: The record being rendered
        validator: Explicit validator passed by the caller

    Returns:
        The explicit validator, else record.validate for Validatable
        records, else None
    """
    if validator is not None:
        return validator
    if isinstance(record, Validatable):
        return record.validate
    return None


def run_validator(record: Any, validator: Optional[ValidatorFunc] = None) -> ValidationResult:
    """Run the resolved validator; records without one are valid."""
    resolved = resolve_validator(record, validator)
    if resolved is None:
        return {}, True
    errors, valid = resolved()
    return dict(errors or {}), bool(valid)
