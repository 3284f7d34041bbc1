"""
Renderer configuration and record capability contracts.

ABC-based capabilities that records opt into explicitly, plus the
configuration object every renderer receives.
"""

from .record_protocols import (
    Validatable,
    Completable,
    ValidationResult,
    ValidatorFunc,
    resolve_validator,
    run_validator,
)
from .form_config import RendererConfig, SuffixPosition, new_instance_id

__all__ = [
    "Validatable",
    "Completable",
    "ValidationResult",
    "ValidatorFunc",
    "resolve_validator",
    "run_validator",
    "RendererConfig",
    "SuffixPosition",
    "new_instance_id",
]
