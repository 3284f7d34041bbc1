"""
Service layer.

Stateless helpers used by the renderers but independent of rendering.
"""

from .form_token_service import FIXED_ZONE, FormTokenService, default_salt

__all__ = [
    "FIXED_ZONE",
    "FormTokenService",
    "default_salt",
]
