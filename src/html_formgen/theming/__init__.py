"""
Theming and styling system.

Color schemes and stylesheet generation for rendered forms and cards.
"""

from .color_scheme import ColorScheme
from .style_generator import DEFAULT_CSS, StyleSheetGenerator

__all__ = [
    "ColorScheme",
    "DEFAULT_CSS",
    "StyleSheetGenerator",
]
