"""
Color scheme for rendered forms and cards.

Centralizes the handful of colors used by the default stylesheet so that
applications can restyle all renderers from one place.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass
class ColorScheme:
    """
    Semantic colors used by StyleSheetGenerator.

    Colors are RGB tuples; to_hex() converts them for CSS.
    """

    # Borders and separators
    border_color: Tuple[int, int, int] = (170, 170, 170)     # #aaaaaa - container, fieldset, separator
    legend_border: Tuple[int, int, int] = (170, 170, 170)    # #aaaaaa
    legend_text: Tuple[int, int, int] = (68, 68, 68)         # #444444

    # Status colors
    error_text: Tuple[int, int, int] = (204, 0, 0)           # #cc0000 - error blocks

    # Highlighted inputs
    accent_bg: Tuple[int, int, int] = (189, 183, 107)        # #bdb76b - darkkhaki, focused inputs

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert an RGB tuple to a CSS hex color.

        Args:
            color_tuple: (r, g, b) with components 0-255

        Returns:
            str: Color such as "#aaaaaa"
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_light_theme(cls) -> "ColorScheme":
        """Default scheme: grey borders on a light page."""
        return cls()

    @classmethod
    def create_dark_theme(cls) -> "ColorScheme":
        """Scheme for dark pages."""
        return cls(
            border_color=(85, 85, 85),
            legend_border=(102, 102, 102),
            legend_text=(204, 204, 204),
            error_text=(255, 102, 102),
            accent_bg=(85, 85, 51),
        )
