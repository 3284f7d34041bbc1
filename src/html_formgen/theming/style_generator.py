"""
Stylesheet generator for rendered forms.

Generates the generic stylesheet shared by all containers and the small
instance-specific block that pins label width and headline/submit offsets
for one container when a fixed indent is configured.
"""

import logging
from typing import Optional

from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """
    Generates CSS strings from ColorScheme objects.

    Usage:
        generator = StyleSheetGenerator(ColorScheme.create_light_theme())
        css = generator.generate_default_style()
    """

    def __init__(self, color_scheme: Optional[ColorScheme] = None):
        """
        Initialize the style generator with a color scheme.

        Args:
            color_scheme: ColorScheme instance to use for styling
        """
        self.color_scheme = color_scheme or ColorScheme.create_light_theme()

    def update_color_scheme(self, color_scheme: ColorScheme):
        """
        Update the color scheme used for style generation.

        Args:
            color_scheme: New ColorScheme instance
        """
        self.color_scheme = color_scheme

    def generate_default_style(self) -> str:
        """
        Generate the generic stylesheet for all containers.

        Label width and headline/submit offsets follow media queries here;
        generate_instance_style() overrides them for a fixed indent.

        Returns:
            str: Complete <style> element
        """
        cs = self.color_scheme
        return f"""<style>
div.struc2frm {{
    padding: 4px;
    margin:  4px;
    border: 1px solid {cs.to_hex(cs.border_color)};
    border-radius: 6px;
}}
div.struc2frm  h3 {{
    padding: 4px;
    margin:  4px;
}}
div.struc2frm  input,
div.struc2frm  textarea,
div.struc2frm  select,
div.struc2frm  button,
div.struc2frm  label {{
    padding: 4px;
    margin:  4px;
}}
div.struc2frm  label {{
    display: inline-block;
    vertical-align: middle;
    margin-top: 1px;
    text-align: right;
}}
div.struc2frm  span.postlabel {{
    display: inline-block;
    vertical-align: middle;
    font-size: 90%;
    position: relative;
    top: -3px;
    margin-left: 4px;
    max-width: 40px;
    line-height: 90%;
}}
div.struc2frm  div.separator {{
    height: 1px;
    border-top: 1px solid {cs.to_hex(cs.border_color)};
    padding: 0;
    margin: 0;
    margin-top: 4px;
    margin-bottom: 4px;
}}
div.struc2frm  fieldset {{
    border: 1px solid {cs.to_hex(cs.border_color)};
    padding: 4px;
    margin:  14px 4px;
    border-radius: 8px;
}}
div.struc2frm  legend {{
    font-size: 90%;
    margin-left: 8px;
    color: {cs.to_hex(cs.legend_text)};
    border: 1px solid {cs.to_hex(cs.legend_border)};
    padding: 0px 8px;
    border-radius: 5px;
}}
div.struc2frm  input:focus,
div.struc2frm  textarea:focus,
div.struc2frm  select:focus {{
    background-color: {cs.to_hex(cs.accent_bg)};
}}
div.struc2frm  button[type=submit],
div.struc2frm  input[type=submit]
{{
    margin-left: 186px;
    width: 280px;
    height: 40px;
    padding: 4px 16px;
    margin-top: 12px;
    margin-bottom: 8px;
    border-radius: 6px;
}}
/* hide spinners for numbers */
input[type="number"]::-webkit-outer-spin-button,
input[type="number"]::-webkit-inner-spin-button {{
    -webkit-appearance: none;
    margin: 0;
}}
input[type="number"] {{
    -moz-appearance: textfield;
}}
{self._media_block("screen and (max-width: 1023px)", 90)}
{self._media_block("screen and (min-width: 1024px)", 120)}
{self._media_block("screen and (min-width: 1824px)", 150)}
.error-block {{
    color: {cs.to_hex(cs.error_text)};
}}
</style>"""

    def _media_block(self, query: str, label_width: int) -> str:
        offset = label_width + 16
        return f"""@media {query} {{
    div.struc2frm  label {{
        min-width: {label_width}px;
    }}
    div.struc2frm  h3 {{
        margin-left: {offset}px;
    }}
    div.struc2frm  button[type=submit],
    div.struc2frm  input[type=submit]
    {{
        margin-left: {offset}px;
    }}
}}"""

    def generate_instance_style(self, instance_id: str, indent: int, indent_addendum: int) -> str:
        """
        Generate the block for one container with a fixed label indent.

        Args:
            instance_id: Container instance identifier
            indent: Label column width in px
            indent_addendum: Horizontal padding plus margin of label and input

        Returns:
            str: <style> element scoped to div.struc2frm-<instance_id>
        """
        scope = f"div.struc2frm-{instance_id}"
        offset = indent + indent_addendum
        return f"""
<style>
    /* instance specifics */
    {scope}  label {{
        min-width: {indent}px;
    }}
    {scope}  h3 {{
        margin-left: {offset}px;
    }}
    {scope}  button[type=submit],
    {scope}  input[type=submit]
    {{
        margin-left: {offset}px;
    }}
</style>
"""


# Generated once at import, shared read-only by all configurations
DEFAULT_CSS = StyleSheetGenerator().generate_default_style()
