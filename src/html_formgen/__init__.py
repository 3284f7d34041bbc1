"""
html-formgen: HTML forms, card views and CSV lines from dataclass records.

Field metadata declared with form_field() steers the rendering through a
compact attribute mini-language such as "maxlength='16',size='16'".

Architecture:
- Tier 1 (Protocols): RendererConfig and the Validatable/Completable ABCs
- Tier 2 (Services): Form token issuing and validation
- Tier 3 (Theming): Generic and per-instance stylesheets
- Tier 4 (Forms): Descriptors, widget emitters, renderers and the decoder

Example:
    from html_formgen import FormRenderer, RendererConfig

    config = RendererConfig(show_headline=True)
    html = FormRenderer(config).render(EntryForm())
"""

from __future__ import annotations

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "FormRenderer": ("html_formgen.forms.form_renderer", "FormRenderer"),
    "CardRenderer": ("html_formgen.forms.card_renderer", "CardRenderer"),
    "CsvRenderer": ("html_formgen.forms.csv_renderer", "CsvRenderer"),
    "ListRenderer": ("html_formgen.forms.list_renderer", "ListRenderer"),
    "decode_form": ("html_formgen.forms.form_decoder", "decode_form"),
    "form_field": ("html_formgen.forms.field_info_types", "form_field"),
    "labelize": ("html_formgen.forms.labels", "labelize"),
    "RendererConfig": ("html_formgen.protocols.form_config", "RendererConfig"),
    "SuffixPosition": ("html_formgen.protocols.form_config", "SuffixPosition"),
    "Validatable": ("html_formgen.protocols.record_protocols", "Validatable"),
    "Completable": ("html_formgen.protocols.record_protocols", "Completable"),
    "FormTokenService": ("html_formgen.services.form_token_service", "FormTokenService"),
    "FormGenError": ("html_formgen.exceptions", "FormGenError"),
    "AttributeTagError": ("html_formgen.exceptions", "AttributeTagError"),
    "RecordTypeError": ("html_formgen.exceptions", "RecordTypeError"),
    "FormTokenError": ("html_formgen.exceptions", "FormTokenError"),
    "FormDecodeError": ("html_formgen.exceptions", "FormDecodeError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__"] + list(_EXPORTS.keys())
