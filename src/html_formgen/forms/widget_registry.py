"""
Widget emitter registry with metaclass auto-registration.

Emitters auto-register when their classes are defined, eliminating manual
registration boilerplate.

Design:
- WidgetMeta metaclass handles auto-registration
- WIDGET_IMPLEMENTATIONS: Global registry mapping widget kind -> emitter class
- Only concrete classes declaring _widget_kinds are registered
- Fail-loud lookup for unknown kinds
"""

from abc import ABCMeta
from typing import Dict, Type
import logging

from html_formgen.forms.widget_kinds import WidgetKind

logger = logging.getLogger(__name__)

# Global registry of emitter implementations
# Maps widget kind -> emitter class
WIDGET_IMPLEMENTATIONS: Dict[WidgetKind, Type] = {}


class WidgetMeta(ABCMeta):
    """
    Metaclass for automatic emitter registration.

    1. Only registers concrete implementations (no abstract methods)
    2. Requires a _widget_kinds tuple naming the kinds the emitter handles
    3. Auto-populates WIDGET_IMPLEMENTATIONS

    Example:
        class SeparatorWidget(WidgetEmitter):
            _widget_kinds = (WidgetKind.SEPARATOR,)

            def emit(self, field, attrs_html, state):
                return "\\t<div class='separator'></div>"

    The emitter auto-registers in WIDGET_IMPLEMENTATIONS[WidgetKind.SEPARATOR]
    when the class is defined.
    """

    def __new__(cls, name, bases, attrs):
        new_class = super().__new__(cls, name, bases, attrs)

        if getattr(new_class, '__abstractmethods__', None):
            abstract_methods = getattr(new_class, '__abstractmethods__', set())
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{abstract_methods}"
            )
            return new_class

        widget_kinds = attrs.get('_widget_kinds')
        if not widget_kinds:
            logger.debug(f"Skipping registration for {name} - no _widget_kinds attribute")
            return new_class

        for kind in widget_kinds:
            if kind in WIDGET_IMPLEMENTATIONS:
                existing = WIDGET_IMPLEMENTATIONS[kind]
                logger.warning(
                    f"Widget kind '{kind.value}' already registered to {existing.__name__}. "
                    f"Overwriting with {name}."
                )
            WIDGET_IMPLEMENTATIONS[kind] = new_class

        logger.debug(f"Auto-registered {name} for kinds: {[k.value for k in widget_kinds]}")
        return new_class


def get_widget_class(kind: WidgetKind) -> Type:
    """
    Get the emitter class for a widget kind.

    Args:
        kind: The widget kind

    Returns:
        The emitter class

    Raises:
        KeyError: If no emitter is registered for kind
    """
    if kind not in WIDGET_IMPLEMENTATIONS:
        raise KeyError(
            f"No widget emitter registered for kind '{kind}'. "
            f"Available kinds: {[k.value for k in WIDGET_IMPLEMENTATIONS]}"
        )
    return WIDGET_IMPLEMENTATIONS[kind]
