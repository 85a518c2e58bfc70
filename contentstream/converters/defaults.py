"""Built-in converters and the process-wide default registry."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable

from contentstream.converters.escaping import escape_html
from contentstream.converters.registry import Converter, ConverterRegistry
from contentstream.media import TEXT_HTML, TEXT_PLAIN, MediaType

logger = logging.getLogger(__name__)

_default_registry: ConverterRegistry | None = None
_default_lock = threading.Lock()


def register_builtin_converters(
    registry: ConverterRegistry, *, escape_quotes: bool = True
) -> ConverterRegistry:
    """Register text/plain -> text/html escaping on *registry* and return it."""
    registry.register(
        TEXT_PLAIN, TEXT_HTML, functools.partial(escape_html, quote=escape_quotes)
    )
    return registry


def get_default_registry() -> ConverterRegistry:
    """Return the shared registry, creating it with the built-ins on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = register_builtin_converters(ConverterRegistry())
                logger.info("Created default converter registry")
    return _default_registry


def register_converter(
    source_type: MediaType,
    target_type: MediaType,
    registry: ConverterRegistry | None = None,
) -> Callable[[Converter], Converter]:
    """Decorator form of ``registry.register``.

    The function is registered on *registry* (the default registry when
    omitted) and returned unchanged::

        @register_converter("text/plain", "text/x-shout")
        def shout(text):
            return text.upper()
    """

    def decorator(func: Converter) -> Converter:
        target = registry if registry is not None else get_default_registry()
        target.register(source_type, target_type, func)
        return func

    return decorator
