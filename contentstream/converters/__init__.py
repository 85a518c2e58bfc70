"""Converter registry, built-in converters and plugin discovery."""

from contentstream.config.models import ContentStreamConfig
from contentstream.converters.defaults import (
    get_default_registry,
    register_builtin_converters,
    register_converter,
)
from contentstream.converters.escaping import escape_html
from contentstream.converters.plugins import (
    ENTRY_POINT_GROUP,
    ConverterPlugin,
    load_converter_plugins,
)
from contentstream.converters.registry import Converter, ConverterRegistry


def create_registry(config: ContentStreamConfig) -> ConverterRegistry:
    """Build a fresh registry from app-level config.

    Built-ins are registered first so that plugins may replace them.
    """
    registry = ConverterRegistry()
    if config.converters.builtins:
        register_builtin_converters(
            registry, escape_quotes=config.converters.escape_quotes
        )
    if config.converters.load_plugins:
        load_converter_plugins(registry, disabled=config.converters.disabled_plugins)
    return registry


__all__ = [
    "ENTRY_POINT_GROUP",
    "Converter",
    "ConverterPlugin",
    "ConverterRegistry",
    "create_registry",
    "escape_html",
    "get_default_registry",
    "load_converter_plugins",
    "register_builtin_converters",
    "register_converter",
]
