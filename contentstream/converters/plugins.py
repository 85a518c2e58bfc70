"""Converter discovery via entry points."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from contentstream.converters.registry import ConverterRegistry
from contentstream.errors import ConverterPluginError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "contentstream.converters"


@runtime_checkable
class ConverterPlugin(Protocol):
    """A converter shipped by a third-party distribution.

    Expose it under the ``contentstream.converters`` entry point group, e.g.::

        [project.entry-points."contentstream.converters"]
        js = "mypkg.converters:PlainTextToJavaScript"
    """

    source_type: str
    target_type: str

    def convert(self, content: str) -> str: ...


def discover() -> list[str]:
    """Names of the converter entry points currently installed."""
    eps = importlib.metadata.entry_points(group=ENTRY_POINT_GROUP)
    return [ep.name for ep in eps]


def _load(ep: importlib.metadata.EntryPoint) -> ConverterPlugin:
    try:
        obj = ep.load()
    except (ImportError, AttributeError) as exc:
        raise ConverterPluginError(ep.name, f"cannot be imported ({exc})") from exc

    # Classes are instantiated with no arguments
    if isinstance(obj, type):
        try:
            plugin = obj()
        except TypeError as exc:
            raise ConverterPluginError(
                ep.name, f"cannot be instantiated without arguments ({exc})"
            ) from exc
    else:
        plugin = obj
    if not isinstance(plugin, ConverterPlugin):
        raise ConverterPluginError(
            ep.name, "expected source_type, target_type and convert()"
        )
    if not callable(plugin.convert):
        raise ConverterPluginError(ep.name, "convert is not callable")
    return plugin


def load_converter_plugins(
    registry: ConverterRegistry, disabled: Iterable[str] = ()
) -> list[str]:
    """Register every installed converter plugin not named in *disabled*.

    Returns the names of the plugins that were registered, in discovery order.
    """
    skip = set(disabled)
    loaded: list[str] = []
    for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
        if ep.name in skip:
            logger.warning("Skipping disabled converter plugin %s", ep.name)
            continue
        plugin = _load(ep)
        registry.register(plugin.source_type, plugin.target_type, plugin.convert)
        logger.debug(
            "Loaded converter plugin %s (%s -> %s)",
            ep.name, plugin.source_type, plugin.target_type,
        )
        loaded.append(ep.name)
    return loaded
