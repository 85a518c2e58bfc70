"""ConverterRegistry: direct (source, target) media type conversions."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from contentstream.media import MediaType

logger = logging.getLogger(__name__)

Converter = Callable[[str], str]


class ConverterRegistry:
    """Maps ``(source_type, target_type)`` pairs to conversion functions.

    Lookups are exact and single-hop: registering A->B and B->C does not
    make A->C available. Re-registering a pair replaces the old converter.
    Both registration and lookup hold the registry lock, so a registry may
    be shared between threads.
    """

    def __init__(self) -> None:
        self._converters: dict[tuple[MediaType, MediaType], Converter] = {}
        self._lock = threading.RLock()

    def register(
        self, source_type: MediaType, target_type: MediaType, converter: Converter
    ) -> None:
        """Store *converter* for the exact pair, replacing any previous one."""
        if not callable(converter):
            raise TypeError(
                f"converter for {source_type} -> {target_type} must be callable, "
                f"got {type(converter).__name__}"
            )
        key = (source_type, target_type)
        with self._lock:
            replaced = key in self._converters
            if replaced:
                # dict keeps the original insertion slot on reassignment
                logger.warning("Replacing converter %s -> %s", source_type, target_type)
            self._converters[key] = converter
        logger.debug("Registered converter %s -> %s", source_type, target_type)

    def lookup(self, source_type: MediaType, target_type: MediaType) -> Converter | None:
        """Return the converter for the exact pair, or None if unregistered."""
        with self._lock:
            return self._converters.get((source_type, target_type))

    def pairs(self) -> list[tuple[MediaType, MediaType]]:
        """Registered pairs in insertion order."""
        with self._lock:
            return list(self._converters)

    def copy(self) -> ConverterRegistry:
        """Return an independent registry holding the same entries."""
        clone = ConverterRegistry()
        with self._lock:
            clone._converters = dict(self._converters)
        return clone

    # -- mapping-style access ------------------------------------------------

    def __getitem__(self, key: tuple[MediaType, MediaType]) -> Converter | None:
        source_type, target_type = key
        return self.lookup(source_type, target_type)

    def __setitem__(self, key: tuple[MediaType, MediaType], converter: Converter) -> None:
        source_type, target_type = key
        self.register(source_type, target_type, converter)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._converters

    def __len__(self) -> int:
        with self._lock:
            return len(self._converters)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{s}->{t}" for s, t in self.pairs())
        return f"ConverterRegistry([{pairs}])"
