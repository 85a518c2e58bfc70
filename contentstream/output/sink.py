"""OutputSink: converts parts to one media type and concatenates them."""

from __future__ import annotations

from collections.abc import Iterable

from contentstream.config.models import ContentStreamConfig
from contentstream.converters import (
    ConverterRegistry,
    create_registry,
    get_default_registry,
)
from contentstream.media import MediaType
from contentstream.parts import ContentPart


class OutputSink:
    """Renders parts into a single string of ``output_type``.

    Raw values are treated as text/plain and None arguments are skipped.
    Conversion errors propagate; no partial output is ever returned.
    """

    def __init__(
        self, output_type: MediaType, registry: ConverterRegistry | None = None
    ) -> None:
        self._output_type = output_type
        self._registry = registry if registry is not None else get_default_registry()

    @classmethod
    def from_config(cls, config: ContentStreamConfig) -> OutputSink:
        return cls(config.default_output_type, create_registry(config))

    @property
    def output_type(self) -> MediaType:
        return self._output_type

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry

    def output(self, *parts: object) -> str:
        """Return the concatenated contents of *parts* in this sink's media type."""
        return self.output_iter(parts)

    def output_iter(self, parts: Iterable[object]) -> str:
        """Same as :meth:`output` for an iterable of parts."""
        chunks: list[str] = []
        for value in parts:
            part = ContentPart.to_content_part(value)
            if part is None:
                continue
            chunks.append(part.convert(self._output_type, self._registry).content)
        return "".join(chunks)

    def __repr__(self) -> str:
        return f"OutputSink({self._output_type!r})"
