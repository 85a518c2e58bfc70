"""ContentPart: a string that knows its media type."""

from __future__ import annotations

import threading
from typing import Any

from pydantic import BaseModel

from contentstream.converters import ConverterRegistry, get_default_registry
from contentstream.errors import ConversionNotFoundError
from contentstream.media import TEXT_PLAIN, MediaType

# Guards the (type, content) pair of every part during in-place conversion
_swap_lock = threading.Lock()


class ContentPart(BaseModel):
    """A piece of content tagged with its media type.

    Parts are converted to other media types through a
    :class:`ConverterRegistry`. ``convert`` derives a new part and leaves the
    receiver alone, so one part can feed several sinks; ``convert_in_place``
    rewrites the receiver.
    """

    type: MediaType
    content: str

    def __init__(self, type: MediaType, content: str, **data: Any) -> None:
        super().__init__(type=type, content=content, **data)

    @classmethod
    def to_content_part(cls, value: object) -> ContentPart | None:
        """Normalize *value* into a part.

        None passes through, an existing part is returned as-is (not copied),
        and anything else becomes a text/plain part holding ``str(value)``.
        """
        if value is None:
            return None
        if isinstance(value, ContentPart):
            return value
        return cls(TEXT_PLAIN, str(value))

    def snapshot(self) -> tuple[MediaType, str]:
        """Return ``(type, content)`` as one consistent pair.

        Safe to call while another thread runs :meth:`convert_in_place`.
        """
        with _swap_lock:
            return self.type, self.content

    def _converted(
        self, target_type: MediaType, registry: ConverterRegistry | None
    ) -> str:
        source_type, content = self.snapshot()
        if target_type == source_type:
            return content
        if registry is None:
            registry = get_default_registry()
        converter = registry.lookup(source_type, target_type)
        if converter is None:
            raise ConversionNotFoundError(source_type, target_type)
        return converter(content)

    def convert(
        self, target_type: MediaType, registry: ConverterRegistry | None = None
    ) -> ContentPart:
        """Return a new part holding this content converted to *target_type*."""
        content = self._converted(target_type, registry)
        return self.model_copy(update={"type": target_type, "content": content})

    def convert_in_place(
        self, target_type: MediaType, registry: ConverterRegistry | None = None
    ) -> None:
        """Convert this part to *target_type*, overwriting type and content.

        Both fields are published in a single update, and the receiver is
        left untouched if the lookup or the converter fails.
        """
        content = self._converted(target_type, registry)
        with _swap_lock:
            self.__dict__.update(type=target_type, content=content)
