"""contentstream - render typed content parts into a single output media type."""

from contentstream.config import ContentStreamConfig, load_config
from contentstream.converters import (
    ConverterRegistry,
    create_registry,
    escape_html,
    get_default_registry,
    register_builtin_converters,
    register_converter,
)
from contentstream.errors import (
    ContentStreamError,
    ConversionNotFoundError,
    ConverterPluginError,
)
from contentstream.log import configure_logging, configure_logging_from_config
from contentstream.media import TEXT_HTML, TEXT_PLAIN, MediaType
from contentstream.output import OutputSink
from contentstream.parts import ContentPart

__version__ = "0.1.0"

__all__ = [
    "TEXT_HTML",
    "TEXT_PLAIN",
    "ContentPart",
    "ContentStreamConfig",
    "ContentStreamError",
    "ConversionNotFoundError",
    "ConverterPluginError",
    "ConverterRegistry",
    "MediaType",
    "OutputSink",
    "configure_logging",
    "configure_logging_from_config",
    "create_registry",
    "escape_html",
    "get_default_registry",
    "load_config",
    "register_builtin_converters",
    "register_converter",
]
