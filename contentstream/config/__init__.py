from .loader import load_config
from .models import ContentStreamConfig, ConvertersConfig

__all__ = [
    "ContentStreamConfig",
    "ConvertersConfig",
    "load_config",
]
