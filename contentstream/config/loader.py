"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ContentStreamConfig

CONFIG_ENV_VAR = "CONTENTSTREAM_CONFIG"
_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    paths = []
    if cli_path:
        paths.append(Path(cli_path))
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path("./contentstream.yaml"))
    paths.append(Path.home() / ".contentstream" / "config.yaml")
    return paths


def load_config(cli_path: str | None = None) -> ContentStreamConfig:
    """Load config with resolution order:
    explicit path > $CONTENTSTREAM_CONFIG > project-local > user-global > defaults.

    Empty files are skipped so the next candidate gets a chance.
    """
    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping at top level")
        try:
            return ContentStreamConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return ContentStreamConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for bootstrapping a project-local contentstream.yaml
DEFAULT_CONFIG_TEMPLATE = """\
# contentstream.yaml

# Media type produced by OutputSink.from_config()
default_output_type: "text/html"

# Converter registry
converters:
  builtins: true               # register text/plain -> text/html escaping
  escape_quotes: true          # also escape " and ' in the built-in converter
  load_plugins: false          # scan the contentstream.converters entry points
  # disabled_plugins: []       # entry point names to skip

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
