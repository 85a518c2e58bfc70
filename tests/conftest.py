"""Shared test fixtures for contentstream."""

import pytest

from contentstream.config.models import ContentStreamConfig
from contentstream.converters import defaults
from contentstream.converters.registry import ConverterRegistry
from contentstream.converters.defaults import register_builtin_converters
from contentstream.parts import ContentPart


@pytest.fixture
def empty_registry():
    return ConverterRegistry()


@pytest.fixture
def html_registry():
    """Fresh registry holding only the built-in converters."""
    return register_builtin_converters(ConverterRegistry())


@pytest.fixture(autouse=True)
def fresh_default_registry(monkeypatch):
    """Each test sees a newly created process-wide registry."""
    monkeypatch.setattr(defaults, "_default_registry", None)


@pytest.fixture
def plain_part():
    return ContentPart("text/plain", "<b>&")


@pytest.fixture
def html_part():
    return ContentPart("text/html", "<em>already safe</em>")


@pytest.fixture
def sample_config():
    return ContentStreamConfig()


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv("CONTENTSTREAM_CONFIG", raising=False)
