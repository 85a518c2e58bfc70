"""Invariant checks across the public types."""

from __future__ import annotations

import threading

import pytest

import contentstream
from contentstream import ContentPart, ConverterRegistry, OutputSink
from contentstream.errors import ConversionNotFoundError


class TestPublicSurface:
    def test_exports(self):
        for name in contentstream.__all__:
            assert hasattr(contentstream, name), name

    def test_version(self):
        assert contentstream.__version__ == "0.1.0"


class TestPartInvariants:
    def test_type_and_content_move_together(self, html_registry):
        part = ContentPart("text/plain", "<>")
        snapshots = [(part.type, part.content)]
        part.convert_in_place("text/html", html_registry)
        snapshots.append((part.type, part.content))
        assert snapshots == [("text/plain", "<>"), ("text/html", "&lt;&gt;")]

    def test_parts_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(ContentPart("text/plain", "x"))


class TestIsolation:
    def test_fresh_registries_do_not_share_state(self):
        a = ConverterRegistry()
        b = ConverterRegistry()
        a.register("x", "y", str.upper)
        assert b.lookup("x", "y") is None

    def test_registration_on_one_sink_registry_only(self):
        a = ConverterRegistry()
        b = ConverterRegistry()
        a.register("x", "y", str.upper)
        assert OutputSink("y", a).output(ContentPart("x", "q")) == "Q"
        with pytest.raises(ConversionNotFoundError):
            OutputSink("y", b).output(ContentPart("x", "q"))


class TestConcurrentInPlaceConversion:
    def test_reader_never_sees_half_converted_part(self):
        registry = ConverterRegistry()
        registry.register("a", "b", lambda s: "B")
        registry.register("b", "a", lambda s: "A")
        part = ContentPart("a", "A")
        consistent = {("a", "A"), ("b", "B")}

        done = threading.Event()
        torn: list[tuple[str, str]] = []

        def reader() -> None:
            while not done.is_set():
                seen = part.snapshot()
                if seen not in consistent:
                    torn.append(seen)

        t = threading.Thread(target=reader)
        t.start()
        try:
            for i in range(20000):
                part.convert_in_place("b" if i % 2 == 0 else "a", registry)
        finally:
            done.set()
            t.join()

        assert torn == []
        assert part.snapshot() == ("a", "A")

    def test_snapshot_matches_fields(self, html_registry):
        part = ContentPart("text/plain", "<")
        part.convert_in_place("text/html", html_registry)
        assert part.snapshot() == (part.type, part.content) == ("text/html", "&lt;")

    def test_in_place_result_still_validates_as_model(self, html_registry):
        part = ContentPart("text/plain", "&")
        part.convert_in_place("text/html", html_registry)
        assert part.model_dump() == {"type": "text/html", "content": "&amp;"}
        assert part == ContentPart("text/html", "&amp;")
