"""Output subsystem: assembles parts into a single typed string."""

from contentstream.output.sink import OutputSink

__all__ = ["OutputSink"]
