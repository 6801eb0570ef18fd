"""Output sinks for exporting generated listings."""

from realty.sinks.console import ConsoleSink
from realty.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
