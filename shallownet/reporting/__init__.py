"""Reporting utilities for shallownet."""

from .artifacts import write_manifest
from .metrics import CsvSink, JsonlSink, MetricsCapture
from .plots import plot_history
from .summary import summarize_history, write_summary

__all__ = [
    "CsvSink",
    "JsonlSink",
    "MetricsCapture",
    "plot_history",
    "summarize_history",
    "write_manifest",
    "write_summary",
]
