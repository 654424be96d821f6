"""Offline shadow comparison against recorded totals"""

from .runner import ShadowResult, ShadowRunner, ShadowSummary, load_recordings, summarize

__all__ = [
    "ShadowResult",
    "ShadowRunner",
    "ShadowSummary",
    "load_recordings",
    "summarize",
]
