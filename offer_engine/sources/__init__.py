"""Offer snapshot sources feeding the in-memory store."""

from .base import OfferSource, offers_from_payload
from .http import HttpSnapshotSource
from .json_file import JsonFileSource

__all__ = ["HttpSnapshotSource", "JsonFileSource", "OfferSource", "offers_from_payload", "source_for"]


def source_for(location: str, timeout_s: float = 20.0) -> OfferSource:
    """Pick a source from a snapshot location: http(s) URLs vs. file paths."""
    if location.startswith(("http://", "https://")):
        return HttpSnapshotSource(location, timeout_s=timeout_s)
    return JsonFileSource(location)
