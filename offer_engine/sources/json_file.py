"""Offer snapshot stored as a JSON file on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from ..models import Offer
from .base import OfferSource, offers_from_payload


class JsonFileSource(OfferSource):
    """Read offer records from a local JSON file."""

    name = "json-file"

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path).expanduser()

    def fetch(self) -> List[Offer]:
        payload = json.loads(self._path.read_text(encoding="utf-8"))
        return offers_from_payload(payload)
