"""Offer snapshot served over HTTP.

The endpoint returns either a JSON array of offer records or an object wrapping
the array under "data". HTTP errors propagate to the caller; there is no retry.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..logger import _log_info
from ..models import Offer
from .base import OfferSource, offers_from_payload


class HttpSnapshotSource(OfferSource):
    """Fetch an offer snapshot from a URL and normalize it."""

    name = "http"

    def __init__(
        self,
        url: str,
        timeout_s: float = 20.0,
        params: Optional[Dict[str, Any]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_s
        self._params = params or {}
        self._transport = transport

    def fetch(self) -> List[Offer]:
        with httpx.Client(
            timeout=self._timeout, follow_redirects=True, transport=self._transport
        ) as client:
            resp = client.get(self._url, params=self._params)
            resp.raise_for_status()
            payload = resp.json()

        offers = offers_from_payload(payload)
        _log_info(f"Fetched {len(offers)} offers from {self._url}")
        return offers
