"""Base classes for offer snapshot sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from ..errors import BadRequestError
from ..models import Offer
from ..normalize import parse_offer_records


class OfferSource(ABC):
    """Abstract base class for a source of stored offer records."""

    name: str

    @abstractmethod
    def fetch(self) -> List[Offer]:
        """Fetch records and return them as typed offers."""
        raise NotImplementedError


def offers_from_payload(payload: Any) -> List[Offer]:
    """Accept a bare JSON array or an object wrapping it under "data" / "offers"."""
    if isinstance(payload, dict):
        payload = payload.get("data") or payload.get("offers") or []
    if not isinstance(payload, list):
        raise BadRequestError("Offer snapshot must be a JSON array of records")
    return parse_offer_records(payload)
