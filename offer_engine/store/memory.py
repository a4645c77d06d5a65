"""In-memory offer store.

Holds offers and analyses in dicts and evaluates `OfferQuery` objects in Python.
Used by the CLI (loaded from a snapshot source) and by the tests.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from ..errors import BadRequestError, NotFoundError
from ..logger import _log_debug
from ..models import AnalysisRecord, FullTimeOffer, InternOffer, Offer
from ..normalize import comparable_view, total_yoe
from ..sources.base import OfferSource
from ..utils import as_utc
from .base import OfferQuery, OfferStore, OrderBy, RoleClause


class InMemoryOfferStore(OfferStore):
    """Dict-backed store; insertion order is the tie-break for every ordering."""

    def __init__(self, offers: Optional[Iterable[Offer]] = None) -> None:
        self._offers: Dict[str, Offer] = {}
        self._analyses: Dict[str, AnalysisRecord] = {}
        if offers is not None:
            self.add_offers(offers)

    def __len__(self) -> int:
        return len(self._offers)

    def add_offer(self, offer: Offer) -> Offer:
        if offer.id in self._offers:
            raise BadRequestError(f"Duplicate offer id: {offer.id}")
        self._offers[offer.id] = offer
        return offer

    def add_offers(self, offers: Iterable[Offer]) -> int:
        count = 0
        for offer in offers:
            self.add_offer(offer)
            count += 1
        return count

    def load(self, source: OfferSource) -> int:
        """Fetch every offer from `source` and add it to the store."""
        count = self.add_offers(source.fetch())
        _log_debug(f"Loaded {count} offers from {source.name}")
        return count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_offers(self, query: OfferQuery) -> List[Offer]:
        matches = [o for o in self._offers.values() if _matches(o, query)]
        return _order(matches, query.order_by)

    def get_offers(self, offer_ids: Sequence[str]) -> List[Offer]:
        return [self._offers[i] for i in offer_ids if i in self._offers]

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------

    def delete_analyses(self, profile_id: str) -> int:
        doomed = [k for k, a in self._analyses.items() if a.profile_id == profile_id]
        for key in doomed:
            del self._analyses[key]
        return len(doomed)

    def create_analysis(self, record: AnalysisRecord) -> AnalysisRecord:
        connected = [record.overall_highest_offer_id]
        connected += record.top_overall_offer_ids + record.top_company_offer_ids
        missing = [i for i in connected if i not in self._offers]
        if missing:
            raise NotFoundError(f"Cannot connect analysis to unknown offers: {', '.join(missing)}")
        stored = record.model_copy(deep=True)
        self._analyses[stored.id] = stored
        return stored.model_copy(deep=True)

    def find_analysis(self, profile_id: str) -> Optional[AnalysisRecord]:
        for analysis in self._analyses.values():
            if analysis.profile_id == profile_id:
                return analysis.model_copy(deep=True)
        return None


def _matches(offer: Offer, query: OfferQuery) -> bool:
    if query.profile_id is not None and offer.profile.id != query.profile_id:
        return False
    if query.location is not None and offer.location != query.location:
        return False
    if query.job_type is not None and offer.job_type != query.job_type:
        return False
    if query.any_of and not any(_matches_role(offer, c) for c in query.any_of):
        return False
    if query.yoe_min is not None or query.yoe_max is not None:
        yoe = total_yoe(offer)
        if yoe is None:
            return False
        if query.yoe_min is not None and yoe < query.yoe_min:
            return False
        if query.yoe_max is not None and yoe > query.yoe_max:
            return False
    return True


def _matches_role(offer: Offer, clause: RoleClause) -> bool:
    if offer.job_type != clause.job_type:
        return False
    view = comparable_view(offer)
    if clause.level is not None and view.level != clause.level:
        return False
    if clause.specialization is not None and view.specialization != clause.specialization:
        return False
    return True


def _order_value(offer: Offer, field: str) -> Optional[float]:
    if field == "total_compensation":
        if isinstance(offer, FullTimeOffer) and offer.full_time.total_compensation:
            return offer.full_time.total_compensation.value
        return None
    if field == "monthly_salary":
        if isinstance(offer, InternOffer) and offer.intern.monthly_salary:
            return offer.intern.monthly_salary.value
        return None
    if field == "month_year_received":
        return as_utc(offer.month_year_received).timestamp()
    if field == "total_yoe":
        return total_yoe(offer)
    raise ValueError(f"Unknown order field: {field}")


def _order(offers: List[Offer], order_by: Sequence[OrderBy]) -> List[Offer]:
    # Stable sorts from the least significant key up give the multi-key order.
    for key in reversed(order_by):
        present = [o for o in offers if _order_value(o, key.field) is not None]
        absent = [o for o in offers if _order_value(o, key.field) is None]
        present.sort(key=lambda o: _order_value(o, key.field), reverse=key.descending)
        offers = present + absent
    return offers
