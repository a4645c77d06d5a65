"""Offer store interface and query objects.

The engine never talks to a database directly. It builds an `OfferQuery` and hands
it to an `OfferStore`, which returns fully materialized offers (company, profile,
background and experiences included) in the requested order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence

from ..models import AnalysisRecord, JobType, Offer

OrderField = Literal["total_compensation", "monthly_salary", "month_year_received", "total_yoe"]


@dataclass(frozen=True)
class RoleClause:
    """Role match for one job type.

    A field left as None is unconstrained, the same way an omitted field behaves in
    a query builder. `level` only applies to full-time offers.
    """

    job_type: JobType
    level: Optional[str] = None
    specialization: Optional[str] = None


@dataclass(frozen=True)
class OrderBy:
    field: OrderField
    descending: bool = True


@dataclass
class OfferQuery:
    """Conjunction of offer constraints; every None/empty field is skipped.

    `any_of` is an OR group: an offer passes when at least one clause matches.
    `yoe_min` / `yoe_max` are inclusive and exclude offers without a recorded YOE.
    `order_by` keys are applied left to right; offers lacking a key sort after the
    ones that have it.
    """

    profile_id: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    any_of: List[RoleClause] = field(default_factory=list)
    yoe_min: Optional[float] = None
    yoe_max: Optional[float] = None
    order_by: List[OrderBy] = field(default_factory=list)


COMPENSATION_DESC = [
    OrderBy("total_compensation", descending=True),
    OrderBy("monthly_salary", descending=True),
]


class OfferStore(ABC):
    """Abstract base class for offer and analysis persistence."""

    @abstractmethod
    def find_offers(self, query: OfferQuery) -> List[Offer]:
        """Return offers matching `query` in its requested order."""
        raise NotImplementedError

    @abstractmethod
    def get_offers(self, offer_ids: Sequence[str]) -> List[Offer]:
        """Return the offers with the given ids, in the order given."""
        raise NotImplementedError

    @abstractmethod
    def delete_analyses(self, profile_id: str) -> int:
        """Delete every analysis of a profile; returns how many were removed."""
        raise NotImplementedError

    @abstractmethod
    def create_analysis(self, record: AnalysisRecord) -> AnalysisRecord:
        """Persist an analysis, connecting it to its offers."""
        raise NotImplementedError

    @abstractmethod
    def find_analysis(self, profile_id: str) -> Optional[AnalysisRecord]:
        raise NotImplementedError
