"""Similar-offer cohort selection.

A cohort is every offer comparable to a reference offer:
- same location
- same role: full-time offers with the reference's level and specialization, OR
  internships with the reference's specialization
- profile YOE within one year of the reference's, inclusive, floored at zero

The role match is a single OR group, so a full-time reference also pulls in
internships of the same specialization (and an internship reference, whose level
is unset, pulls in full-time offers of any level). The cohort is ordered by
compensation, highest first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import MissingPrerequisiteError
from .logger import _log_debug
from .models import Offer
from .normalize import comparable_view, total_yoe
from .store import COMPENSATION_DESC, OfferQuery, OfferStore, RoleClause

YOE_WINDOW = 1


@dataclass
class Cohort:
    offers: List[Offer] = field(default_factory=list)
    company_offers: List[Offer] = field(default_factory=list)


def require_yoe(reference: Offer) -> float:
    yoe = total_yoe(reference)
    if yoe is None:
        raise MissingPrerequisiteError("Cannot analyse without YOE")
    return yoe


def build_cohort_query(reference: Offer) -> OfferQuery:
    """Build the store query selecting offers similar to `reference`.

    Raises:
        MissingPrerequisiteError: the reference's profile has no YOE.
    """
    yoe = require_yoe(reference)
    view = comparable_view(reference)
    return OfferQuery(
        location=reference.location,
        any_of=[
            RoleClause("FULLTIME", level=view.level, specialization=view.specialization),
            RoleClause("INTERN", specialization=view.specialization),
        ],
        yoe_min=max(yoe - YOE_WINDOW, 0),
        yoe_max=yoe + YOE_WINDOW,
        order_by=list(COMPENSATION_DESC),
    )


def company_subset(reference: Offer, offers: List[Offer]) -> List[Offer]:
    return [o for o in offers if o.company.id == reference.company.id]


def select_cohort(store: OfferStore, reference: Offer) -> Cohort:
    """Fetch the overall cohort and derive the same-company cohort from it."""
    offers = store.find_offers(build_cohort_query(reference))
    cohort = Cohort(offers=offers, company_offers=company_subset(reference, offers))
    _log_debug(
        f"Cohort for offer {reference.id}: {len(cohort.offers)} similar, "
        f"{len(cohort.company_offers)} at {reference.company.name or reference.company.id}"
    )
    return cohort
