"""Offer list: fetch by location and experience band, filter, sort, paginate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import NotFoundError
from .logger import _log_debug
from .models import Offer
from .normalize import comparable_view, compensation_value
from .schemas import OfferListItem, OfferListPage, OfferListQuery, Paging
from .store import OfferQuery, OfferStore
from .utils import as_utc

INTERNSHIP = 0


@dataclass(frozen=True)
class YoeRange:
    min_yoe: Optional[float]
    max_yoe: Optional[float]


# Category 0 (Internship) has no range: the fetch is restricted to internships.
YOE_CATEGORY_RANGES: Dict[int, YoeRange] = {
    1: YoeRange(0, 3),  # Fresh Grad
    2: YoeRange(4, 7),  # Mid
    3: YoeRange(8, 100),  # Senior
}


def resolve_yoe_range(
    yoe_category: int, yoe_min: Optional[float] = None, yoe_max: Optional[float] = None
) -> Optional[YoeRange]:
    """Category range with each bound independently overridden; None for internships."""
    category_range = YOE_CATEGORY_RANGES.get(yoe_category)
    if category_range is None:
        return None
    return YoeRange(
        min_yoe=category_range.min_yoe if yoe_min is None else yoe_min,
        max_yoe=category_range.max_yoe if yoe_max is None else yoe_max,
    )


def build_list_query(query: OfferListQuery) -> OfferQuery:
    yoe_range = resolve_yoe_range(query.yoe_category, query.yoe_min, query.yoe_max)
    if yoe_range is None:
        return OfferQuery(location=query.location, job_type="INTERN")
    return OfferQuery(
        location=query.location,
        job_type="FULLTIME",
        yoe_min=yoe_range.min_yoe,
        yoe_max=yoe_range.max_yoe,
    )


def filter_offers(offers: List[Offer], query: OfferListQuery) -> List[Offer]:
    """Apply the optional company, title, date and salary filters conjunctively.

    With a salary range, every fetched offer must resolve a compensation, even one
    the other filters drop.

    Raises:
        NotFoundError: a salary range is given and an offer has no compensation.
    """
    salary_range = query.salary_min is not None and query.salary_max is not None
    out: List[Offer] = []
    for offer in offers:
        if salary_range:
            salary = compensation_value(offer)
            if salary is None:
                raise NotFoundError("Total Compensation or Salary not found")
            if not query.salary_min <= salary <= query.salary_max:
                continue

        if query.company_id and offer.company.id != query.company_id:
            continue

        if query.title and comparable_view(offer).title != query.title:
            continue

        if query.date_start is not None and query.date_end is not None:
            received = as_utc(offer.month_year_received)
            if not as_utc(query.date_start) <= received <= as_utc(query.date_end):
                continue

        out.append(offer)
    return out


def paginate(offers: List[Offer], limit: int, offset: int) -> OfferListPage:
    start = limit * offset
    end = min(start + limit, len(offers))
    page = offers[start:end]
    return OfferListPage(
        data=[OfferListItem.from_offer(o) for o in page],
        paging=Paging(
            curr_page=offset,
            num_of_items_in_page=len(page),
            num_of_pages=math.ceil(len(offers) / limit),
            total_number_of_offers=len(offers),
        ),
    )


def list_offers(store: OfferStore, query: OfferListQuery) -> OfferListPage:
    """Run the full list pipeline for one request."""
    directive = query.sort_directive
    offers = store.find_offers(build_list_query(query))
    offers = filter_offers(offers, query)
    offers = directive.sort(offers)
    result = paginate(offers, query.limit, query.offset)
    _log_debug(
        f"Listed {result.paging.num_of_items_in_page}/{result.paging.total_number_of_offers} "
        f"offers in {query.location} (page {query.offset}, sort {directive})"
    )
    return result
