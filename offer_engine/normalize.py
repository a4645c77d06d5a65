"""Offer record normalization.

This module owns the two projections every other component relies on:
- raw store records (full-time or internship shape, nested relations) -> typed `Offer`
- typed `Offer` -> `ComparableOffer`, the flat view used for filtering and ranking

Compensation is compared as a raw amount in its stored currency: full-time offers
resolve to total compensation, internships to monthly salary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from .errors import BadRequestError
from .models import (
    Background,
    Company,
    Experience,
    FullTimeOffer,
    FullTimePayload,
    InternOffer,
    InternPayload,
    Money,
    Offer,
    Profile,
)
from .utils import stable_id

_OFFER_ADAPTER: TypeAdapter = TypeAdapter(Offer)


@dataclass(frozen=True)
class ComparableOffer:
    compensation_value: Optional[float]
    level: Optional[str]
    specialization: Optional[str]
    title: Optional[str]


def comparable_view(offer: Offer) -> ComparableOffer:
    """Project an offer onto the fields shared by both job types."""
    if isinstance(offer, FullTimeOffer):
        payload = offer.full_time
        return ComparableOffer(
            compensation_value=_money_value(payload.total_compensation),
            level=payload.level,
            specialization=payload.specialization,
            title=payload.title,
        )
    if isinstance(offer, InternOffer):
        payload = offer.intern
        return ComparableOffer(
            compensation_value=_money_value(payload.monthly_salary),
            level=None,
            specialization=payload.specialization,
            title=payload.title,
        )
    raise TypeError(f"Unsupported offer type: {type(offer).__name__}")


def compensation_value(offer: Offer) -> Optional[float]:
    return comparable_view(offer).compensation_value


def total_yoe(offer: Offer) -> Optional[float]:
    """Years of experience on the offer's profile, or None when not recorded."""
    background = offer.profile.background
    if background is None:
        return None
    return background.total_yoe


def _money_value(money: Optional[Money]) -> Optional[float]:
    return None if money is None else money.value


# ---------------------------------------------------------------------------
# Raw record parsing
# ---------------------------------------------------------------------------


def parse_offer_record(raw: Dict[str, Any]) -> Offer:
    """Parse one stored offer record into the typed union.

    Two shapes are accepted:
    - the relational export shape, with `OffersFullTime` / `OffersIntern`
      sub-records and camelCase fields (`monthYearReceived`, `totalCompensation`, ...)
    - the engine's own snake_case shape (`job_type`, `full_time` / `intern`)

    Raises:
        BadRequestError: record has both payloads, neither, or invalid fields.
    """
    if not isinstance(raw, dict):
        raise BadRequestError(f"Offer record must be an object, got {type(raw).__name__}")

    try:
        if "OffersFullTime" in raw or "OffersIntern" in raw:
            return _parse_relational_record(raw)
        data = dict(raw)
        if not data.get("id"):
            data["id"] = _derive_offer_id(data)
        return _OFFER_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise BadRequestError(f"Malformed offer record: {exc}") from exc


def parse_offer_records(records: List[Dict[str, Any]]) -> List[Offer]:
    return [parse_offer_record(r) for r in records]


def _parse_relational_record(raw: Dict[str, Any]) -> Offer:
    full_time = raw.get("OffersFullTime")
    intern = raw.get("OffersIntern")

    if full_time and intern:
        raise BadRequestError("Offer record has both full-time and internship details")
    if not full_time and not intern:
        raise BadRequestError("Offer record has neither full-time nor internship details")

    job_type = "FULLTIME" if full_time else "INTERN"
    declared = raw.get("jobType")
    if declared and declared != job_type:
        raise BadRequestError(f"Offer record declares {declared} but carries {job_type} details")

    company = _parse_company(raw.get("company")) or Company(
        id=raw.get("companyId") or "", name=""
    )
    profile = _parse_profile(raw.get("profile"), raw.get("profileId"))

    common = {
        "location": raw.get("location"),
        "company": company,
        "profile": profile,
        "month_year_received": raw.get("monthYearReceived"),
        "negotiation_strategy": raw.get("negotiationStrategy") or "",
        "comments": raw.get("comments") or "",
    }
    common["id"] = raw.get("id") or stable_id(
        profile.id, company.id, str(common["location"]), str(raw.get("monthYearReceived"))
    )

    if full_time:
        return FullTimeOffer(
            **common,
            full_time=FullTimePayload(
                level=full_time.get("level"),
                specialization=full_time.get("specialization"),
                title=full_time.get("title"),
                base_salary=_parse_money(full_time.get("baseSalary")),
                bonus=_parse_money(full_time.get("bonus")),
                stocks=_parse_money(full_time.get("stocks")),
                total_compensation=_parse_money(full_time.get("totalCompensation")),
            ),
        )
    return InternOffer(
        **common,
        intern=InternPayload(
            specialization=intern.get("specialization"),
            title=intern.get("title"),
            monthly_salary=_parse_money(intern.get("monthlySalary")),
        ),
    )


def _derive_offer_id(data: Dict[str, Any]) -> str:
    company = data.get("company") or {}
    profile = data.get("profile") or {}
    return stable_id(
        str(profile.get("id")),
        str(company.get("id")),
        str(data.get("location")),
        str(data.get("month_year_received")),
    )


def _parse_money(raw: Optional[Dict[str, Any]]) -> Optional[Money]:
    if not raw or raw.get("value") is None:
        return None
    return Money(value=raw["value"], currency=raw.get("currency") or "USD")


def _parse_company(raw: Optional[Dict[str, Any]]) -> Optional[Company]:
    if not raw:
        return None
    return Company(id=raw.get("id") or "", name=raw.get("name") or "")


def _parse_profile(raw: Optional[Dict[str, Any]], profile_id: Optional[str]) -> Profile:
    raw = raw or {}
    background = raw.get("background")
    return Profile(
        id=raw.get("id") or profile_id or "",
        profile_name=raw.get("profileName") or raw.get("profile_name") or "",
        background=_parse_background(background) if background else None,
    )


def _parse_background(raw: Dict[str, Any]) -> Background:
    experiences = [
        Experience(
            id=exp.get("id") or "",
            company=_parse_company(exp.get("company")),
            title=exp.get("title"),
        )
        for exp in raw.get("experiences") or []
    ]
    total = raw.get("totalYoe", raw.get("total_yoe"))
    return Background(id=raw.get("id") or "", total_yoe=total, experiences=experiences)

