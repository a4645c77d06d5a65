"""Data models for the offer engine.

Offers come in two shapes (full-time and internship). Rather than probing optional
sub-records, the engine works on a discriminated union keyed by `job_type`, with
every relation (company, profile, background) fully materialized.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


JobType = Literal["FULLTIME", "INTERN"]


class Money(BaseModel):
    """A monetary amount in its stored currency (no conversion is ever applied)."""

    value: float
    currency: str = "USD"


class Company(BaseModel):
    """Employer an offer (or a past experience) belongs to."""

    id: str
    name: str


class Experience(BaseModel):
    """One past position listed in a profile background."""

    id: str
    company: Optional[Company] = None
    title: Optional[str] = None


class Background(BaseModel):
    """Work history of a profile: total YOE plus past experiences."""

    id: str
    total_yoe: Optional[float] = Field(
        default=None,
        ge=0,
        description="Total years of experience; offers without it cannot be analysed.",
    )
    experiences: List[Experience] = Field(default_factory=list)


class Profile(BaseModel):
    """Anonymous profile that owns one or more offers."""

    id: str
    profile_name: str = ""
    background: Optional[Background] = None


class FullTimePayload(BaseModel):
    """Role and compensation breakdown of a full-time offer."""

    level: Optional[str] = None
    specialization: Optional[str] = None
    title: Optional[str] = None
    base_salary: Optional[Money] = None
    bonus: Optional[Money] = None
    stocks: Optional[Money] = None
    total_compensation: Optional[Money] = None


class InternPayload(BaseModel):
    """Role and monthly salary of an internship offer."""

    specialization: Optional[str] = None
    title: Optional[str] = None
    monthly_salary: Optional[Money] = None


class _OfferBase(BaseModel):
    """Fields shared by both offer shapes."""

    id: str
    location: str
    company: Company
    profile: Profile
    month_year_received: datetime
    negotiation_strategy: str = ""
    comments: str = ""


class FullTimeOffer(_OfferBase):
    """Full-time offer; compared on total compensation."""

    job_type: Literal["FULLTIME"] = "FULLTIME"
    full_time: FullTimePayload


class InternOffer(_OfferBase):
    """Internship offer; compared on monthly salary."""

    job_type: Literal["INTERN"] = "INTERN"
    intern: InternPayload


Offer = Annotated[Union[FullTimeOffer, InternOffer], Field(discriminator="job_type")]


class AnalysisRecord(BaseModel):
    """Persisted analysis snapshot; one per profile, replaced on every generate."""

    id: str
    profile_id: str
    overall_highest_offer_id: str

    overall_percentile: float
    no_of_similar_offers: int
    top_overall_offer_ids: List[str] = Field(default_factory=list)

    company_percentile: float
    no_of_similar_company_offers: int
    top_company_offer_ids: List[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
