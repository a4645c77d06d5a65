"""Request and response schemas.

Field names are snake_case in Python and camelCase on the wire
(`model_dump(by_alias=True)`); inputs accept either spelling.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .models import Company, FullTimeOffer, InternOffer, Offer, Profile
from .normalize import comparable_view, total_yoe
from .sorting import SORT_BY_PATTERN, SortDirective


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class AnalysisInput(CamelModel):
    profile_id: str


class OfferListQuery(CamelModel):
    """Filters, sort directive and page window for the offer list."""

    company_id: Optional[str] = None
    date_end: Optional[datetime] = None
    date_start: Optional[datetime] = None
    limit: int = Field(gt=0)
    location: str
    offset: int = Field(ge=0)
    salary_max: Optional[float] = None
    salary_min: Optional[float] = Field(default=None, ge=0)
    sort_by: Optional[str] = Field(default=None, pattern=SORT_BY_PATTERN)
    title: Optional[str] = None
    yoe_category: int = Field(ge=0, le=3)
    yoe_max: Optional[float] = Field(default=None, le=100)
    yoe_min: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "OfferListQuery":
        if (self.date_start is None) != (self.date_end is None):
            raise ValueError("dateStart and dateEnd must be given together")
        if (self.salary_min is None) != (self.salary_max is None):
            raise ValueError("salaryMin and salaryMax must be given together")
        return self

    @property
    def sort_directive(self) -> SortDirective:
        return SortDirective.parse(self.sort_by)


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class CompanyDto(CamelModel):
    id: str
    name: str

    @classmethod
    def from_company(cls, company: Company) -> "CompanyDto":
        return cls(id=company.id, name=company.name)


class ExperienceDto(CamelModel):
    company: Optional[CompanyDto] = None
    id: str


class BackgroundDto(CamelModel):
    experiences: List[ExperienceDto] = Field(default_factory=list)
    id: Optional[str] = None
    total_yoe: Optional[float] = None


class ProfileDto(CamelModel):
    background: BackgroundDto
    id: str
    name: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileDto":
        background = profile.background
        if background is None:
            return cls(background=BackgroundDto(), id=profile.id, name=profile.profile_name)
        return cls(
            background=BackgroundDto(
                experiences=[
                    ExperienceDto(
                        company=CompanyDto.from_company(e.company) if e.company else None,
                        id=e.id,
                    )
                    for e in background.experiences
                ],
                id=background.id,
                total_yoe=background.total_yoe,
            ),
            id=profile.id,
            name=profile.profile_name,
        )


class OfferSummary(CamelModel):
    """One offer as shown in the top-percentile slices of an analysis."""

    company: CompanyDto
    id: str
    job_type: str
    level: Optional[str] = None
    location: str
    month_year_received: datetime
    monthly_salary: Optional[float] = None
    negotiation_strategy: str = ""
    profile: ProfileDto
    specialization: Optional[str] = None
    title: Optional[str] = None
    total_compensation: Optional[float] = None

    @classmethod
    def from_offer(cls, offer: Offer) -> "OfferSummary":
        view = comparable_view(offer)
        return cls(
            company=CompanyDto.from_company(offer.company),
            id=offer.id,
            job_type=offer.job_type,
            level=view.level,
            location=offer.location,
            month_year_received=offer.month_year_received,
            monthly_salary=view.compensation_value if isinstance(offer, InternOffer) else None,
            negotiation_strategy=offer.negotiation_strategy,
            profile=ProfileDto.from_profile(offer.profile),
            specialization=view.specialization,
            title=view.title,
            total_compensation=view.compensation_value if isinstance(offer, FullTimeOffer) else None,
        )


class MoneyDto(CamelModel):
    currency: str
    value: float


class FullTimeDto(CamelModel):
    base_salary: Optional[MoneyDto] = None
    bonus: Optional[MoneyDto] = None
    level: Optional[str] = None
    specialization: Optional[str] = None
    stocks: Optional[MoneyDto] = None
    title: Optional[str] = None
    total_compensation: Optional[MoneyDto] = None


class InternDto(CamelModel):
    monthly_salary: Optional[MoneyDto] = None
    specialization: Optional[str] = None
    title: Optional[str] = None


class OfferListItem(CamelModel):
    """One offer in a list page, with every salary component in its stored currency."""

    comments: str = ""
    company: CompanyDto
    full_time: Optional[FullTimeDto] = None
    id: str
    intern: Optional[InternDto] = None
    job_type: str
    location: str
    month_year_received: datetime
    negotiation_strategy: str = ""
    profile: ProfileDto

    @classmethod
    def from_offer(cls, offer: Offer) -> "OfferListItem":
        return cls(
            comments=offer.comments,
            company=CompanyDto.from_company(offer.company),
            full_time=FullTimeDto.model_validate(offer.full_time.model_dump())
            if isinstance(offer, FullTimeOffer)
            else None,
            id=offer.id,
            intern=InternDto.model_validate(offer.intern.model_dump())
            if isinstance(offer, InternOffer)
            else None,
            job_type=offer.job_type,
            location=offer.location,
            month_year_received=offer.month_year_received,
            negotiation_strategy=offer.negotiation_strategy,
            profile=ProfileDto.from_profile(offer.profile),
        )


class HighestOffer(CamelModel):
    company: CompanyDto
    id: str
    level: Optional[str] = None
    location: str
    specialization: Optional[str] = None
    total_yoe: Optional[float] = None

    @classmethod
    def from_offer(cls, offer: Offer) -> "HighestOffer":
        view = comparable_view(offer)
        return cls(
            company=CompanyDto.from_company(offer.company),
            id=offer.id,
            level=view.level,
            location=offer.location,
            specialization=view.specialization,
            total_yoe=total_yoe(offer),
        )


class SpecificAnalysis(CamelModel):
    no_of_offers: int
    percentile: float
    top_percentile_offers: List[OfferSummary] = Field(default_factory=list)


class ProfileAnalysis(CamelModel):
    id: str
    profile_id: str
    overall_highest_offer: HighestOffer
    overall_analysis: SpecificAnalysis
    company_analysis: SpecificAnalysis


class Paging(CamelModel):
    curr_page: int
    num_of_items_in_page: int
    num_of_pages: int
    total_number_of_offers: int


class OfferListPage(CamelModel):
    data: List[OfferListItem] = Field(default_factory=list)
    paging: Paging
