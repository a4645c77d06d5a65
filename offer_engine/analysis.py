"""Profile offer analysis.

`OfferAnalyzer.generate` takes a profile's highest offer, finds its cohort of
similar offers (overall and at the same company), ranks the offer within both and
records the offers around the 90th-percentile position. The result is stored as
the profile's single analysis, replacing any previous one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from .cohort import require_yoe, select_cohort
from .errors import NotFoundError
from .logger import _log_info, _log_success
from .models import AnalysisRecord, Offer
from .ranking import exclude, percentile, top_slice
from .schemas import HighestOffer, OfferSummary, ProfileAnalysis, SpecificAnalysis
from .store import COMPENSATION_DESC, OfferQuery, OfferStore
from .utils import stable_id


class OfferAnalyzer:
    """Generate and read per-profile offer analyses against an `OfferStore`."""

    def __init__(self, store: OfferStore) -> None:
        self._store = store

    def generate(self, profile_id: str) -> ProfileAnalysis:
        """Rebuild the analysis of a profile.

        The previous analysis is deleted before anything else, so a failure later
        on leaves the profile without one until the next successful call.

        Raises:
            NotFoundError: the profile has no offers.
            MissingPrerequisiteError: the highest offer's profile has no YOE.
        """
        removed = self._store.delete_analyses(profile_id)
        if removed:
            _log_info(f"Removed {removed} previous analysis for profile {profile_id}")

        offers = self._store.find_offers(
            OfferQuery(profile_id=profile_id, order_by=list(COMPENSATION_DESC))
        )
        if not offers:
            raise NotFoundError("No offers found on this profile")

        highest = offers[0]
        require_yoe(highest)

        cohort = select_cohort(self._store, highest)

        # Rank while the reference is still part of its cohorts.
        overall_percentile = percentile(highest, cohort.offers)
        company_percentile = percentile(highest, cohort.company_offers)

        similar = exclude(highest, cohort.offers)
        similar_company = exclude(highest, cohort.company_offers)
        top_overall = top_slice(similar)
        top_company = top_slice(similar_company)

        created_at = datetime.now(timezone.utc)
        record = self._store.create_analysis(
            AnalysisRecord(
                id=stable_id("analysis", profile_id, created_at.isoformat()),
                profile_id=profile_id,
                overall_highest_offer_id=highest.id,
                overall_percentile=overall_percentile,
                no_of_similar_offers=len(similar),
                top_overall_offer_ids=[o.id for o in top_overall],
                company_percentile=company_percentile,
                no_of_similar_company_offers=len(similar_company),
                top_company_offer_ids=[o.id for o in top_company],
                created_at=created_at,
            )
        )
        _log_success(
            f"Analysis {record.id[:12]} for profile {profile_id}: "
            f"overall {overall_percentile:.2f} of {len(similar)}, "
            f"company {company_percentile:.2f} of {len(similar_company)}"
        )
        return _to_profile_analysis(record, highest, top_overall, top_company)

    def get(self, profile_id: str) -> ProfileAnalysis:
        """Return the stored analysis of a profile.

        Raises:
            NotFoundError: no analysis has been generated for the profile.
        """
        record = self._store.find_analysis(profile_id)
        if record is None:
            raise NotFoundError("No analysis found on this profile")

        highest = self._store.get_offers([record.overall_highest_offer_id])
        if not highest:
            raise NotFoundError("Highest offer of this analysis no longer exists")

        return _to_profile_analysis(
            record,
            highest[0],
            self._store.get_offers(record.top_overall_offer_ids),
            self._store.get_offers(record.top_company_offer_ids),
        )


def _to_profile_analysis(
    record: AnalysisRecord,
    highest: Offer,
    top_overall: List[Offer],
    top_company: List[Offer],
) -> ProfileAnalysis:
    return ProfileAnalysis(
        id=record.id,
        profile_id=record.profile_id,
        overall_highest_offer=HighestOffer.from_offer(highest),
        overall_analysis=SpecificAnalysis(
            no_of_offers=record.no_of_similar_offers,
            percentile=record.overall_percentile,
            top_percentile_offers=[OfferSummary.from_offer(o) for o in top_overall],
        ),
        company_analysis=SpecificAnalysis(
            no_of_offers=record.no_of_similar_company_offers,
            percentile=record.company_percentile,
            top_percentile_offers=[OfferSummary.from_offer(o) for o in top_company],
        ),
    )
