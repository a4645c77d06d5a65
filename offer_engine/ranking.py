"""Percentile ranking within a cohort.

Percentile convention: cohorts are ordered by compensation, highest first, and the
percentile of an offer is its zero-based rank divided by the cohort size. The
highest-paid offer therefore has percentile 0, and larger values mean more offers
pay better. This is a rank fraction from the top, not "percent of offers below".
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .models import Offer

TOP_PERCENTILE = 0.9
TOP_SLICE_SIZE = 2


def rank(reference: Offer, cohort: Sequence[Offer]) -> int:
    """Zero-based position of `reference` (by id) in `cohort`, or -1 when absent."""
    for i, offer in enumerate(cohort):
        if offer.id == reference.id:
            return i
    return -1


def percentile(reference: Offer, cohort: Sequence[Offer]) -> float:
    """`rank / len(cohort)`; 0 for an empty cohort."""
    if not cohort:
        return 0
    return rank(reference, cohort) / len(cohort)


def exclude(reference: Offer, cohort: Sequence[Offer]) -> List[Offer]:
    return [o for o in cohort if o.id != reference.id]


def top_slice(cohort: Sequence[Offer]) -> List[Offer]:
    """The offers around the 90th-percentile position of `cohort`.

    With more than one offer, returns up to two offers starting at
    `floor(len * 0.9) - 1`; otherwise the whole cohort.
    """
    size = len(cohort)
    if size <= 1:
        return list(cohort)
    start = max(math.floor(size * TOP_PERCENTILE) - 1, 0)
    return list(cohort[start : start + TOP_SLICE_SIZE])
