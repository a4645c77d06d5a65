"""Sort directives for the offer list.

A directive is a string `<+|-><key>` (e.g. "-totalCompensation"). It is parsed once
into a `SortDirective` and then applied as a key function; nothing is re-parsed per
comparison.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .errors import BadRequestError, NotFoundError
from .models import Offer
from .normalize import compensation_value, total_yoe
from .utils import as_utc


class SortField(str, Enum):
    MONTH_YEAR_RECEIVED = "monthYearReceived"
    TOTAL_COMPENSATION = "totalCompensation"
    TOTAL_YOE = "totalYoe"


class SortDirection(str, Enum):
    ASC = "+"
    DESC = "-"


SORT_BY_PATTERN = r"^[+-](" + "|".join(f.value for f in SortField) + r")"
_SORT_BY_RE = re.compile(SORT_BY_PATTERN)


@dataclass(frozen=True)
class SortDirective:
    field: SortField
    direction: SortDirection

    @classmethod
    def parse(cls, directive: Optional[str]) -> "SortDirective":
        """Parse a `<+|-><key>` string; None or empty yields the default (newest first).

        The pattern only checks the prefix, so a known key followed by extra
        characters (e.g. "-totalYoeX") is accepted and falls back to the default.
        """
        if not directive:
            return DEFAULT_SORT
        if not _SORT_BY_RE.match(directive):
            raise BadRequestError(f"Invalid sort directive: {directive!r}")
        try:
            field = SortField(directive[1:])
        except ValueError:
            return DEFAULT_SORT
        return cls(field=field, direction=SortDirection(directive[0]))

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def __str__(self) -> str:
        return f"{self.direction.value}{self.field.value}"

    def sort(self, offers: Sequence[Offer]) -> List[Offer]:
        """Stable sort; ties keep their incoming order in both directions.

        Raises:
            NotFoundError: two or more offers are compared and one lacks the
                compensation or YOE value being sorted on.
        """
        if len(offers) < 2:
            return list(offers)
        return sorted(offers, key=self._key, reverse=self.descending)

    def _key(self, offer: Offer) -> float:
        if self.field is SortField.MONTH_YEAR_RECEIVED:
            return as_utc(offer.month_year_received).timestamp()

        if self.field is SortField.TOTAL_COMPENSATION:
            value = compensation_value(offer)
            if value is None:
                raise NotFoundError("Total Compensation or Salary not found")
            return value

        if self.field is SortField.TOTAL_YOE:
            value = total_yoe(offer)
            if value is None:
                raise NotFoundError("Total years of experience not found")
            return value

        raise ValueError(f"Unhandled sort field: {self.field}")


DEFAULT_SORT = SortDirective(SortField.MONTH_YEAR_RECEIVED, SortDirection.DESC)
