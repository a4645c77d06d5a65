"""Offer persistence: the abstract store interface and the in-memory implementation."""

from .base import COMPENSATION_DESC, OfferQuery, OfferStore, OrderBy, RoleClause
from .memory import InMemoryOfferStore

__all__ = [
    "COMPENSATION_DESC",
    "InMemoryOfferStore",
    "OfferQuery",
    "OfferStore",
    "OrderBy",
    "RoleClause",
]
