"""Offer engine package.

Compares job offers against similar offers and serves the filtered offer list:
- `models.py` defines the offer, profile and analysis schema.
- `normalize.py` turns stored records into typed offers and comparable views.
- `cohort.py`, `ranking.py` and `analysis.py` build the percentile analysis.
- `listing.py` filters, sorts and paginates the offer list.
- `store/` holds the store interface; `sources/` loads offer snapshots.
- `router.py` is the request boundary exposing the procedures.
"""

__version__ = "0.1.0"
