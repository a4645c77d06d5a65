"""Request boundary for the engine's procedures.

`OffersRouter.call(path, payload)` validates the payload, runs the procedure and
returns a JSON-ready dict with camelCase keys. Any failure comes out as a
`ProcedureError` with a `NOT_FOUND` or `BAD_REQUEST` code.

Procedures:
    analysis.generate  {"profileId": ...}  -> profile analysis (rebuilt)
    analysis.get       {"profileId": ...}  -> profile analysis (stored)
    offers.list        list filters        -> {"data": [...], "paging": {...}}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from pydantic import BaseModel, ValidationError

from .analysis import OfferAnalyzer
from .errors import OfferEngineError, ProcedureError
from .listing import list_offers
from .logger import _log_debug, _log_warning
from .schemas import AnalysisInput, OfferListQuery
from .store import OfferStore


class OffersRouter:
    def __init__(self, store: OfferStore) -> None:
        self._store = store
        self._analyzer = OfferAnalyzer(store)
        self._procedures: Dict[str, Callable[[Mapping[str, Any]], BaseModel]] = {
            "analysis.generate": self._generate_analysis,
            "analysis.get": self._get_analysis,
            "offers.list": self._list_offers,
        }

    @property
    def procedures(self) -> list:
        return sorted(self._procedures)

    def call(self, path: str, payload: Any) -> Dict[str, Any]:
        handler = self._procedures.get(path)
        if handler is None:
            raise ProcedureError("NOT_FOUND", f"No procedure named {path!r}", path)

        if not isinstance(payload, Mapping):
            _log_warning(f"{path} rejected: input is a {type(payload).__name__}, not an object")
            raise ProcedureError("BAD_REQUEST", "Input must be a JSON object", path)

        _log_debug(f"{path} <- {dict(payload)}")
        try:
            result = handler(payload)
        except ValidationError as exc:
            message = "; ".join(_format_error(e) for e in exc.errors())
            _log_warning(f"{path} rejected: {message}")
            raise ProcedureError("BAD_REQUEST", message, path) from exc
        except OfferEngineError as exc:
            _log_warning(f"{path} failed with {exc.code}: {exc.message}")
            raise ProcedureError(exc.code, exc.message, path) from exc

        return result.model_dump(mode="json", by_alias=True)

    def _generate_analysis(self, payload: Mapping[str, Any]) -> BaseModel:
        params = AnalysisInput.model_validate(payload)
        return self._analyzer.generate(params.profile_id)

    def _get_analysis(self, payload: Mapping[str, Any]) -> BaseModel:
        params = AnalysisInput.model_validate(payload)
        return self._analyzer.get(params.profile_id)

    def _list_offers(self, payload: Mapping[str, Any]) -> BaseModel:
        return list_offers(self._store, OfferListQuery.model_validate(payload))


def _format_error(error: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error['msg']}" if loc else error["msg"]
