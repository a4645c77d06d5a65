"""Error taxonomy for the offer engine.

Every engine failure carries a category code that the request boundary reports
unchanged (`NOT_FOUND` or `BAD_REQUEST`) together with a human-readable message.
"""

from __future__ import annotations


class OfferEngineError(Exception):
    """
    Base class for categorized engine failures.

    Attributes:
        code: Category reported at the request boundary
        message: Human-readable description
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(OfferEngineError):
    """A required offer, analysis, compensation or YOE value does not exist."""

    code = "NOT_FOUND"


class BadRequestError(OfferEngineError):
    """Input or stored record is malformed."""

    code = "BAD_REQUEST"


class MissingPrerequisiteError(BadRequestError):
    """The reference offer cannot be analysed (its profile has no YOE)."""


class ProcedureError(Exception):
    """
    Failure surfaced at the request boundary.

    Attributes:
        code: `NOT_FOUND` or `BAD_REQUEST`
        message: Human-readable description
        path: Procedure that failed (e.g. "analysis.generate")
    """

    def __init__(self, code: str, message: str, path: str = ""):
        self.code = code
        self.message = message
        self.path = path
        super().__init__(f"{code}: {message}")

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "path": self.path}
