"""Submission result model — the explicit outcome of FormController.submit()."""

from pydantic import BaseModel, Field
from typing import Any, Literal, Optional

from formstate.validators.models import ErrorMap


class SubmitResult(BaseModel):
    """Outcome of a submit call.

    Statuses:
        success  — the handler ran and returned ``data``
        invalid  — validation failed; ``errors`` holds the error map
        failure  — the handler raised; ``error`` and ``error_type`` describe it
        rejected — another submission was already in flight
    """

    status: Literal["success", "invalid", "failure", "rejected"]
    data: Any = None
    errors: ErrorMap = Field(default_factory=dict)
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, data: Any = None) -> "SubmitResult":
        return cls(status="success", data=data)

    @classmethod
    def invalid(cls, errors: ErrorMap) -> "SubmitResult":
        return cls(status="invalid", errors=dict(errors))

    @classmethod
    def failure(cls, exc: BaseException) -> "SubmitResult":
        return cls(status="failure", error=str(exc), error_type=type(exc).__name__)

    @classmethod
    def rejected(cls) -> "SubmitResult":
        return cls(status="rejected", error="A submission is already in progress")
