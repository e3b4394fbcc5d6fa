"""Classification of batch outcomes into caller-facing job results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from ..core.errors import RemoteCallError, humanize_error, is_not_found
from .executor import Failure, Outcome, Success

logger = logging.getLogger(__name__)

NO_SUCCESSFUL_BUILD = "No successful build found."


@dataclass(frozen=True)
class JobResult:
    """Outcome of one job in a batch: ``data`` on success, ``error`` otherwise."""

    job_path: str
    status: Literal["success", "error"]
    data: Optional[Any] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status == "success":
            if self.data is None or self.error is not None:
                raise ValueError("success results carry data and no error")
        elif self.status == "error":
            if self.error is None or self.data is not None:
                raise ValueError("error results carry an error and no data")
        else:
            raise ValueError(f"Unknown result status: {self.status}")

    @classmethod
    def success(cls, job_path: str, data: Any) -> JobResult:
        return cls(job_path=job_path, status="success", data=data)

    @classmethod
    def failure(cls, job_path: str, error: str) -> JobResult:
        return cls(job_path=job_path, status="error", error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape ``{jobPath, status, data | error}``."""
        result: Dict[str, Any] = {"jobPath": self.job_path, "status": self.status}
        if self.status == "success":
            result["data"] = self.data
        else:
            result["error"] = self.error
        return result


@dataclass(frozen=True)
class ResultPolicy:
    """Per-operation rules for turning an outcome into a :class:`JobResult`.

    Attributes:
        default_message: Fallback error text when a failure has no message.
        not_found_is_benign: Report a missing job/build as success carrying
            ``benign_message`` instead of an error.
        not_found_message: Error text for a missing job/build. When unset, a
            not-found failure is humanized like any other remote error.
        benign_message: Payload message used when ``not_found_is_benign``.
    """

    default_message: str
    not_found_is_benign: bool = False
    not_found_message: Optional[str] = None
    benign_message: str = NO_SUCCESSFUL_BUILD


def to_job_result(job_path: str, outcome: Outcome[Any], policy: ResultPolicy) -> JobResult:
    if isinstance(outcome, Success):
        return JobResult.success(job_path, outcome.value)

    if not isinstance(outcome, Failure):
        raise TypeError(f"Unexpected outcome type: {type(outcome).__name__}")

    cause = outcome.cause
    if is_not_found(cause):
        if policy.not_found_is_benign:
            return JobResult.success(job_path, {"message": policy.benign_message})
        if policy.not_found_message is not None:
            return JobResult.failure(job_path, policy.not_found_message)

    if not isinstance(cause, RemoteCallError):
        logger.warning("Unexpected failure for job %s: %r", job_path, cause)
    return JobResult.failure(job_path, humanize_error(cause, policy.default_message))
