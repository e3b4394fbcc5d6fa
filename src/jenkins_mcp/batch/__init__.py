"""Batch execution and result shaping for multi-job tool calls."""

from __future__ import annotations

from .executor import Failure, Outcome, Success, run_batch
from .progress import BatchProgress
from .results import JobResult, ResultPolicy, to_job_result

__all__ = [
    "run_batch",
    "Outcome",
    "Success",
    "Failure",
    "BatchProgress",
    "JobResult",
    "ResultPolicy",
    "to_job_result",
]
