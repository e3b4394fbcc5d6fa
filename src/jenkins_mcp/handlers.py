"""Tool handlers: validate arguments, fan out Jenkins calls, shape the results."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from .batch import JobResult, ResultPolicy, run_batch, to_job_result
from .core.errors import ToolExecutionError, humanize_error
from .core.jenkins_client import JenkinsClient
from .core.validation import (
    validate_job_path,
    validate_job_paths,
    validate_non_empty_list,
    validate_non_empty_string,
    validate_same_length,
    validate_string_items,
)
from .models import BuildInfo, BuildStatus

BUILD_STATUS_POLICY = ResultPolicy(default_message="Failed to get build status")
LATEST_SUCCESS_PARAMS_POLICY = ResultPolicy(
    default_message="Failed to get latest successful build params",
    not_found_is_benign=True,
)
BUILD_PARAMS_POLICY = ResultPolicy(default_message="Failed to get build params")


def _validate_paired(job_paths: Any, build_numbers: Any) -> None:
    validate_non_empty_list(job_paths, "jobPaths")
    validate_non_empty_list(build_numbers, "buildNumbers")
    validate_same_length(job_paths, build_numbers, "jobPaths", "buildNumbers")
    validate_job_paths(job_paths)
    validate_string_items(build_numbers, "buildNumbers")


class ToolHandlers:
    """Implements the five Jenkins tools on top of a :class:`JenkinsClient`."""

    def __init__(self, client: JenkinsClient):
        self.client = client

    async def get_build_status(
        self, job_paths: List[str], build_numbers: List[str]
    ) -> List[JobResult]:
        _validate_paired(job_paths, build_numbers)

        async def fetch(job_path: str, index: int) -> Dict[str, Any]:
            raw = await self.client.get_build_status(job_path, build_numbers[index])
            return BuildStatus.model_validate(raw).model_dump()

        outcomes = await run_batch(job_paths, fetch)
        return [
            to_job_result(job_path, outcome, BUILD_STATUS_POLICY)
            for job_path, outcome in zip(job_paths, outcomes)
        ]

    async def trigger_build(
        self, job_path: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> str:
        validate_job_path(job_path)
        try:
            await self.client.trigger_build(job_path, parameters or {})
        except Exception as exc:
            raise ToolExecutionError(humanize_error(exc, "Failed to trigger build")) from exc
        return f"Build triggered successfully for job: {job_path}. Check Jenkins for status."

    async def get_build_log(self, job_path: str, build_number: str) -> str:
        validate_job_path(job_path)
        validate_non_empty_string(build_number, "buildNumber")
        try:
            return await self.client.get_build_log(job_path, build_number)
        except Exception as exc:
            raise ToolExecutionError(humanize_error(exc, "Failed to get build log")) from exc

    async def get_latest_success_build_params(self, job_paths: List[str]) -> List[JobResult]:
        validate_non_empty_list(job_paths, "jobPaths")
        validate_job_paths(job_paths)

        async def fetch(job_path: str, index: int) -> Dict[str, Any]:
            build = BuildInfo.model_validate(
                await self.client.get_latest_successful_build(job_path)
            )
            parameters = await self.client.get_build_parameters(job_path, str(build.number))
            return {
                "buildNumber": build.number,
                "url": build.url,
                "timestamp": build.timestamp,
                "parameters": parameters,
            }

        outcomes = await run_batch(job_paths, fetch)
        return [
            to_job_result(job_path, outcome, LATEST_SUCCESS_PARAMS_POLICY)
            for job_path, outcome in zip(job_paths, outcomes)
        ]

    async def get_build_params(
        self, job_paths: List[str], build_numbers: List[str]
    ) -> List[JobResult]:
        _validate_paired(job_paths, build_numbers)

        async def fetch(job_path: str, index: int) -> Dict[str, Any]:
            build_number = build_numbers[index]
            build = BuildStatus.model_validate(
                await self.client.get_build_status(job_path, build_number)
            )
            parameters = await self.client.get_build_parameters(job_path, build_number)
            return {
                "buildNumber": build_number,
                "url": build.url,
                "result": build.result,
                "building": build.building,
                "timestamp": build.timestamp,
                "duration": build.duration,
                "parameters": parameters,
            }

        outcomes = await run_batch(job_paths, fetch)
        return [
            to_job_result(
                job_path,
                outcome,
                replace(
                    BUILD_PARAMS_POLICY,
                    not_found_message=f"Build #{build_number} not found for job.",
                ),
            )
            for job_path, build_number, outcome in zip(job_paths, build_numbers, outcomes)
        ]
