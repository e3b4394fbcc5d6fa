"""Argument checks run once per request, before any Jenkins call is issued."""

from __future__ import annotations

from typing import Any, Sequence

from .errors import InvalidArgumentsError


def validate_non_empty_list(value: Any, name: str) -> None:
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise InvalidArgumentsError(f"{name} must be a non-empty array.")


def validate_same_length(
    first: Sequence[Any], second: Sequence[Any], first_name: str, second_name: str
) -> None:
    if len(first) != len(second):
        raise InvalidArgumentsError(
            f"{first_name} and {second_name} arrays must have the same length."
        )


def validate_non_empty_string(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentsError(f"{name} must be a non-empty string")


def validate_job_path(value: Any, name: str = "jobPath") -> None:
    validate_non_empty_string(value, name)
    if any(not segment for segment in value.split("/")):
        raise InvalidArgumentsError(f"{name} must not contain empty path segments: {value!r}")


def validate_string_items(values: Sequence[Any], name: str) -> None:
    for index, value in enumerate(values):
        validate_non_empty_string(value, f"{name}[{index}]")


def validate_job_paths(values: Sequence[Any], name: str = "jobPaths") -> None:
    for index, value in enumerate(values):
        validate_job_path(value, f"{name}[{index}]")
