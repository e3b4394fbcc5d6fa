"""Tests for request argument validation."""

import pytest

from jenkins_mcp.core.errors import InvalidArgumentsError
from jenkins_mcp.core.validation import (
    validate_job_path,
    validate_job_paths,
    validate_non_empty_list,
    validate_non_empty_string,
    validate_same_length,
    validate_string_items,
)


@pytest.mark.parametrize("value", [[], (), None, "a", {"a": 1}])
def test_non_empty_list_rejects(value):
    with pytest.raises(InvalidArgumentsError, match="jobPaths must be a non-empty array."):
        validate_non_empty_list(value, "jobPaths")


def test_non_empty_list_accepts():
    validate_non_empty_list(["a"], "jobPaths")


def test_same_length_rejects_mismatch():
    with pytest.raises(
        InvalidArgumentsError,
        match="jobPaths and buildNumbers arrays must have the same length.",
    ):
        validate_same_length(["a", "b"], ["1"], "jobPaths", "buildNumbers")


def test_same_length_accepts():
    validate_same_length(["a", "b"], ["1", "2"], "jobPaths", "buildNumbers")


@pytest.mark.parametrize("value", ["", "   ", None, 5])
def test_non_empty_string_rejects(value):
    with pytest.raises(InvalidArgumentsError, match="buildNumber must be a non-empty string"):
        validate_non_empty_string(value, "buildNumber")


@pytest.mark.parametrize("value", ["a//b", "/a", "a/", "job/"])
def test_job_path_rejects_empty_segments(value):
    with pytest.raises(InvalidArgumentsError, match="empty path segments"):
        validate_job_path(value)


def test_job_paths_reports_index():
    with pytest.raises(InvalidArgumentsError, match=r"jobPaths\[1\]"):
        validate_job_paths(["ok/job", ""])


def test_string_items_reports_index():
    with pytest.raises(InvalidArgumentsError, match=r"buildNumbers\[0\]"):
        validate_string_items([""], "buildNumbers")
