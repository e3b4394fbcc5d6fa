"""Tests for outcome classification."""

from dataclasses import replace

from jenkins_mcp.batch import Failure, ResultPolicy, Success, to_job_result
from jenkins_mcp.core.errors import (
    RemoteCallError,
    RemoteNotFoundError,
    humanize_error,
)

POLICY = ResultPolicy(default_message="Failed to get build status")


def _not_found():
    return RemoteNotFoundError("GET x returned 404", status_code=404, reason="Not Found")


def test_success_passes_data_through():
    result = to_job_result("a", Success({"url": "u"}), POLICY)
    assert result.to_dict() == {"jobPath": "a", "status": "success", "data": {"url": "u"}}


def test_not_found_benign_becomes_success():
    policy = replace(POLICY, not_found_is_benign=True)
    result = to_job_result("x", Failure(_not_found()), policy)
    assert result.to_dict() == {
        "jobPath": "x",
        "status": "success",
        "data": {"message": "No successful build found."},
    }


def test_not_found_with_message():
    policy = replace(POLICY, not_found_message="Build #42 not found for job.")
    result = to_job_result("x", Failure(_not_found()), policy)
    assert result.to_dict() == {
        "jobPath": "x",
        "status": "error",
        "error": "Build #42 not found for job.",
    }


def test_not_found_without_policy_is_humanized():
    result = to_job_result("x", Failure(_not_found()), POLICY)
    assert result.error == "Jenkins API error: 404 Not Found"


def test_benign_flag_ignores_other_errors():
    policy = replace(POLICY, not_found_is_benign=True)
    cause = RemoteCallError("boom", status_code=500, reason="Internal Server Error")
    result = to_job_result("x", Failure(cause), policy)
    assert result.status == "error"
    assert result.error == "Jenkins API error: 500 Internal Server Error"


def test_generic_exception_uses_message():
    result = to_job_result("x", Failure(RuntimeError("kaput")), POLICY)
    assert result.error == "kaput"


def test_generic_exception_without_message_uses_default():
    result = to_job_result("x", Failure(RuntimeError()), POLICY)
    assert result.error == "Failed to get build status"


def test_humanize_remote_error_without_status():
    cause = RemoteCallError("request timed out after 30s")
    assert humanize_error(cause, "fallback") == "Jenkins API error: request timed out after 30s"


def test_humanize_remote_error_without_reason_uses_message():
    cause = RemoteCallError("GET x returned 502", status_code=502, reason="")
    assert humanize_error(cause, "fallback") == "Jenkins API error: 502 GET x returned 502"
