"""Exception hierarchy for the Jenkins MCP server."""

from __future__ import annotations


class JenkinsMCPError(Exception):
    """Base exception for all server errors."""


class ConfigurationError(JenkinsMCPError):
    """Environment configuration is missing or invalid."""


class InvalidArgumentsError(JenkinsMCPError):
    """Tool arguments failed validation before any remote call was made."""


class ToolExecutionError(JenkinsMCPError):
    """A single-job operation (trigger, log) failed."""


class RemoteCallError(JenkinsMCPError):
    """A call to the Jenkins API failed.

    ``status_code`` and ``reason`` are set when Jenkins answered with an HTTP
    error; both are ``None`` for timeouts and connection failures.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class RemoteNotFoundError(RemoteCallError):
    """Jenkins reported the job or build as absent (HTTP 404)."""


def is_not_found(cause: BaseException) -> bool:
    """Return True if *cause* means the requested job or build does not exist."""
    return isinstance(cause, RemoteNotFoundError)


def humanize_error(cause: BaseException, default_message: str) -> str:
    """Convert a failure cause into a readable message for the caller."""
    if isinstance(cause, RemoteCallError):
        if cause.status_code is not None:
            return f"Jenkins API error: {cause.status_code} {cause.reason or cause}"
        return f"Jenkins API error: {cause}"
    message = str(cause)
    return message or default_message
