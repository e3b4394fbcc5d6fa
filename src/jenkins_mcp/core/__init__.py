"""Core modules: configuration, errors, job path resolution, validation and the Jenkins client."""

from .config import JenkinsConfig
from .errors import (
    ConfigurationError,
    InvalidArgumentsError,
    JenkinsMCPError,
    RemoteCallError,
    RemoteNotFoundError,
    ToolExecutionError,
)
from .jenkins_client import JenkinsClient
from .job_path import resolve_job_path

__all__ = [
    "JenkinsConfig",
    "JenkinsClient",
    "resolve_job_path",
    "JenkinsMCPError",
    "ConfigurationError",
    "InvalidArgumentsError",
    "RemoteCallError",
    "RemoteNotFoundError",
    "ToolExecutionError",
]
