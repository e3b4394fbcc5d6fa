from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import urlparse

from dotenv import load_dotenv

from .errors import ConfigurationError


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value or not value.strip():
        raise ConfigurationError(f"Environment variable {name} is required but not set")
    return value.strip()


def _validate_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Invalid URL format for JENKINS_URL: {url}")
    return url


def _timeout(environ: Mapping[str, str]) -> float:
    raw = environ.get("JENKINS_TIMEOUT", "").strip()
    if not raw:
        return 30.0
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid JENKINS_TIMEOUT: {raw}") from None
    if value <= 0:
        raise ConfigurationError(f"Invalid JENKINS_TIMEOUT: {raw}")
    return value


def resolve_log_level(value: str) -> str:
    """Normalise a logging level name, rejecting names the logging module does not know."""
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Invalid LOG_LEVEL: {value}")
    return level


@dataclass
class JenkinsConfig:
    url: str
    user: str
    token: str = field(repr=False)
    timeout: float = 30.0
    server_name: str = "jenkins-server"
    server_version: str = "0.1.0"
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | None = None,
    ) -> JenkinsConfig:
        """Build the configuration from environment variables.

        A ``.env`` file is loaded first (without overriding variables that are
        already set) unless an explicit ``environ`` mapping is supplied.
        """
        if environ is None:
            load_dotenv(env_file)
            environ = os.environ

        return cls(
            url=_validate_url(_required(environ, "JENKINS_URL")),
            user=_required(environ, "JENKINS_USER"),
            token=_required(environ, "JENKINS_TOKEN"),
            timeout=_timeout(environ),
            server_name=environ.get("SERVER_NAME") or "jenkins-server",
            server_version=environ.get("SERVER_VERSION") or "0.1.0",
            log_level=resolve_log_level(environ.get("LOG_LEVEL") or "WARNING"),
        )
