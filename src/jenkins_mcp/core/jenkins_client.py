"""Async Jenkins REST client used by the tool handlers."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import JenkinsConfig
from .errors import RemoteCallError, RemoteNotFoundError
from .job_path import resolve_job_path

logger = logging.getLogger(__name__)

PARAMETERS_TREE = "actions[parameters[*]]"


async def _log_request(request: httpx.Request) -> None:
    logger.debug("[Jenkins API] %s %s", request.method, request.url)


class JenkinsClient:
    """Thin wrapper over ``httpx.AsyncClient`` speaking the Jenkins JSON API.

    Every method accepts a caller-facing job identifier (``folder/job``) and
    resolves it to Jenkins' nested ``job/`` form. Transport failures are raised
    as :class:`RemoteCallError`; HTTP 404 as :class:`RemoteNotFoundError`.
    """

    def __init__(
        self,
        config: JenkinsConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.url.rstrip("/"),
            auth=httpx.BasicAuth(config.user, config.token),
            timeout=config.timeout,
            follow_redirects=True,
            transport=transport,
            event_hooks={"request": [_log_request]},
        )

    async def __aenter__(self) -> JenkinsClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            reason = exc.response.reason_phrase
            error_cls = RemoteNotFoundError if status == 404 else RemoteCallError
            raise error_cls(
                f"{method} {url} returned {status}",
                status_code=status,
                reason=reason,
            ) from exc
        except httpx.TimeoutException as exc:
            raise RemoteCallError(
                f"request timed out after {self.config.timeout:g}s"
            ) from exc
        except httpx.RequestError as exc:
            raise RemoteCallError(str(exc) or type(exc).__name__) from exc
        return response

    async def get_build_status(self, job_path: str, build_number: str) -> Dict[str, Any]:
        """Return the raw build JSON for ``build_number`` (or ``lastBuild``)."""
        path = resolve_job_path(job_path)
        response = await self._request("GET", f"/{path}/{build_number}/api/json")
        return response.json()

    async def trigger_build(
        self, job_path: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> None:
        path = resolve_job_path(job_path)
        data = {
            key: value if isinstance(value, str) else json.dumps(value)
            for key, value in (parameters or {}).items()
        }
        await self._request("POST", f"/{path}/buildWithParameters", data=data)

    async def get_build_log(self, job_path: str, build_number: str) -> str:
        path = resolve_job_path(job_path)
        response = await self._request("GET", f"/{path}/{build_number}/consoleText")
        return response.text

    async def get_latest_successful_build(self, job_path: str) -> Dict[str, Any]:
        """Return the last successful build JSON; 404 when the job never succeeded."""
        path = resolve_job_path(job_path)
        response = await self._request("GET", f"/{path}/lastSuccessfulBuild/api/json")
        return response.json()

    async def get_build_parameters(self, job_path: str, build_number: str) -> Dict[str, Any]:
        """Return ``{name: value}`` for the build's parameters.

        Builds without a parameters action yield an empty mapping.
        """
        path = resolve_job_path(job_path)
        response = await self._request(
            "GET",
            f"/{path}/{build_number}/api/json",
            params={"tree": PARAMETERS_TREE},
        )
        for action in response.json().get("actions") or []:
            if action and action.get("parameters"):
                return {param["name"]: param.get("value") for param in action["parameters"]}
        return {}
