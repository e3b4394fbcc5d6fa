from __future__ import annotations

JOB_SEGMENT = "job"


def resolve_job_path(identifier: str) -> str:
    """Translate ``folder/sub/name`` into Jenkins' ``job/folder/job/sub/job/name``.

    Identifiers that already start with ``job/`` are returned unchanged.
    """
    if identifier.startswith(f"{JOB_SEGMENT}/"):
        return identifier
    return "/".join(f"{JOB_SEGMENT}/{segment}" for segment in identifier.split("/"))
