from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class BuildStatus(BaseModel):
    """Fields of a Jenkins build returned to callers; anything else is dropped."""

    model_config = ConfigDict(extra="ignore")

    building: Optional[bool] = None
    result: Optional[str] = None
    timestamp: Optional[int] = None
    duration: Optional[int] = None
    url: Optional[str] = None


class BuildInfo(BuildStatus):
    number: int
