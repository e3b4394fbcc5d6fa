"""Progress accounting for a single batch run."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class BatchProgress:
    """Counts settled items of one batch."""

    total: int
    succeeded: int = 0
    failed: int = 0
    started_at: float = field(default_factory=time.monotonic)

    @property
    def settled(self) -> int:
        return self.succeeded + self.failed

    @property
    def elapsed_seconds(self) -> float:
        return time.monotonic() - self.started_at

    def record(self, success: bool) -> None:
        if success:
            self.succeeded += 1
        else:
            self.failed += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }

    def __repr__(self) -> str:
        return (
            f"BatchProgress({self.settled}/{self.total}, "
            f"ok={self.succeeded} failed={self.failed}, "
            f"{self.elapsed_seconds:.2f}s)"
        )
