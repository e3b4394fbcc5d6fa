"""Concurrent settle-all execution of one operation over many jobs."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, List, Sequence, TypeVar, Union

from .progress import BatchProgress

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    cause: Exception


Outcome = Union[Success[T], Failure]


async def run_batch(
    items: Sequence[K],
    operation: Callable[[K, int], Awaitable[T]],
) -> List[Outcome[T]]:
    """Run ``operation(item, index)`` for every item concurrently.

    All invocations are started at once and awaited until each one settles; a
    failure never cancels its siblings. The returned list has one outcome per
    item, in input order. Exceptions raised by ``operation`` are captured as
    :class:`Failure` outcomes and never propagate out of this function.
    """
    progress = BatchProgress(total=len(items))

    settled = await asyncio.gather(
        *(operation(item, index) for index, item in enumerate(items)),
        return_exceptions=True,
    )

    outcomes: List[Outcome[T]] = []
    for item, result in zip(items, settled):
        if isinstance(result, Exception):
            logger.debug("Batch item %r failed: %r", item, result)
            outcomes.append(Failure(result))
            progress.record(success=False)
        elif isinstance(result, BaseException):
            # Cancellation and interpreter exits are not per-item failures.
            raise result
        else:
            outcomes.append(Success(result))
            progress.record(success=True)

    logger.debug("Batch finished: %s", progress.to_dict())
    return outcomes
