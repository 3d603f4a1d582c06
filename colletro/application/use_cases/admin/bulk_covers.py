"""Bulk cover generation for collections without a cover image."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from colletro.application.dtos.admin import CoverGenerationResult
from colletro.application.interfaces.repositories import ICollectionRepository
from colletro.application.interfaces.services import ICoverGenerator, IUnitOfWork
from colletro.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class BulkCoverGenerationService:
    """Generate and store covers one collection at a time.

    A failure (including a timeout) for one collection is recorded in
    errors and the run continues; the run itself never raises for a
    single collection. When deadline_seconds is set, the run stops
    starting new collections once it has elapsed and records every
    remaining collection as skipped, so the caller always gets a result
    before the request timeout fires.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        generator: ICoverGenerator,
        uow: IUnitOfWork,
        timeout_seconds: float,
        deadline_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._collection_repo = collection_repo
        self._generator = generator
        self._uow = uow
        self._timeout_seconds = timeout_seconds
        self._deadline_seconds = deadline_seconds
        self._clock = clock

    @traced("covers.generate_missing")
    async def generate_missing_covers(self) -> CoverGenerationResult:
        candidates = await self._collection_repo.list_missing_covers()
        result = CoverGenerationResult(total=len(candidates))
        started = self._clock()
        for index, candidate in enumerate(candidates):
            timeout = self._timeout_seconds
            if self._deadline_seconds is not None:
                remaining = self._deadline_seconds - (self._clock() - started)
                if remaining <= 0:
                    skipped = candidates[index:]
                    logger.warning(
                        "Cover generation deadline of %s seconds reached; skipping %d collections",
                        self._deadline_seconds,
                        len(skipped),
                    )
                    result.errors.extend(
                        f"{c.name}: skipped, run deadline of {self._deadline_seconds} seconds reached"
                        for c in skipped
                    )
                    break
                timeout = min(timeout, remaining)
            try:
                cover = await asyncio.wait_for(
                    self._generator.generate(candidate.id, candidate.name, candidate.category),
                    timeout=timeout,
                )
            except TimeoutError:
                logger.warning("Cover generation timed out for collection %s", candidate.id)
                result.errors.append(f"{candidate.name}: timed out after {timeout:g} seconds")
                continue
            except Exception as e:
                logger.warning(
                    "Cover generation failed for collection %s: %s", candidate.id, e
                )
                result.errors.append(f"{candidate.name}: {e}")
                continue
            result.generated += 1

            try:
                async with self._uow.transaction():
                    stored = await self._collection_repo.set_cover_image(candidate.id, cover)
            except Exception as e:
                logger.warning("Cover update failed for collection %s: %s", candidate.id, e)
                result.errors.append(f"{candidate.name}: {e}")
                continue
            if not stored:
                result.errors.append(f"{candidate.name}: collection no longer exists")
                continue
            result.updated += 1

        add_span_attributes(
            covers_total=result.total, covers_updated=result.updated, covers_failed=result.failed
        )
        logger.info(
            "Cover generation done: %d candidates, %d generated, %d updated, %d errors",
            result.total,
            result.generated,
            result.updated,
            result.failed,
        )
        return result
