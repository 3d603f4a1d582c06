"""Manual entry source: users type items in themselves, so search finds nothing."""

from colletro.application.dtos.search import CandidateResult


class ManualSource:
    source_id = "manual"

    async def search(self, query: str) -> list[CandidateResult]:
        return []
