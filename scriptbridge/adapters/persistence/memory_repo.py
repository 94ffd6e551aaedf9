# scriptbridge/adapters/persistence/memory_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import structlog

from scriptbridge.adapters.persistence.normalization import normalize_for_lookup
from scriptbridge.core.domain.models import PhraseRow
from scriptbridge.core.ports import PhraseRepo

logger = structlog.get_logger()


class InMemoryPhraseRepository(PhraseRepo):
    """
    PhraseRepo over rows held in memory.

    Every column of every row is indexed by its normalized value. When two
    rows share a value in the same column the first one loaded wins.
    """

    def __init__(self, rows: Optional[Iterable[PhraseRow]] = None):
        self._rows: List[PhraseRow] = []
        self._index: Dict[str, Dict[str, PhraseRow]] = {}
        if rows:
            self.load(rows)

    def load(self, rows: Iterable[PhraseRow]) -> int:
        added = 0
        collisions = 0
        for row in rows:
            self._rows.append(row)
            added += 1
            values = {"english": row.english, **row.translations}
            for column, value in values.items():
                if not value:
                    continue
                key = normalize_for_lookup(value)
                bucket = self._index.setdefault(column, {})
                if key in bucket:
                    collisions += 1
                    continue
                bucket[key] = row
        if collisions:
            logger.debug("phrase_index_collisions", count=collisions)
        return added

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def columns(self) -> List[str]:
        return sorted(self._index)

    async def lookup(self, column: str, text: str) -> Optional[PhraseRow]:
        bucket = self._index.get(column)
        if not bucket:
            return None
        return bucket.get(normalize_for_lookup(text))

    async def health_check(self) -> bool:
        return True
