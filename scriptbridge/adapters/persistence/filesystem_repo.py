# scriptbridge/adapters/persistence/filesystem_repo.py
import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles
import structlog

from scriptbridge.adapters.persistence.memory_repo import InMemoryPhraseRepository
from scriptbridge.core.domain.exceptions import PhraseStoreError
from scriptbridge.core.domain.models import PhraseKind, PhraseRow
from scriptbridge.core.ports import PhraseRepo

logger = structlog.get_logger()


class FileSystemPhraseRepository(PhraseRepo):
    """
    PhraseRepo backed by a JSON file, read once on first use.

    File layout:
        {
          "phrases": [{"english": "thank you", "translations": {"hindi": "..."}}],
          "words":   [{"english": "water", "translations": {"hindi": "..."}}]
        }
    """

    def __init__(self, path: str):
        self.path = Path(path).resolve()
        self._index: Optional[InMemoryPhraseRepository] = None
        self._lock = asyncio.Lock()

    async def _ensure_loaded(self) -> InMemoryPhraseRepository:
        if self._index is not None:
            return self._index
        async with self._lock:
            if self._index is None:
                rows = await self._read_rows()
                self._index = InMemoryPhraseRepository(rows)
                logger.info("phrase_file_loaded", path=str(self.path), rows=len(self._index))
        return self._index

    async def _read_rows(self) -> List[PhraseRow]:
        if not self.path.exists():
            logger.warning("phrase_file_not_found", path=str(self.path))
            return []
        try:
            async with aiofiles.open(self.path, mode="r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content)
        except (OSError, json.JSONDecodeError) as e:
            raise PhraseStoreError(f"Cannot read phrase file {self.path}: {e}")
        return parse_rows(data)

    async def reload(self) -> int:
        """Drop the loaded index and read the file again."""
        async with self._lock:
            self._index = None
        index = await self._ensure_loaded()
        return len(index)

    async def lookup(self, column: str, text: str) -> Optional[PhraseRow]:
        index = await self._ensure_loaded()
        return await index.lookup(column, text)

    async def health_check(self) -> bool:
        try:
            await self._ensure_loaded()
        except PhraseStoreError as e:
            logger.error("phrase_store_unhealthy", error=str(e))
            return False
        return self.path.exists()


def parse_rows(data: Dict[str, Any]) -> List[PhraseRow]:
    """Turn the decoded JSON document into PhraseRows, skipping bad entries."""
    if not isinstance(data, dict):
        raise PhraseStoreError("Phrase file must contain a JSON object")

    rows: List[PhraseRow] = []
    for section, kind in (("phrases", PhraseKind.PHRASE), ("words", PhraseKind.WORD)):
        for entry in data.get(section, []):
            if not isinstance(entry, dict) or not entry.get("english"):
                logger.warning("phrase_entry_skipped", section=section, entry=str(entry)[:80])
                continue
            translations = entry.get("translations") or {}
            rows.append(
                PhraseRow(
                    english=entry["english"],
                    translations={k: v for k, v in translations.items() if v},
                    kind=kind,
                )
            )
    return rows
