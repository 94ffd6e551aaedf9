# scriptbridge/adapters/persistence/rest_repo.py
import re
from typing import Any, Dict, List, Optional, Sequence

import httpx
import structlog
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from scriptbridge.adapters.persistence.normalization import normalize_for_lookup
from scriptbridge.core.domain.exceptions import PhraseStoreError
from scriptbridge.core.domain.models import PhraseKind, PhraseRow
from scriptbridge.core.ports import PhraseRepo
from scriptbridge.core.registry import PHRASE_LANGUAGES

logger = structlog.get_logger()

_LIKE_SPECIAL_RE = re.compile(r"([\\%_])")


def escape_like(text: str) -> str:
    """
    ilike pattern that matches `text` literally.

    LIKE wildcards are backslash-escaped. PostgREST rewrites every '*' to '%'
    before the query reaches the database, so an asterisk can only be kept
    as a single-character wildcard.
    """
    return _LIKE_SPECIAL_RE.sub(r"\\\1", text).replace("*", "_")


class RestPhraseRepository(PhraseRepo):
    """
    PhraseRepo backed by a hosted row-lookup service (PostgREST dialect).

    A lookup is one filtered GET per table:
        GET {base_url}/rest/v1/{table}?select=*&{column}=ilike.{key}&limit=1
    The key is the normalize_for_lookup form of the query with LIKE
    wildcards escaped; ilike supplies the case-insensitivity the casefolded
    key needs on the stored side. Tables are queried in order and the first
    row found wins.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        tables: Sequence[str] = ("common_phrases",),
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required for the REST phrase store")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.tables = tuple(tables)
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _fetch(self, table: str, column: str, key: str) -> List[Dict[str, Any]]:
        params = {"select": "*", column: f"ilike.{escape_like(key)}", "limit": "1"}
        async with self._client() as client:
            r = await client.get(f"/rest/v1/{table}", params=params)
            r.raise_for_status()
            return r.json()

    async def lookup(self, column: str, text: str) -> Optional[PhraseRow]:
        if column not in PHRASE_LANGUAGES:
            return None
        key = normalize_for_lookup(text)
        if not key:
            return None

        for table in self.tables:
            try:
                rows = await self._fetch(table, column, key)
            except httpx.HTTPStatusError as e:
                raise PhraseStoreError(
                    f"Phrase store returned {e.response.status_code} for {table}",
                    column=column,
                    status_code=e.response.status_code,
                )
            except httpx.HTTPError as e:
                raise PhraseStoreError(f"Phrase store unreachable: {e}", column=column)

            if rows:
                return row_to_phrase(rows[0], table)
        return None

    async def health_check(self) -> bool:
        try:
            async with self._client() as client:
                r = await client.get("/rest/v1/")
                return r.status_code < 500
        except httpx.HTTPError as e:
            logger.warning("phrase_store_unreachable", error=str(e))
            return False


def row_to_phrase(row: Dict[str, Any], table: str = "") -> PhraseRow:
    translations = {
        column: value
        for column, value in row.items()
        if column in PHRASE_LANGUAGES and column != "english" and isinstance(value, str) and value
    }
    kind = row.get("kind") or (PhraseKind.WORD if "dictionary" in table else PhraseKind.PHRASE)
    return PhraseRow(english=row.get("english") or "", translations=translations, kind=kind)
