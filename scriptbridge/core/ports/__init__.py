# scriptbridge/core/ports/__init__.py
"""
Core Ports (Interfaces).

The pivot translator reaches the phrase store only through PhraseRepo, so
the store can be an in-memory table in tests, a JSON file in development or
a hosted row-lookup service in production.
"""

from abc import ABC, abstractmethod
from typing import Optional

from scriptbridge.core.domain.models import PhraseRow


class PhraseRepo(ABC):
    """
    Port for the curated phrase and word dictionary.
    """

    @abstractmethod
    async def lookup(self, column: str, text: str) -> Optional[PhraseRow]:
        """
        Find the row whose `column` value matches `text`.

        Returns None on a miss. Implementations raise PhraseStoreError when
        the store cannot answer; callers treat that as a miss.
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """True when the store can serve lookups."""
        pass


__all__ = ["PhraseRepo"]
