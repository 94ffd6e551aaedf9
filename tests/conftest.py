# tests/conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from scriptbridge.adapters.persistence.memory_repo import InMemoryPhraseRepository
from scriptbridge.core.domain.models import PhraseKind, PhraseRow
from scriptbridge.core.engine.cache import BoundedCache
from scriptbridge.core.engine.script_detector import ScriptDetector
from scriptbridge.core.ports import PhraseRepo
from scriptbridge.core.use_cases.translate_text import PivotTranslator


@pytest.fixture(scope="function")
def mock_phrase_repo():
    """A phrase store that never has an answer."""
    repo = MagicMock(spec=PhraseRepo)
    # Async methods must be mocked with AsyncMock
    repo.lookup = AsyncMock(return_value=None)
    repo.health_check = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def phrase_rows():
    return [
        PhraseRow(
            english="thank you",
            translations={
                "hindi": "धन्यवाद",
                "tamil": "நன்றி",
                "spanish": "gracias",
                "french": "merci",
            },
        ),
        PhraseRow(english="water", translations={"hindi": "पानी", "spanish": "agua"}, kind=PhraseKind.WORD),
        PhraseRow(english="friend", translations={"hindi": "दोस्त", "spanish": "amigo"}, kind=PhraseKind.WORD),
    ]


@pytest.fixture
def memory_repo(phrase_rows):
    return InMemoryPhraseRepository(phrase_rows)


@pytest.fixture
def detector():
    return ScriptDetector(cache=BoundedCache(max_size=100))


@pytest.fixture
def translator(memory_repo, detector):
    """Translator over the in-memory store with small private caches."""
    return PivotTranslator(
        memory_repo,
        result_cache=BoundedCache(max_size=100),
        detector=detector,
    )
