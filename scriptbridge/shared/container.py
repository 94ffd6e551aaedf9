# scriptbridge/shared/container.py
from dependency_injector import containers, providers

from scriptbridge.shared.config import StorageBackend, settings

# --- Adapters ---
from scriptbridge.adapters.persistence.filesystem_repo import FileSystemPhraseRepository
from scriptbridge.adapters.persistence.memory_repo import InMemoryPhraseRepository
from scriptbridge.adapters.persistence.rest_repo import RestPhraseRepository

# --- Engine ---
from scriptbridge.core.engine.cache import BoundedCache, make_policy
from scriptbridge.core.engine.script_detector import ScriptDetector

# --- Use Cases ---
from scriptbridge.core.use_cases.chat_translation import TranslateForChat
from scriptbridge.core.use_cases.translate_text import PivotTranslator


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Connects the phrase store adapter and the caches to the use cases.
    """

    # 1. Wiring Configuration
    wiring_config = containers.WiringConfiguration(
        modules=[
            "scriptbridge.adapters.api.routers.transliteration",
            "scriptbridge.adapters.api.routers.translation",
            "scriptbridge.adapters.api.routers.admin",
            "scriptbridge.adapters.api.routers.health",
        ]
    )

    # 2. Phrase Store (Selector: memory / filesystem / rest)
    if settings.STORAGE_BACKEND == StorageBackend.REST:
        phrase_repo = providers.Singleton(
            RestPhraseRepository,
            base_url=settings.PHRASE_STORE_URL,
            api_key=settings.PHRASE_STORE_KEY,
            tables=settings.phrase_store_tables,
            timeout=settings.PHRASE_STORE_TIMEOUT,
        )
    elif settings.STORAGE_BACKEND == StorageBackend.MEMORY:
        phrase_repo = providers.Singleton(InMemoryPhraseRepository)
    else:
        phrase_repo = providers.Singleton(
            FileSystemPhraseRepository,
            path=settings.PHRASES_PATH,
        )

    # 3. Caches
    result_cache = providers.Singleton(
        BoundedCache,
        max_size=settings.RESULT_CACHE_SIZE,
        policy=providers.Factory(make_policy, settings.CACHE_EVICTION),
    )
    detection_cache = providers.Singleton(
        BoundedCache,
        max_size=settings.DETECTION_CACHE_SIZE,
        policy=providers.Factory(make_policy, settings.CACHE_EVICTION),
    )

    script_detector = providers.Singleton(ScriptDetector, cache=detection_cache)

    # 4. Use Cases
    translator = providers.Singleton(
        PivotTranslator,
        repo=phrase_repo,
        result_cache=result_cache,
        detector=script_detector,
        latin_pair_policy=settings.LATIN_PAIR_POLICY,
        lookup_timeout=settings.STORE_LOOKUP_TIMEOUT,
    )

    chat_translation = providers.Factory(
        TranslateForChat,
        translator=translator,
    )


# Global Container Instance
container = Container()
