# scriptbridge/adapters/persistence/__init__.py
from .filesystem_repo import FileSystemPhraseRepository
from .memory_repo import InMemoryPhraseRepository
from .rest_repo import RestPhraseRepository

__all__ = [
    "InMemoryPhraseRepository",
    "FileSystemPhraseRepository",
    "RestPhraseRepository",
]
