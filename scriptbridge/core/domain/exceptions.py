# scriptbridge/core/domain/exceptions.py
"""
Domain exceptions.

None of these cross the public transliteration/translation API: the engine
absorbs them and degrades to a passthrough result. They exist so that
adapters and the HTTP layer can signal failures precisely.
"""


class DomainError(Exception):
    """Base class for all ScriptBridge domain errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class RegistryError(DomainError):
    """Static script/language tables violate an invariant (raised at import)."""


class PhraseStoreError(DomainError):
    """The phrase store could not answer a lookup."""

    def __init__(self, message: str = "", *, column: str = "", status_code: int = 0):
        super().__init__(message)
        self.column = column
        self.status_code = status_code


class InvalidRequestError(DomainError):
    """A caller supplied a request the API layer refuses (mapped to 422)."""
