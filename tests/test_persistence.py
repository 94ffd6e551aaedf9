# tests/test_persistence.py
import json

import httpx
import pytest

from scriptbridge.adapters.persistence.filesystem_repo import FileSystemPhraseRepository, parse_rows
from scriptbridge.adapters.persistence.memory_repo import InMemoryPhraseRepository
from scriptbridge.adapters.persistence.normalization import normalize_for_lookup
from scriptbridge.adapters.persistence.rest_repo import RestPhraseRepository, escape_like, row_to_phrase
from scriptbridge.core.domain.exceptions import PhraseStoreError
from scriptbridge.core.domain.models import PhraseKind, PhraseRow
from scriptbridge.shared.config import BUNDLED_PHRASES_PATH


# --- Normalization ---

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Thank   You! ", "thank you"),
        ("THANK YOU", "thank you"),
        ("¿Cómo estás?", "cómo estás"),
        ("धन्यवाद।", "धन्यवाद"),
        ("don’t", "don't"),
        ("thank\u200byou", "thankyou"),
    ],
)
def test_normalize_for_lookup(raw, expected):
    assert normalize_for_lookup(raw) == expected


# --- In-memory ---

@pytest.mark.asyncio
async def test_memory_lookup_is_normalized(memory_repo):
    row = await memory_repo.lookup("english", "  Thank   You! ")
    assert row.value_for("hindi") == "धन्यवाद"
    assert await memory_repo.lookup("hindi", "धन्यवाद") is row


@pytest.mark.asyncio
async def test_memory_first_row_wins():
    repo = InMemoryPhraseRepository([
        PhraseRow(english="hello", translations={"french": "bonjour"}),
        PhraseRow(english="good morning", translations={"french": "bonjour"}),
    ])
    row = await repo.lookup("french", "Bonjour")
    assert row.english == "hello"
    assert len(repo) == 2
    assert repo.columns == ["english", "french"]


@pytest.mark.asyncio
async def test_memory_unknown_column(memory_repo):
    assert await memory_repo.lookup("klingon", "thank you") is None


# --- Filesystem ---

def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.mark.asyncio
async def test_filesystem_loads_phrases_and_words(tmp_path):
    path = tmp_path / "phrases.json"
    _write(path, {
        "phrases": [{"english": "thank you", "translations": {"hindi": "धन्यवाद"}}],
        "words": [{"english": "water", "translations": {"hindi": "पानी", "tamil": ""}}],
    })
    repo = FileSystemPhraseRepository(str(path))

    phrase = await repo.lookup("english", "thank you")
    word = await repo.lookup("hindi", "पानी")

    assert phrase.kind == PhraseKind.PHRASE
    assert word.kind == PhraseKind.WORD
    assert word.english == "water"
    assert word.value_for("tamil") is None
    assert await repo.health_check()


@pytest.mark.asyncio
async def test_filesystem_missing_file_is_empty(tmp_path):
    repo = FileSystemPhraseRepository(str(tmp_path / "absent.json"))
    assert await repo.lookup("english", "thank you") is None
    assert await repo.health_check() is False


@pytest.mark.asyncio
async def test_filesystem_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    repo = FileSystemPhraseRepository(str(path))

    with pytest.raises(PhraseStoreError):
        await repo.lookup("english", "thank you")
    assert await repo.health_check() is False


@pytest.mark.asyncio
async def test_filesystem_reload(tmp_path):
    path = tmp_path / "phrases.json"
    _write(path, {"phrases": []})
    repo = FileSystemPhraseRepository(str(path))
    assert await repo.lookup("english", "hello") is None

    _write(path, {"phrases": [{"english": "hello", "translations": {"spanish": "hola"}}]})
    assert await repo.reload() == 1
    row = await repo.lookup("english", "hello")
    assert row.value_for("spanish") == "hola"


def test_parse_rows_skips_bad_entries():
    rows = parse_rows({"phrases": [{"english": "yes"}, {"translations": {}}, "junk"]})
    assert [r.english for r in rows] == ["yes"]
    with pytest.raises(PhraseStoreError):
        parse_rows(["not", "an", "object"])


@pytest.mark.asyncio
async def test_bundled_phrase_file():
    repo = FileSystemPhraseRepository(BUNDLED_PHRASES_PATH)
    row = await repo.lookup("english", "thank you")
    assert row.value_for("hindi") == "धन्यवाद"
    assert row.value_for("spanish") == "gracias"


# --- REST ---

def _rest_repo(handler, **kwargs):
    return RestPhraseRepository(
        "https://store.example",
        api_key="secret",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_rest_lookup_builds_filtered_query():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 7, "english": "thank you", "hindi": "धन्यवाद", "notes": "x"}])

    repo = _rest_repo(handler)
    row = await repo.lookup("english", "thank you")

    request = seen[0]
    assert request.url.path == "/rest/v1/common_phrases"
    assert request.url.params["english"] == "ilike.thank you"
    assert request.url.params["limit"] == "1"
    assert request.headers["apikey"] == "secret"
    assert request.headers["authorization"] == "Bearer secret"
    assert row.translations == {"hindi": "धन्यवाद"}
    assert row.kind == PhraseKind.PHRASE


@pytest.mark.asyncio
async def test_rest_sends_the_normalized_key():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["english"])
        return httpx.Response(200, json=[])

    repo = _rest_repo(handler)
    assert await repo.lookup("english", "  Thank   You! ") is None
    assert seen == ["ilike.thank you"]


@pytest.mark.asyncio
async def test_rest_escapes_wildcards():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["english"])
        return httpx.Response(200, json=[])

    repo = _rest_repo(handler)
    await repo.lookup("english", "100% *sure_")
    assert seen == [r"ilike.100\% _sure\_"]


@pytest.mark.asyncio
async def test_rest_punctuation_only_query_is_not_sent():
    calls = []
    repo = _rest_repo(lambda request: calls.append(request) or httpx.Response(200, json=[]))
    assert await repo.lookup("english", " ?! ") is None
    assert calls == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("plain", "plain"),
        ("50%", r"50\%"),
        ("a_b", r"a\_b"),
        (r"back\slash", r"back\\slash"),
        ("star*", "star_"),
    ],
)
def test_escape_like(raw, expected):
    assert escape_like(raw) == expected


@pytest.mark.asyncio
async def test_rest_queries_tables_in_order():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/dictionary"):
            assert request.url.params["hindi"] == "ilike.पानी"
            return httpx.Response(200, json=[{"english": "water", "hindi": "पानी"}])
        return httpx.Response(200, json=[])

    repo = _rest_repo(handler, tables=("common_phrases", "dictionary"))
    row = await repo.lookup("hindi", "पानी")
    assert row.english == "water"
    assert row.kind == PhraseKind.WORD


@pytest.mark.asyncio
async def test_rest_status_error():
    repo = _rest_repo(lambda request: httpx.Response(500, json={"message": "boom"}))
    with pytest.raises(PhraseStoreError) as exc_info:
        await repo.lookup("english", "thank you")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_rest_transport_errors_are_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    repo = _rest_repo(handler)
    with pytest.raises(PhraseStoreError):
        await repo.lookup("english", "thank you")
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_rest_skips_columns_without_phrase_data():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    repo = _rest_repo(handler)
    assert await repo.lookup("klingon", "qapla") is None
    assert await repo.lookup("english", "   ") is None


@pytest.mark.asyncio
async def test_rest_health_check():
    assert await _rest_repo(lambda request: httpx.Response(200, json={})).health_check()
    assert not await _rest_repo(lambda request: httpx.Response(503)).health_check()


def test_row_to_phrase_honours_explicit_kind():
    row = row_to_phrase({"english": "go", "kind": "word", "spanish": "ir"}, "common_phrases")
    assert row.kind == PhraseKind.WORD
    assert row.translations == {"spanish": "ir"}


def test_rest_requires_base_url():
    with pytest.raises(ValueError):
        RestPhraseRepository("")
