# tests/test_api_smoke.py
import pytest
from fastapi.testclient import TestClient

from scriptbridge.main import create_app
from scriptbridge.shared.container import container


@pytest.fixture
def client(memory_repo):
    """App wired to the in-memory phrase store."""
    container.reset_singletons()
    container.phrase_repo.override(memory_repo)
    with TestClient(create_app()) as test_client:
        yield test_client
    container.phrase_repo.reset_override()
    container.reset_singletons()


def test_health_check(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_transliterate(client):
    response = client.post("/api/v1/transliterate", json={"text": "namaste", "language": "hindi"})
    assert response.status_code == 200
    assert response.json()["text"] == "नमस्ते"


def test_transliterate_requires_language(client):
    response = client.post("/api/v1/transliterate", json={"text": "namaste", "language": "  "})
    assert response.status_code == 422
    assert response.json()["status"] == "error"


def test_reverse_transliterate(client):
    response = client.post("/api/v1/transliterate/reverse", json={"text": "नमस्ते"})
    assert response.status_code == 200
    assert response.json()["text"] == "nmste"


def test_detect(client):
    response = client.post("/api/v1/detect", json={"text": "नमस्ते"})
    data = response.json()
    assert data["script"] == "Devanagari"
    assert data["language"] == "hindi"
    assert data["is_latin"] is False


def test_translate(client):
    response = client.post(
        "/api/v1/translate",
        json={"text": "thank you", "source": "english", "target": "hindi"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["text"] == "धन्यवाद"
    assert data["method"] == "phrase"
    assert data["is_translated"] is True


def test_translate_validation(client):
    response = client.post("/api/v1/translate", json={})
    assert response.status_code == 422


def test_translate_chat(client):
    response = client.post(
        "/api/v1/translate/chat",
        json={"text": "dhanyavaad", "sender": "hindi", "receiver": "english"},
    )
    data = response.json()
    assert data["sender_view"] == "धन्यवाद"
    assert data["receiver_view"] == "thank you"


def test_list_languages(client):
    response = client.get("/api/v1/languages")
    assert response.status_code == 200
    by_name = {item["name"]: item for item in response.json()}
    assert by_name["hindi"]["script"] == "Devanagari"
    assert by_name["urdu"]["rtl"] is True
    assert by_name["bhojpuri"]["uses"] == "hindi"
    assert by_name["english"]["script"] == "Latin"


def test_cache_admin(client):
    client.post("/api/v1/translate", json={"text": "thank you", "source": "english", "target": "hindi"})
    stats = client.get("/api/v1/admin/cache").json()
    assert stats["results"] == 1
    assert set(stats) == {"results", "detections", "reverse_maps"}

    assert client.delete("/api/v1/admin/cache").json() == {"status": "cleared"}
    assert client.get("/api/v1/admin/cache").json()["results"] == 0
