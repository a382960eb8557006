"""
Integration tests for the FastAPI application.

These tests use TestClient against the real app with the identity provider
and inference client stubbed (see integration/conftest.py).
"""

from entry_analysis.analysis.scoring import BREATHING_SUGGESTION, REFLECTION_SUGGESTION
from entry_analysis.api.dependencies import get_token_verifier
from entry_analysis.auth.base_verifier import BaseTokenVerifier, CallerIdentity
from entry_analysis.inference.exceptions import InferenceRemoteError, InferenceTransportError
from entry_analysis.main import app


def test_process_entry_success(api_client, auth_headers, stub_inference_client):
    response = api_client.post(
        "/processEntry",
        json={"text": "I am furious and overwhelmed today"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["uid"] == "user-123"

    ai = data["ai"]
    assert set(ai) == {"sentiment", "emotion", "emotionScore", "summary", "stressScore", "suggestions"}
    assert ai["sentiment"] < 0
    assert ai["emotion"] == "anger"
    assert ai["summary"] == "The writer felt furious and overwhelmed after a long day at work."
    # "anger" is not in the bonus set
    assert ai["stressScore"] == 6
    assert len(stub_inference_client.calls) == 3


def test_angry_entry_gets_breathing_suggestion(api_client, auth_headers, stub_inference_client, test_settings):
    stub_inference_client.responses[test_settings.EMOTION_MODEL] = [[{"label": "angry", "score": 0.93}]]

    response = api_client.post(
        "/processEntry",
        json={"text": "I am furious and overwhelmed today"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    ai = response.json()["ai"]
    assert ai["emotion"] == "angry"
    assert ai["stressScore"] >= 7
    assert BREATHING_SUGGESTION in ai["suggestions"]
    assert REFLECTION_SUGGESTION not in ai["suggestions"]


def test_audio_url_is_accepted(api_client, auth_headers):
    response = api_client.post(
        "/processEntry",
        json={"text": "Quiet evening.", "audioUrl": "gs://bucket/entry.m4a"},
        headers=auth_headers,
    )
    assert response.status_code == 200


def test_missing_authorization_header(api_client, stub_inference_client):
    response = api_client.post("/processEntry", json={"text": "hello"})

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "missing_id_token"}
    assert stub_inference_client.calls == []


def test_non_bearer_authorization(api_client, stub_inference_client):
    response = api_client.post(
        "/processEntry",
        json={"text": "hello"},
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "missing_id_token"
    assert stub_inference_client.calls == []


def test_rejected_token(api_client, stub_inference_client):
    response = api_client.post(
        "/processEntry",
        json={"text": "hello"},
        headers={"Authorization": "Bearer forged"},
    )

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "invalid_id_token"}
    assert stub_inference_client.calls == []


class UnavailableProviderVerifier(BaseTokenVerifier):
    async def verify(self, token: str) -> CallerIdentity:
        raise ConnectionError("certificate fetch failed")


def test_identity_provider_outage(api_client, auth_headers, stub_inference_client):
    app.dependency_overrides[get_token_verifier] = lambda: UnavailableProviderVerifier()

    response = api_client.post("/processEntry", json={"text": "hello"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "certificate fetch failed"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["X-Request-ID"]
    assert stub_inference_client.calls == []


def test_auth_checked_before_body(api_client, stub_inference_client):
    response = api_client.post(
        "/processEntry",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 401


def test_missing_text(api_client, auth_headers, stub_inference_client):
    response = api_client.post("/processEntry", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "missing_text"}
    assert stub_inference_client.calls == []


def test_empty_text(api_client, auth_headers):
    response = api_client.post("/processEntry", json={"text": ""}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "missing_text"


def test_empty_body(api_client, auth_headers):
    response = api_client.post("/processEntry", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "missing_text"


def test_invalid_json_body(api_client, auth_headers):
    response = api_client.post(
        "/processEntry",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "invalid_request"}


def test_non_object_body(api_client, auth_headers):
    response = api_client.post("/processEntry", json=["text"], headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_request"


def test_summary_failure_falls_back(api_client, auth_headers, stub_inference_client, test_settings):
    stub_inference_client.responses[test_settings.SUMMARY_MODEL] = InferenceTransportError(
        "Network error", model=test_settings.SUMMARY_MODEL
    )
    text = "z" * 250

    response = api_client.post("/processEntry", json={"text": text}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["ai"]["summary"] == "z" * 200 + "..."


def test_sentiment_failure_aborts_request(api_client, auth_headers, stub_inference_client, test_settings):
    stub_inference_client.responses[test_settings.SENTIMENT_MODEL] = InferenceRemoteError(
        "Inference error from test/sentiment (503): {\"error\": \"loading\"}",
        model=test_settings.SENTIMENT_MODEL,
        status_code=503,
    )

    response = api_client.post("/processEntry", json={"text": "hello"}, headers=auth_headers)

    assert response.status_code == 500
    data = response.json()
    assert data["ok"] is False
    assert "test/sentiment" in data["error"]
    # Emotion and summary never called
    assert len(stub_inference_client.calls) == 1


def test_unexpected_error_returns_message(api_client, auth_headers, stub_inference_client, test_settings):
    stub_inference_client.responses[test_settings.EMOTION_MODEL] = RuntimeError("boom")

    response = api_client.post("/processEntry", json={"text": "hello"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "boom"}


def test_preflight(api_client):
    response = api_client.options("/processEntry")

    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "POST"
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"


def test_any_origin_header_on_errors(api_client):
    response = api_client.post("/processEntry", json={"text": "hello"})
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_request_id_header(api_client, auth_headers):
    response = api_client.post("/processEntry", json={"text": "hello"}, headers=auth_headers)
    assert response.headers["X-Request-ID"]


def test_health_endpoint(api_client, test_settings):
    response = api_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["credential_configured"] is True
    assert data["models"] == {
        "sentiment": test_settings.SENTIMENT_MODEL,
        "emotion": test_settings.EMOTION_MODEL,
        "summary": test_settings.SUMMARY_MODEL,
    }
    assert "hf_test_key" not in response.text


def test_root_endpoint(api_client):
    response = api_client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["docs"] == "/docs"
    assert data["health"] == "/health"
