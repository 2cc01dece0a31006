"""Tests for the HTTP routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.routers import analyzers, ping
from src.services.analyzer.naming import expected_analyzer_names

from tests.fakes import ANALYZER_INDEX_NAME


@pytest.fixture
def client(settings, opensearch_client, analyzer_settings):
    app = FastAPI()
    app.include_router(ping.router, prefix="/api/v1")
    app.include_router(analyzers.router, prefix="/api/v1")
    app.state.settings = settings
    app.state.opensearch_client = opensearch_client
    app.state.analyzer_settings = analyzer_settings
    return TestClient(app)


def test_ping(client):
    response = client.get("/api/v1/ping")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "pong"}


def test_health_reports_missing_index(client, fake_opensearch):
    response = client.get("/api/v1/health")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "degraded"
    assert body["services"]["opensearch"]["status"] == "healthy"
    assert body["services"]["analyzer_index"]["status"] == "unhealthy"


def test_health_ok_after_init(client, analyzer_settings):
    analyzer_settings.init()

    body = client.get("/api/v1/health").json()

    assert body["status"] == "ok"
    assert body["services"]["analyzer_index"]["message"] == ANALYZER_INDEX_NAME


def test_check_lists_undefined_analyzers(client, fake_opensearch):
    fake_opensearch.indices.add_index(ANALYZER_INDEX_NAME)

    body = client.get("/api/v1/analyzers/check").json()

    assert body["index"] == ANALYZER_INDEX_NAME
    assert body["checked"] == 235
    assert body["healthy"] is False
    assert body["undefined"] == sorted(expected_analyzer_names())


def test_check_healthy(client, fake_opensearch):
    fake_opensearch.indices.add_index(ANALYZER_INDEX_NAME, analyzers=expected_analyzer_names())

    body = client.get("/api/v1/analyzers/check").json()

    assert body["healthy"] is True
    assert body["undefined"] == []


def test_check_without_index(client):
    response = client.get("/api/v1/analyzers/check")

    assert response.status_code == 404
    assert ANALYZER_INDEX_NAME in response.json()["detail"]


def test_names(client, analyzer_settings):
    analyzer_settings.init()

    body = client.get("/api/v1/analyzers/names").json()

    assert "contents_analyzer_ja" in body["analyzers"]
    assert body["analyzers"] == sorted(body["analyzers"])


def test_names_without_index(client):
    assert client.get("/api/v1/analyzers/names").status_code == 404


@pytest.mark.parametrize(
    "lang, expected",
    [("ja", "contents_analyzer_ja"), ("xx", "contents_analyzer"), (None, "contents_analyzer")],
)
def test_name_lookup(client, lang, expected):
    params = {"role": "contents_analyzer"}
    if lang is not None:
        params["lang"] = lang

    body = client.get("/api/v1/analyzers/name", params=params).json()

    assert body["name"] == expected


def test_name_lookup_rejects_unknown_role(client):
    assert client.get("/api/v1/analyzers/name", params={"role": "nope"}).status_code == 422


def test_analyze_with_reading_fallback(client, fake_opensearch):
    fake_opensearch.indices.add_index(ANALYZER_INDEX_NAME, analyzers=["contents_analyzer_en"])

    plain = client.post("/api/v1/analyzers/analyze", json={"text": "Hello World", "lang": "en"}).json()
    reading = client.post(
        "/api/v1/analyzers/analyze", json={"text": "Hello World", "lang": "en", "reading": True}
    ).json()

    assert [token["token"] for token in plain["tokens"]] == ["hello", "world"]
    assert reading["tokens"] == plain["tokens"]
    assert reading["reading"] is True


def test_analyze_missing_analyzer(client, fake_opensearch):
    fake_opensearch.indices.add_index(ANALYZER_INDEX_NAME)

    response = client.post("/api/v1/analyzers/analyze", json={"text": "text", "lang": "de"})

    assert response.status_code == 404
    assert "contents_analyzer_de" in response.json()["detail"]
