"""Tests for application startup, shutdown and logging setup."""

import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from src import main
from src.config import Settings
from src.services.opensearch import client as client_module
from src.services.opensearch.factory import make_opensearch_client

from tests.fakes import FakeIndices, FakeOpenSearch

ANALYZER_INDEX_NAME = "fess_suggest_analyzer"


@pytest.fixture
def engines(monkeypatch):
    """Every OpenSearch built by the app is a fake sharing one set of indices."""
    monkeypatch.delenv("SUGGEST__SETTINGS_INDEX_NAME", raising=False)
    indices = FakeIndices()
    built = []

    def build(**kwargs):
        engine = FakeOpenSearch()
        engine.indices = indices
        built.append(engine)
        return engine

    monkeypatch.setattr(client_module, "OpenSearch", build)
    make_opensearch_client.cache_clear()
    yield built
    make_opensearch_client.cache_clear()


class TestLifespan:
    def test_startup_provisions_analyzer_index(self, engines):
        with TestClient(main.app) as client:
            body = client.get("/api/v1/health").json()

        indices = engines[0].indices
        assert len(indices.create_calls) == 1
        assert indices.create_calls[0]["index"] == ANALYZER_INDEX_NAME
        assert body["status"] == "ok"

    def test_shutdown_closes_client(self, engines):
        with TestClient(main.app):
            pass

        assert len(engines) == 1
        assert engines[0].closed is True

    def test_restart_builds_fresh_client(self, engines):
        with TestClient(main.app):
            pass
        with TestClient(main.app) as client:
            body = client.get("/api/v1/health").json()

        assert len(engines) == 2
        assert engines[0] is not engines[1]
        assert engines[1].closed is True
        # second startup sees the index and does not create it again
        assert len(engines[1].indices.create_calls) == 1
        assert body["services"]["opensearch"]["status"] == "healthy"

    def test_unreachable_engine_skips_provisioning(self, engines, monkeypatch):
        def build_red(**kwargs):
            engine = FakeOpenSearch()
            engine.cluster.status = "red"
            engines.append(engine)
            return engine

        monkeypatch.setattr(client_module, "OpenSearch", build_red)

        with TestClient(main.app):
            pass

        assert engines[0].indices.create_calls == []


class TestConfigureLogging:
    def test_root_level_follows_settings(self):
        root = logging.getLogger()
        previous = root.level
        try:
            main.configure_logging(Settings(log_level="warning"))
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")
