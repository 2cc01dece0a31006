"""Fixtures shared by the suggest analyzer tests."""

import pytest

from src.config import Settings, SuggestSettings
from src.services.analyzer.analyzer_settings import AnalyzerSettings
from src.services.opensearch.client import OpenSearchClient

from tests.fakes import SETTINGS_INDEX_NAME, FakeOpenSearch


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of the settings under test."""
    for name in ("FESS_DICTIONARY_PATH", "SUGGEST__DICTIONARY_PATH", "SUGGEST__ANALYZER_CHECK_WORKERS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(suggest=SuggestSettings(settings_index_name=SETTINGS_INDEX_NAME, indices_timeout=5.0))


@pytest.fixture
def fake_opensearch() -> FakeOpenSearch:
    return FakeOpenSearch()


@pytest.fixture
def opensearch_client(settings, fake_opensearch) -> OpenSearchClient:
    return OpenSearchClient(host="http://opensearch.test:9200", settings=settings, client=fake_opensearch)


@pytest.fixture
def analyzer_settings(opensearch_client, settings) -> AnalyzerSettings:
    return AnalyzerSettings(client=opensearch_client, settings=settings)
