from typing import Annotated

from fastapi import Depends, Request

from src.config import Settings
from src.services.analyzer.analyzer_settings import AnalyzerSettings
from src.services.analyzer.base import SuggestAnalyzer
from src.services.opensearch.client import OpenSearchClient


def get_request_settings(request: Request) -> Settings:
    """Get settings from the request state."""
    return request.app.state.settings


def get_opensearch_client(request: Request) -> OpenSearchClient:
    """Get OpenSearch client from app state."""
    return request.app.state.opensearch_client


def get_analyzer_settings(request: Request) -> AnalyzerSettings:
    """Get analyzer settings from app state."""
    return request.app.state.analyzer_settings


def get_contents_analyzer(
    analyzer_settings: Annotated[AnalyzerSettings, Depends(get_analyzer_settings)],
) -> SuggestAnalyzer:
    """Get the contents analyzer bound to the analyzer settings."""
    return analyzer_settings.contents_analyzer()


# Dependency type aliases for better type hints
SettingsDep = Annotated[Settings, Depends(get_request_settings)]
OpenSearchClientDep = Annotated[OpenSearchClient, Depends(get_opensearch_client)]
AnalyzerSettingsDep = Annotated[AnalyzerSettings, Depends(get_analyzer_settings)]
ContentsAnalyzerDep = Annotated[SuggestAnalyzer, Depends(get_contents_analyzer)]
