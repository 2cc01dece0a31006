from typing import Optional

from src.config import Settings, get_settings
from src.services.opensearch.client import OpenSearchClient
from src.services.opensearch.factory import make_opensearch_client

from .analyzer_settings import AnalyzerSettings


def make_analyzer_settings(
    client: Optional[OpenSearchClient] = None,
    settings: Optional[Settings] = None,
    settings_index_name: Optional[str] = None,
) -> AnalyzerSettings:
    """Factory function to create analyzer settings bound to an OpenSearch client."""
    if settings is None:
        settings = client.settings if client is not None else get_settings()
    if client is None:
        client = make_opensearch_client()
    return AnalyzerSettings(client=client, settings=settings, settings_index_name=settings_index_name)
