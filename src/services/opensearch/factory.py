from functools import lru_cache
from typing import Optional

from opensearchpy import OpenSearch
from src.config import Settings, get_settings

from .client import OpenSearchClient


@lru_cache(maxsize=1)
def make_opensearch_client() -> OpenSearchClient:
    """Factory function to create the cached, environment-configured OpenSearch client."""
    settings = get_settings()
    return OpenSearchClient(host=settings.opensearch.host, settings=settings)


def make_opensearch_client_fresh(
    settings: Optional[Settings] = None,
    host: Optional[str] = None,
    client: Optional[OpenSearch] = None,
) -> OpenSearchClient:
    """Factory function to create a fresh (non-cached) OpenSearch client."""
    if settings is None:
        settings = get_settings()
    return OpenSearchClient(host=host or settings.opensearch.host, settings=settings, client=client)
