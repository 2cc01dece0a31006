from .client import OpenSearchClient
from .factory import make_opensearch_client, make_opensearch_client_fresh

__all__ = ["OpenSearchClient", "make_opensearch_client", "make_opensearch_client_fresh"]
