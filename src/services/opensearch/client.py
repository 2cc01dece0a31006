import logging
from typing import Any, Dict, List, Optional, Union

from opensearchpy import OpenSearch
from opensearchpy.exceptions import RequestError
from src.config import Settings, get_settings
from src.exceptions import UndefinedAnalyzerError

from .index_config import UNDEFINED_ANALYZER_ERROR_TYPE, UNDEFINED_ANALYZER_REASON, build_create_body

logger = logging.getLogger(__name__)


def is_undefined_analyzer_error(error: RequestError) -> bool:
    """Check whether a 400 from the analyze API means the analyzer does not exist."""
    if error.error != UNDEFINED_ANALYZER_ERROR_TYPE:
        return False
    return UNDEFINED_ANALYZER_REASON.search(_error_reason(error)) is not None


def _error_reason(error: RequestError) -> str:
    info = error.info
    if isinstance(info, dict):
        detail = info.get("error")
        if isinstance(detail, dict):
            return str(detail.get("reason", ""))
        if detail is not None:
            return str(detail)
    return str(info or "")


class OpenSearchClient:
    """
    Client for the OpenSearch admin operations used by the suggest analyzers.
    """

    def __init__(
        self,
        host: str = "http://localhost:9200",
        settings: Optional[Settings] = None,
        client: Optional[OpenSearch] = None,
    ):
        """Initialize OpenSearch client."""
        self.host = host
        self.settings = settings or get_settings()

        # Create the low-level client
        self.client = client or OpenSearch(
            hosts=[host],
            http_compress=True,
            use_ssl=False,
            verify_certs=False,
            ssl_assert_hostname=False,
            ssl_show_warn=False,
            timeout=self.settings.opensearch.timeout,
        )
        logger.info(f"OpenSearch client initialized with host: {host}")

    # ============================================================
    # INDEX MANAGEMENT
    # ============================================================

    def index_exists(self, index: str, timeout: Optional[float] = None) -> bool:
        """Check whether an index exists."""
        return bool(self.client.indices.exists(index=index, request_timeout=timeout))

    def create_index(
        self,
        index: str,
        settings: Union[str, Dict[str, Any]],
        mappings: Union[str, Dict[str, Any], None] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Create an index from settings and, optionally, mappings.

        Args:
            index: Name of the index to create
            settings: Raw JSON text or a settings dict
            mappings: Raw JSON text or a mappings dict
            timeout: Request timeout in seconds

        Returns:
            The engine acknowledgement
        """
        response = self.client.indices.create(
            index=index,
            body=build_create_body(settings, mappings),
            request_timeout=timeout,
        )
        if response.get("acknowledged"):
            logger.info(f"Successfully created index: {index}")
        else:
            logger.warning(f"Index creation not acknowledged: {response}")
        return response

    def delete_index(self, index: str, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Delete an index."""
        response = self.client.indices.delete(index=index, request_timeout=timeout)
        logger.info(f"Deleted index: {index}")
        return response

    def get_index_settings(self, index: str, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Get the settings of a single index."""
        response = self.client.indices.get_settings(index=index, request_timeout=timeout)
        return response.get(index, {}).get("settings", {})

    # ============================================================
    # ANALYSIS
    # ============================================================

    def analyze(
        self,
        index: str,
        analyzer: str,
        text: str,
        timeout: Optional[float] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a named analyzer of an index over some text.

        Returns:
            The raw token dicts in engine order

        Raises:
            UndefinedAnalyzerError: the index has no analyzer with that name
        """
        try:
            response = self.client.indices.analyze(
                index=index,
                body={"analyzer": analyzer, "text": text},
                request_timeout=timeout,
            )
        except RequestError as e:
            if is_undefined_analyzer_error(e):
                raise UndefinedAnalyzerError(analyzer, _error_reason(e)) from e
            raise
        return response.get("tokens", [])

    # ============================================================
    # HEALTH
    # ============================================================

    def health_check(self) -> bool:
        """Check if OpenSearch is healthy and accessible."""
        try:
            health = self.client.cluster.health()
            return health["status"] in ["green", "yellow"]
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return False
