import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional, Set

from src.config import Settings, get_settings
from src.exceptions import ConfigurationError, SuggestSettingsException, UndefinedAnalyzerError
from src.services.opensearch.client import OpenSearchClient
from src.services.opensearch.index_config import (
    DICTIONARY_PATH_PLACEHOLDER,
    PROBE_TEXT,
    analyzer_index_name,
)

from .contents_analyzer import DefaultContentsAnalyzer
from .languages import SUPPORTED_LANGUAGES
from .naming import AnalyzerRole, analyzer_name, expected_analyzer_names

logger = logging.getLogger(__name__)


class AnalyzerSettings:
    """
    Owns the index that hosts the suggest analyzers.

    Provisions it from the packaged templates, names the analyzers it holds,
    and checks which of the expected analyzers the engine actually knows.
    """

    def __init__(
        self,
        client: OpenSearchClient,
        settings: Optional[Settings] = None,
        settings_index_name: Optional[str] = None,
    ):
        self.client = client
        self.settings = settings or get_settings()
        self.suggest_settings = self.settings.suggest

        index_name = settings_index_name or self.suggest_settings.settings_index_name
        if not index_name or not index_name.strip():
            raise ConfigurationError("Suggest settings index name must not be blank")
        self.analyzer_settings_index_name = analyzer_index_name(index_name)

    @property
    def indices_timeout(self) -> float:
        return self.suggest_settings.indices_timeout

    # ============================================================
    # PROVISIONING
    # ============================================================

    def init(self) -> None:
        """Create the analyzer settings index unless it already exists."""
        if self.client.index_exists(self.analyzer_settings_index_name, timeout=self.indices_timeout):
            logger.debug(f"Analyzer index {self.analyzer_settings_index_name} already exists")
            return

        logger.info(f"Creating analyzer index: {self.analyzer_settings_index_name}")
        self.create_analyzer_settings(self.load_index_settings(), self.load_index_mapping())

    def update_analyzer(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        """Push analyzer settings to the engine without reloading the templates."""
        return self.client.create_index(
            self.analyzer_settings_index_name,
            settings=settings,
            timeout=self.indices_timeout,
        )

    def delete_analyzer_settings(self) -> Dict[str, Any]:
        return self.client.delete_index(self.analyzer_settings_index_name, timeout=self.indices_timeout)

    def create_analyzer_settings(self, settings: str, mappings: str) -> Dict[str, Any]:
        return self.client.create_index(
            self.analyzer_settings_index_name,
            settings=settings,
            mappings=mappings,
            timeout=self.indices_timeout,
        )

    def load_index_settings(self) -> str:
        """Read the analyzer settings template with the dictionary path filled in."""
        template = self._read_resource(self.suggest_settings.settings_resource)
        return template.replace(DICTIONARY_PATH_PLACEHOLDER, self.suggest_settings.dictionary_path)

    def load_index_mapping(self) -> str:
        return self._read_resource(self.suggest_settings.mapping_resource)

    def _read_resource(self, name: str) -> str:
        path = Path(self.suggest_settings.resources_dir) / name
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SuggestSettingsException(f"Failed to load {name} from {path.parent}") from e

    # ============================================================
    # NAMING
    # ============================================================

    def get_analyzer_name(self, role: AnalyzerRole, lang: Optional[str] = None) -> str:
        return analyzer_name(role, lang)

    def contents_analyzer(self) -> DefaultContentsAnalyzer:
        return DefaultContentsAnalyzer(self)

    # ============================================================
    # VALIDATION
    # ============================================================

    def check_analyzer(self) -> Set[str]:
        """
        Probe every expected analyzer and return the names the engine lacks.

        Errors other than an undefined analyzer are raised.
        """
        names = list(expected_analyzer_names(SUPPORTED_LANGUAGES))
        workers = self.suggest_settings.analyzer_check_workers

        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                defined = list(executor.map(self._is_defined, names))
        else:
            defined = [self._is_defined(name) for name in names]

        undefined_analyzers = {name for name, ok in zip(names, defined) if not ok}
        if undefined_analyzers:
            logger.warning(
                f"{len(undefined_analyzers)} of {len(names)} analyzers are undefined "
                f"in {self.analyzer_settings_index_name}"
            )
        else:
            logger.info(f"All {len(names)} analyzers are defined in {self.analyzer_settings_index_name}")
        return undefined_analyzers

    def _is_defined(self, name: str) -> bool:
        try:
            self.client.analyze(
                index=self.analyzer_settings_index_name,
                analyzer=name,
                text=PROBE_TEXT,
                timeout=self.indices_timeout,
            )
        except UndefinedAnalyzerError:
            return False
        return True

    def get_analyzer_names(self) -> Set[str]:
        """Names of the analyzers configured in the live analyzer index."""
        index_settings = self.client.get_index_settings(self.analyzer_settings_index_name, timeout=self.indices_timeout)
        analysis = index_settings.get("index", {}).get("analysis", {})
        return set(analysis.get("analyzer", {}).keys())
