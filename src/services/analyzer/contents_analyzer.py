import logging
from typing import TYPE_CHECKING, List, Optional

from src.exceptions import UndefinedAnalyzerError
from src.schemas.analysis import AnalyzeToken

from .base import SuggestAnalyzer
from .naming import AnalyzerRole

if TYPE_CHECKING:
    from .analyzer_settings import AnalyzerSettings

logger = logging.getLogger(__name__)


class DefaultContentsAnalyzer(SuggestAnalyzer):
    """Runs the contents analyzers hosted in the analyzer settings index."""

    def __init__(self, analyzer_settings: "AnalyzerSettings"):
        self.analyzer_settings = analyzer_settings

    def analyze(self, text: str, lang: Optional[str]) -> List[AnalyzeToken]:
        analyzer = self.analyzer_settings.get_analyzer_name(AnalyzerRole.CONTENTS, lang)
        return self._run(analyzer, text)

    def analyze_and_reading(self, text: str, lang: Optional[str]) -> List[AnalyzeToken]:
        """
        Tokenize with the contents reading analyzer.

        Languages without a reading analyzer are served by :meth:`analyze`.
        """
        analyzer = self.analyzer_settings.get_analyzer_name(AnalyzerRole.CONTENTS_READING, lang)
        try:
            return self._run(analyzer, text)
        except UndefinedAnalyzerError:
            logger.debug(f"{analyzer} is not defined, falling back to the contents analyzer")
            return self.analyze(text, lang)

    def _run(self, analyzer: str, text: str) -> List[AnalyzeToken]:
        tokens = self.analyzer_settings.client.analyze(
            index=self.analyzer_settings.analyzer_settings_index_name,
            analyzer=analyzer,
            text=text,
            timeout=self.analyzer_settings.indices_timeout,
        )
        return [AnalyzeToken(**token) for token in tokens]
