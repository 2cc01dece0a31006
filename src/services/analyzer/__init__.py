from .analyzer_settings import AnalyzerSettings
from .base import SuggestAnalyzer
from .contents_analyzer import DefaultContentsAnalyzer
from .factory import make_analyzer_settings
from .languages import SUPPORTED_LANGUAGES, is_supported_language
from .naming import AnalyzerRole, analyzer_name, expected_analyzer_names

__all__ = [
    "AnalyzerRole",
    "AnalyzerSettings",
    "DefaultContentsAnalyzer",
    "SUPPORTED_LANGUAGES",
    "SuggestAnalyzer",
    "analyzer_name",
    "expected_analyzer_names",
    "is_supported_language",
    "make_analyzer_settings",
]
