from enum import Enum
from typing import Iterable, Iterator, Optional

from .languages import SUPPORTED_LANGUAGES, is_supported_language


class AnalyzerRole(str, Enum):
    """What an analyzer is used for; the value is its base name."""

    READING = "reading_analyzer"
    READING_TERM = "reading_term_analyzer"
    NORMALIZE = "normalize_analyzer"
    CONTENTS = "contents_analyzer"
    CONTENTS_READING = "contents_reading_analyzer"

    @property
    def base_name(self) -> str:
        return self.value


def analyzer_name(role: AnalyzerRole, lang: Optional[str] = None) -> str:
    """
    Name of the analyzer serving ``role`` for ``lang``.

    Supported languages get ``<base>_<lang>``. Blank and unsupported languages
    fall back to the role's default analyzer.
    """
    role = AnalyzerRole(role)
    if is_supported_language(lang):
        return f"{role.base_name}_{lang}"
    return role.base_name


def expected_analyzer_names(languages: Iterable[str] = SUPPORTED_LANGUAGES) -> Iterator[str]:
    """Yield every per-language analyzer name, language by language."""
    for lang in languages:
        for role in AnalyzerRole:
            yield analyzer_name(role, lang)
