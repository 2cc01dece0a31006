from typing import Optional, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = (
    "ar", "bg", "bn", "ca", "cs", "da", "de", "el", "en", "es", "et",
    "fa", "fi", "fr", "gu", "he", "hi", "hr", "hu", "id", "it", "ja",
    "ko", "lt", "lv", "mk", "ml", "nl", "no", "pa", "pl", "pt", "ro",
    "ru", "si", "sq", "sv", "ta", "te", "th", "tl", "tr", "uk", "ur",
    "vi", "zh-cn", "zh-tw",
)

_SUPPORTED_LANGUAGE_SET = frozenset(SUPPORTED_LANGUAGES)


def is_supported_language(lang: Optional[str]) -> bool:
    """Return True if ``lang`` has its own set of analyzers."""
    return bool(lang) and not lang.isspace() and lang in _SUPPORTED_LANGUAGE_SET
