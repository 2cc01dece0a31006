from abc import ABC, abstractmethod
from typing import List, Optional

from src.schemas.analysis import AnalyzeToken


class SuggestAnalyzer(ABC):
    @abstractmethod
    def analyze(self, text: str, lang: Optional[str]) -> List[AnalyzeToken]:
        """Tokenize text for suggest contents."""

    @abstractmethod
    def analyze_and_reading(self, text: str, lang: Optional[str]) -> List[AnalyzeToken]:
        """Tokenize text and attach readings where the language has them."""
