from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeToken(BaseModel):
    """A single token emitted by an engine-side analyzer."""

    # Analyzers such as the reading ones attach extra attributes
    model_config = ConfigDict(extra="allow")

    token: str
    start_offset: int = 0
    end_offset: int = 0
    type: str = "word"
    position: int = 0


class AnalyzeRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Text to analyze")
    lang: Optional[str] = Field(None, description="Language code, blank for the default analyzer")
    reading: bool = Field(False, description="Use the contents reading analyzer when available")


class AnalyzeResponse(BaseModel):
    lang: Optional[str] = None
    reading: bool
    tokens: List[AnalyzeToken]


class AnalyzerNameResponse(BaseModel):
    role: str
    lang: Optional[str] = None
    name: str


class AnalyzerCheckResponse(BaseModel):
    index: str
    checked: int
    healthy: bool
    undefined: List[str]


class AnalyzerNamesResponse(BaseModel):
    index: str
    analyzers: List[str]
