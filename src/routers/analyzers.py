import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from opensearchpy.exceptions import NotFoundError

from src.dependencies import AnalyzerSettingsDep, ContentsAnalyzerDep
from src.exceptions import UndefinedAnalyzerError
from src.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnalyzerCheckResponse,
    AnalyzerNameResponse,
    AnalyzerNamesResponse,
)
from src.services.analyzer.languages import SUPPORTED_LANGUAGES
from src.services.analyzer.naming import AnalyzerRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyzers", tags=["Analyzers"])


@router.get("/check", response_model=AnalyzerCheckResponse)
def check_analyzers(analyzer_settings: AnalyzerSettingsDep) -> AnalyzerCheckResponse:
    """Probe every expected analyzer and list the undefined ones."""
    try:
        undefined = analyzer_settings.check_analyzer()
    except NotFoundError:
        raise HTTPException(
            status_code=404,
            detail=f"Index {analyzer_settings.analyzer_settings_index_name} not found",
        )
    checked = len(AnalyzerRole) * len(SUPPORTED_LANGUAGES)
    return AnalyzerCheckResponse(
        index=analyzer_settings.analyzer_settings_index_name,
        checked=checked,
        healthy=not undefined,
        undefined=sorted(undefined),
    )


@router.get("/names", response_model=AnalyzerNamesResponse)
def list_analyzers(analyzer_settings: AnalyzerSettingsDep) -> AnalyzerNamesResponse:
    """List analyzers configured in the analyzer index."""
    try:
        names = analyzer_settings.get_analyzer_names()
    except NotFoundError:
        raise HTTPException(
            status_code=404,
            detail=f"Index {analyzer_settings.analyzer_settings_index_name} not found",
        )
    return AnalyzerNamesResponse(index=analyzer_settings.analyzer_settings_index_name, analyzers=sorted(names))


@router.get("/name", response_model=AnalyzerNameResponse)
def resolve_analyzer_name(
    analyzer_settings: AnalyzerSettingsDep,
    role: AnalyzerRole,
    lang: Optional[str] = None,
) -> AnalyzerNameResponse:
    return AnalyzerNameResponse(role=role.value, lang=lang, name=analyzer_settings.get_analyzer_name(role, lang))


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_text(request: AnalyzeRequest, contents_analyzer: ContentsAnalyzerDep) -> AnalyzeResponse:
    """Tokenize text with the contents analyzers."""
    try:
        if request.reading:
            tokens = contents_analyzer.analyze_and_reading(request.text, request.lang)
        else:
            tokens = contents_analyzer.analyze(request.text, request.lang)
    except UndefinedAnalyzerError as e:
        logger.error(f"Analyzer missing: {e.analyzer_name}")
        raise HTTPException(status_code=404, detail=f"Analyzer {e.analyzer_name} is not defined")

    return AnalyzeResponse(lang=request.lang, reading=request.reading, tokens=tokens)

