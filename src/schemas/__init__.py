from .analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnalyzeToken,
    AnalyzerCheckResponse,
    AnalyzerNameResponse,
    AnalyzerNamesResponse,
)
from .api.health import HealthResponse, ServiceStatus

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnalyzeToken",
    "AnalyzerCheckResponse",
    "AnalyzerNameResponse",
    "AnalyzerNamesResponse",
    "HealthResponse",
    "ServiceStatus",
]
