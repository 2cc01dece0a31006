from fastapi import APIRouter

from src.dependencies import AnalyzerSettingsDep, OpenSearchClientDep, SettingsDep
from src.schemas.api.health import HealthResponse, ServiceStatus

router = APIRouter(tags=["Health"])


@router.get("/ping")
async def ping():
    return {"status": "ok", "message": "pong"}


@router.get("/health", response_model=HealthResponse)
def health_check(
    settings: SettingsDep,
    opensearch_client: OpenSearchClientDep,
    analyzer_settings: AnalyzerSettingsDep,
) -> HealthResponse:
    """Report service status and whether the analyzer index is reachable."""
    services = {}

    if opensearch_client.health_check():
        services["opensearch"] = ServiceStatus(status="healthy", message="Cluster is green or yellow")
    else:
        services["opensearch"] = ServiceStatus(status="unhealthy", message="Cluster is not reachable")

    index_name = analyzer_settings.analyzer_settings_index_name
    if services["opensearch"].status == "healthy" and opensearch_client.index_exists(
        index_name, timeout=analyzer_settings.indices_timeout
    ):
        services["analyzer_index"] = ServiceStatus(status="healthy", message=index_name)
    else:
        services["analyzer_index"] = ServiceStatus(status="unhealthy", message=f"{index_name} is missing")

    overall = "ok" if all(s.status == "healthy" for s in services.values()) else "degraded"
    return HealthResponse(
        status=overall,
        version=settings.app_version,
        environment=settings.environment,
        service_name=settings.service_name,
        services=services,
    )
