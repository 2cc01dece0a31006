from typing import Dict, Optional

from pydantic import BaseModel, Field


class ServiceStatus(BaseModel):
    status: str = Field(..., description="healthy or unhealthy")
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = Field(..., description="ok or degraded")
    version: str
    environment: str
    service_name: str
    services: Dict[str, ServiceStatus] = Field(default_factory=dict)
