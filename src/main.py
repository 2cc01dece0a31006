import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from src.config import Settings, get_settings
from src.routers import analyzers, ping
from src.services.analyzer.factory import make_analyzer_settings
from src.services.opensearch.factory import make_opensearch_client


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger().setLevel(settings.log_level)


# Setup logging
configure_logging(get_settings())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the OpenSearch client and provision the analyzer index."""
    logger.info("Starting suggest analyzer API...")

    settings = get_settings()
    app.state.settings = settings

    app.state.opensearch_client = make_opensearch_client()
    app.state.analyzer_settings = make_analyzer_settings(client=app.state.opensearch_client, settings=settings)

    if app.state.opensearch_client.health_check():
        logger.info("OpenSearch connected successfully")

        # Template load failures abort startup
        app.state.analyzer_settings.init()
        logger.info(f"Analyzer index ready: {app.state.analyzer_settings.analyzer_settings_index_name}")
    else:
        logger.warning("OpenSearch connection failed, analyzer index not provisioned")

    logger.info("API ready")
    yield

    app.state.opensearch_client.client.close()
    # Next startup builds a new client instead of reusing the closed one
    make_opensearch_client.cache_clear()
    logger.info("API shutdown complete")


app = FastAPI(
    title="Suggest Analyzer API",
    description="Provisions and validates the language analyzers used by suggest",
    version=os.getenv("APP_VERSION", "0.1.0"),
    lifespan=lifespan,
)

# Include routers
app.include_router(ping.router, prefix="/api/v1")
app.include_router(analyzers.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, port=8000, host="0.0.0.0")
