"""
Local invocation app for the request recorder.

Serves the Lambda handler over HTTP for development:
- POST /invoke with the event as the JSON body
- Liveness and readiness probes
- Prometheus metrics
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from . import __version__
from .config import get_settings
from .logging import setup_logging, get_logger, SERVICE_NAME
from .api.router import router
from .handler import get_default_handler
from .middleware import CorrelationIdMiddleware, MetricsMiddleware
from .metrics import metrics
from .health import HealthChecker

settings = get_settings()

setup_logging(json_output=settings.LOG_JSON, level=settings.LOG_LEVEL)
logger = get_logger()

health_checker = HealthChecker()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and flip the app_up gauge around the serving window."""
    metrics.app_up.labels(service=SERVICE_NAME, version=__version__).set(1)
    logger.info("service_starting", version=__version__, env=settings.ENV)
    yield
    logger.info("service_stopping")
    metrics.app_up.labels(service=SERVICE_NAME, version=__version__).set(0)


app = FastAPI(
    title="Request Recorder",
    version=__version__,
    description="Local HTTP surface for the request recorder handler",
    lifespan=lifespan,
)

# Added last runs first: correlation ID wraps metrics
app.add_middleware(MetricsMiddleware, metrics=metrics)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(router)

app.mount("/metrics", make_asgi_app(registry=metrics.registry))


@app.get("/health")
async def health():
    """Liveness probe."""
    return health_checker.liveness()


@app.get("/health/ready")
def health_ready():
    """
    Readiness probe.

    Returns:
        200: Store is reachable
        503: Store is not reachable
    """
    result = health_checker.readiness(get_default_handler().recorder)
    status_code = 200 if result["status"] == "ready" else 503
    return JSONResponse(status_code=status_code, content=result)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "request_recorder.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        reload=True,
    )
