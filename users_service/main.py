import time
import logging
import structlog
from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .infrastructure.health import HealthReporter
from .infrastructure.store import UserStore
from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds
)
from .interfaces.http.deps import get_health_reporter
from .interfaces.http.error_handlers import register_error_handlers
from .interfaces.http.routers import users as users_router
from .interfaces.http.schemas import HealthOut, ServiceInfo

# Настройка структурированного логирования
log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}

ENDPOINTS = ["/health", "/api/users"]


def create_app(store: UserStore | None = None, health: HealthReporter | None = None) -> FastAPI:
    app = FastAPI(title="Users Service", version=settings.APP_VERSION)
    # Хранилище создаётся один раз на приложение и передаётся в handlers через Depends
    app.state.store = store if store is not None else UserStore()
    app.state.health = health if health is not None else HealthReporter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Метрики, логирование запросов, кодировка и заголовки безопасности
    @app.middleware("http")
    async def observe_request(request: Request, call_next):
        start_time = time.time()
        method = request.method

        response = await call_next(request)

        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["content-type"] = "application/json; charset=utf-8"
        if settings.SECURITY_HEADERS:
            for name, value in SECURITY_HEADERS.items():
                response.headers.setdefault(name, value)

        # Шаблон маршрута вместо сырого пути, чтобы id не раздували метки
        route = request.scope.get("route")
        endpoint = getattr(route, "path", "unmatched")

        duration = time.time() - start_time
        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

        logger.info(
            "http_request",
            method=method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(duration * 1000, 2)
        )

        return response

    @app.on_event("startup")
    def on_startup():
        logger.info(
            "Starting users service",
            name=settings.APP_NAME,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            url=f"http://localhost:{settings.PORT}",
        )

    @app.get("/", response_model=ServiceInfo)
    def index():
        return ServiceInfo(name=settings.APP_NAME, version=settings.APP_VERSION, endpoints=ENDPOINTS)

    @app.get("/health", response_model=HealthOut)
    def health(reporter: HealthReporter = Depends(get_health_reporter)):
        return HealthOut.model_validate(reporter.report())

    @app.get("/metrics")
    def metrics():
        """Prometheus metrics endpoint"""
        return metrics_endpoint()

    register_error_handlers(app)
    app.include_router(users_router.router)
    return app


app = create_app()
