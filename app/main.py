"""FastAPI 애플리케이션 진입점.

`create_app()`이 설정값으로 타임라인 서버를 조립하고, 모듈 수준 `app`은
uvicorn 실행용 인스턴스입니다.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.api import timeline
from app.api.dependencies import require_service_secret
from app.core.config import Settings, get_settings
from app.core.logger import get_logger
from app.core.logging_config import configure_logging

configure_logging()
logger = get_logger(__name__)

APP_TITLE = "Itinerary Timeline Server"
DOCS_MODES = frozenset({"disabled", "secret", "public"})
DEFAULT_ERROR_MESSAGE = "내부 서버 오류가 발생했습니다."

# 경로별 내부 오류 응답 메시지
ERROR_MESSAGES = {
    "/api/v1/timeline": "일정 텍스트를 타임라인으로 변환하지 못했습니다.",
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    "Cache-Control": "no-store",
}


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def resolve_docs_mode(mode: str) -> str:
    """DOCS_MODE 값을 정규화합니다. 알 수 없는 값은 disabled로 취급합니다."""
    normalized = (mode or "").strip().lower()
    if normalized in DOCS_MODES:
        return normalized
    logger.warning("유효하지 않은 DOCS_MODE 값입니다. disabled로 대체합니다: %s", mode)
    return "disabled"


def security_headers_for(settings: Settings, scheme: str) -> dict[str, str]:
    """응답에 붙일 보안 헤더를 반환합니다. HSTS는 https 요청에만 붙입니다."""
    if not settings.SECURITY_HEADERS_ENABLED:
        return {}

    headers = dict(SECURITY_HEADERS)
    if settings.ENABLE_HSTS and scheme == "https":
        headers["Strict-Transport-Security"] = f"max-age={settings.HSTS_MAX_AGE_SECONDS}"
    return headers


def _add_network_middleware(app_: FastAPI, settings: Settings) -> None:
    if settings.PROXY_HEADERS_ENABLED:
        proxy_hosts = _split_csv(settings.PROXY_TRUSTED_HOSTS) or ["127.0.0.1"]
        app_.add_middleware(ProxyHeadersMiddleware, trusted_hosts=proxy_hosts)

    allowed_hosts = _split_csv(settings.TRUSTED_HOSTS)
    if allowed_hosts:
        app_.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_credentials = settings.CORS_ALLOW_CREDENTIALS and "*" not in origins
    if settings.CORS_ALLOW_CREDENTIALS and not allow_credentials:
        logger.warning("CORS_ALLOW_ORIGINS에 '*'가 있어 allow_credentials를 false로 강제합니다.")

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=_split_csv(settings.CORS_ALLOW_METHODS) or ["POST"],
        allow_headers=_split_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type", "x-service-secret"],
    )


def _add_secret_docs(app_: FastAPI) -> None:
    guard = [Depends(require_service_secret)]

    @app_.get("/openapi.json", include_in_schema=False, dependencies=guard)
    def openapi_json() -> JSONResponse:
        return JSONResponse(app_.openapi())

    @app_.get("/docs", include_in_schema=False, dependencies=guard)
    def swagger_ui() -> Response:
        return get_swagger_ui_html(openapi_url="/openapi.json", title=f"{app_.title} - Swagger UI")

    @app_.get("/redoc", include_in_schema=False, dependencies=guard)
    def redoc_ui() -> Response:
        return get_redoc_html(openapi_url="/openapi.json", title=f"{app_.title} - ReDoc")


def create_app(settings: Settings | None = None) -> FastAPI:
    """설정값으로 타임라인 서버 애플리케이션을 생성합니다.

    Args:
        settings: 애플리케이션 설정. 없으면 환경 설정값을 사용합니다.

    Returns:
        라우터, 미들웨어, 예외 처리기가 등록된 FastAPI 인스턴스.
    """
    resolved = settings or get_settings()
    docs_mode = resolve_docs_mode(resolved.DOCS_MODE)
    public_docs = docs_mode == "public"

    app_ = FastAPI(
        title=APP_TITLE,
        docs_url="/docs" if public_docs else None,
        redoc_url="/redoc" if public_docs else None,
        openapi_url="/openapi.json" if public_docs else None,
    )
    _add_network_middleware(app_, resolved)
    app_.include_router(timeline.router)

    @app_.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        for name, value in security_headers_for(resolved, request.url.scheme).items():
            response.headers.setdefault(name, value)
        return response

    @app_.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        if resolved.EXPOSE_INTERNAL_ERRORS:
            message = str(exc)
        else:
            message = ERROR_MESSAGES.get(request.url.path, DEFAULT_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content={"detail": message})

    if docs_mode == "secret":
        _add_secret_docs(app_)

    @app_.get("/")
    def health_check() -> dict:
        """헬스 체크 엔드포인트."""
        return {"status": "ok", "message": f"{APP_TITLE} is running"}

    logger.info("Application created: env=%s, docs=%s", resolved.APP_ENV, docs_mode)
    return app_


app = create_app()
