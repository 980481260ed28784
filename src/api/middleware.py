from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid

from src.utils.logger import correlation_id_var, get_logger
from src.utils.metrics import HTTP_REQUEST_COUNT, HTTP_REQUEST_DURATION

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = correlation_id_var.set(correlation_id)
        start_time = time.time()

        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "correlation_id": correlation_id,
                "duration_ms": round((time.time() - start_time) * 1000, 2)
            }
        )
        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response

class PrometheusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        
        try:
            response = await call_next(request)
        except Exception:
            HTTP_REQUEST_COUNT.labels(
                method=request.method,
                endpoint=self._endpoint(request),
                status=500
            ).inc()
            raise

        endpoint = self._endpoint(request)
        HTTP_REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()
        HTTP_REQUEST_DURATION.labels(
            method=request.method,
            endpoint=endpoint
        ).observe(time.time() - start_time)

        return response

    @staticmethod
    def _endpoint(request: Request) -> str:
        # Route template when matched, raw path otherwise
        route = request.scope.get("route")
        return route.path if route else request.url.path
