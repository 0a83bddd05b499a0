import time
import logging
from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import Settings
from .exceptions import create_error_response

logger = logging.getLogger(__name__)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Attach the CORS headers to every response and answer every OPTIONS with 204.

    Starlette's CORSMiddleware only reacts to requests that carry an Origin
    header; clients here expect the headers unconditionally.
    """

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.headers = settings.cors_headers

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        # Log request (guard against missing client info)
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Request: {request.method} {request.url.path} from {client_host}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(f"Response: {response.status_code} in {duration:.3f}s")

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.debug = settings.DEBUG

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"Unhandled error: {str(e)}", exc_info=True)

            if self.debug:
                return JSONResponse(
                    status_code=500,
                    content=create_error_response(f"Internal Server Error: {str(e)}")
                )
            else:
                return JSONResponse(
                    status_code=500,
                    content=create_error_response("Internal Server Error")
                )
