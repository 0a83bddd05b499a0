from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi import HTTPException


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class ValidationError(APIException):
    """Missing fields, unknown references and booking conflicts."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class ParseError(APIException):
    """Request body that is not usable JSON for the resource."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFoundError(APIException):
    def __init__(self, detail: str = "Not Found"):
        super().__init__(status_code=404, detail=detail)


def create_error_response(error_message: str) -> dict:
    """Create the error body every failed request returns"""
    return {"error": error_message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPExceptions, including the router's own 404/405, as {"error": ...}"""
    # An unsupported method on a known path is just another unmatched route
    if exc.status_code in (404, 405) and not isinstance(exc, APIException):
        return JSONResponse(status_code=404, content=create_error_response("Not Found"))

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail)),
    )
