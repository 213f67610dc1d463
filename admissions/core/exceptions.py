"""
Exceptions

Business exceptions and the global handlers that turn them into JSON
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .response import error_response


class AppException(Exception):
    """Base application exception"""
    
    def __init__(
        self,
        message: str = "Internal server error",
        code: int = 500,
        data: dict = None
    ):
        self.message = message
        self.code = code
        self.data = data
        super().__init__(self.message)


class UnauthorizedException(AppException):
    """No caller identity"""
    
    def __init__(self, message: str = "Unauthorized user"):
        super().__init__(message=message, code=401)


class ForbiddenException(AppException):
    """Caller lacks rights to the resource or action"""
    
    def __init__(self, message: str = "You do not have access to this resource"):
        super().__init__(message=message, code=403)


class NotFoundException(AppException):
    """Resource does not exist"""
    
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message=message, code=404)


class BadRequestException(AppException):
    """Malformed or rejected request"""
    
    def __init__(self, message: str = "Bad request"):
        super().__init__(message=message, code=400)


class InternalException(AppException):
    """Unexpected persistence or lookup failure"""
    
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, code=500)


def format_validation_error(error: dict) -> str:
    """Render one pydantic error as ``location[param](Value=v): message``"""
    loc = list(error.get("loc", ()))
    location = str(loc[0]) if loc else "unknown"
    param = ".".join(str(part) for part in loc[1:])
    return f"{location}[{param}](Value={error.get('input')}): {error['msg']}"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException"""
    if exc.code >= 500:
        logger.error(f"AppException: {exc.message} | Path: {request.url.path}")
    else:
        logger.warning(f"AppException: {exc.message} | Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.code,
        content=error_response(message=exc.message, code=exc.code, data=exc.data)
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTPException (unknown routes, wrong methods, ...)"""
    logger.warning(f"HTTPException: {exc.detail} | Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message=str(exc.detail), code=exc.status_code)
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with a 400 and one line per error"""
    messages = [format_validation_error(error) for error in exc.errors()]
    logger.warning(f"ValidationError: {'; '.join(messages)} | Path: {request.url.path}")
    
    return JSONResponse(
        status_code=400,
        content=error_response(message=messages, code=400)
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler"""
    logger.exception(f"Unhandled Exception: {exc} | Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response(message="Internal server error", code=500)
    )
