# app/core/errors.py
# Error types raised by the API and the handlers that turn them into JSON bodies.
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    """HTTPException rendered as {"message": ...} instead of {"detail": ...}."""


class Unauthorized(ApiError):
    def __init__(self, message: str = "unauthorized access"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class Forbidden(ApiError):
    def __init__(self, message: str = "forbidden access"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


class BadRequest(ApiError):
    def __init__(self, message: str = "invalid id"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class PaymentGatewayError(Exception):
    """The payment processor rejected a call or could not be reached."""


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("Database call failed on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": "internal server error"})


async def payment_gateway_error_handler(request: Request, exc: PaymentGatewayError) -> JSONResponse:
    logger.error("Payment gateway call failed: %s", exc, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"message": "payment gateway error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)
    app.add_exception_handler(PaymentGatewayError, payment_gateway_error_handler)
