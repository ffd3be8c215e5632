# errors.py
"""
Application error taxonomy and their HTTP mapping.

Services raise these; the handlers registered by ``register_error_handlers``
turn them into JSON responses. Each error carries the JSON key its clients
expect ("erro" for most routes, "error" for the bearer-token gate).
"""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
     """Base class for errors that map onto an HTTP response."""
     status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
     key: str = "erro"
     default_message: str = "Erro interno"

     def __init__(self, message: Any = None):
          self.message = message if message is not None else self.default_message
          super().__init__(self.message)

     def body(self) -> dict:
          return {self.key: self.message}


class ValidationFailed(ApiError):
     status_code = status.HTTP_400_BAD_REQUEST
     default_message = "Dados inválidos"


class AuthError(ApiError):
     status_code = status.HTTP_401_UNAUTHORIZED
     key = "error"
     default_message = "Token inválido"


class MissingToken(AuthError):
     default_message = "Token não informado"


class InvalidToken(AuthError):
     default_message = "Token inválido"


class AdminNotFound(ApiError):
     status_code = status.HTTP_401_UNAUTHORIZED
     default_message = "Admin não encontrado"


class InvalidCredentials(ApiError):
     status_code = status.HTTP_400_BAD_REQUEST
     default_message = "Login ou senha incorretos"


class NotFound(ApiError):
     status_code = status.HTTP_404_NOT_FOUND
     default_message = "Registro não encontrado"


class Conflict(ApiError):
     status_code = status.HTTP_400_BAD_REQUEST
     default_message = "Registro duplicado"


class PersistenceError(ApiError):
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     default_message = "Erro ao acessar o banco de dados"


def format_validation_errors(errors: list) -> list:
     """Flatten pydantic error dicts into the field-violation list returned to clients."""
     violations = []
     for error in errors:
          location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
          violations.append({
               "campo": ".".join(location),
               "mensagem": error.get("msg"),
               "tipo": error.get("type"),
          })
     return violations


def _persistence_body(exc: Exception) -> dict:
     body = PersistenceError().body()
     if get_settings().EXPOSE_ERROR_DETAILS:
          body["detalhes"] = str(exc)
     return body


def register_error_handlers(app: FastAPI) -> None:
     """Attach the JSON error handlers to the application."""

     @app.exception_handler(ApiError)
     async def api_error_handler(request: Request, exc: ApiError):
          return JSONResponse(status_code=exc.status_code, content=exc.body())

     @app.exception_handler(StarletteHTTPException)
     async def http_error_handler(request: Request, exc: StarletteHTTPException):
          # Unmatched paths surface here as plain 404s
          message = "Route not found" if exc.status_code == 404 else exc.detail
          return JSONResponse(status_code=exc.status_code, content={"error": message})

     @app.exception_handler(RequestValidationError)
     async def validation_error_handler(request: Request, exc: RequestValidationError):
          return JSONResponse(
               status_code=status.HTTP_400_BAD_REQUEST,
               content={"erro": format_validation_errors(exc.errors())},
          )

     @app.exception_handler(SQLAlchemyError)
     async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
          logger.error("Persistence failure on %s %s", request.method, request.url.path, exc_info=exc)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content=_persistence_body(exc),
          )
