import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Error de dominio. Los servicios lo lanzan; la capa HTTP lo traduce."""
    status_code = 400
    error = "bad_request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404
    error = "not_found"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class RequiredFieldsError(AppError):
    status_code = 422
    error = "validation_error"

    def __init__(self, fields: list[str], message: str):
        super().__init__(message)
        self.fields = fields


def _normalize_errors(errs):
    norm = []
    for e in errs:
        e = dict(e)
        val = e.get("input")
        if isinstance(val, (bytes, bytearray)):
            e["input"] = val.decode("utf-8", errors="ignore")
        # ctx puede traer la excepción original (no serializable)
        if "ctx" in e:
            e["ctx"] = {k: str(v) for k, v in e["ctx"].items()}
        norm.append(e)
    return norm


def install_error_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "detail": _normalize_errors(exc.errors())},
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        content = {"error": exc.error, "detail": exc.message}
        if isinstance(exc, NotFoundError):
            content["id"] = exc.entity_id
        elif isinstance(exc, RequiredFieldsError):
            content["fields"] = exc.fields
        return JSONResponse(status_code=exc.status_code, content=content)
