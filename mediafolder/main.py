import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediafolder.config import APP_VERSION, LOG_LEVEL
from mediafolder.dependencies import close_store, get_store
from mediafolder.exceptions import ApiException
from mediafolder.logging_setup import setup_logging
from mediafolder.routes import actions, folders, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_store()
    yield
    close_store()


def _errors(*errors: dict) -> dict:
    return {"errors": list(errors)}


async def _handle_api_exception(request: Request, exc: ApiException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(content=_errors(exc.to_error()), status_code=exc.status_code)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = _errors({
        "status": str(exc.status_code),
        "code": "FRAMEWORK_HTTP_ERROR",
        "title": "HTTP Error",
        "detail": str(exc.detail),
    })
    return JSONResponse(content=body, status_code=exc.status_code, headers=exc.headers)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        location = ".".join(str(x) for x in error.get("loc", []) if x != "body")
        errors.append({
            "status": "422",
            "code": "FRAMEWORK_VALIDATION_ERROR",
            "title": "Unprocessable Entity",
            "detail": error.get("msg", ""),
            "source": {"pointer": location or None},
        })
    return JSONResponse(content=_errors(*errors), status_code=422)


def create_app() -> FastAPI:
    setup_logging(LOG_LEVEL)
    app = FastAPI(title="media-folder", version=APP_VERSION, lifespan=lifespan)

    app.add_exception_handler(ApiException, _handle_api_exception)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)

    app.include_router(health.router)
    app.include_router(actions.router)
    app.include_router(folders.router)
    return app


app = create_app()


def serve() -> None:
    import uvicorn

    uvicorn.run(
        "mediafolder.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
        log_config=None,
    )
