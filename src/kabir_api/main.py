from functools import lru_cache
import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from kabir_api.config import get_settings
from kabir_api.logging_config import configure_logging
from kabir_api.services.couplets import (
    Couplet,
    ValidationError,
    build_query_options,
    load_couplets,
    query_couplets,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Kabir Ke Dohe API", version="0.1.0")

WELCOME_MESSAGE = (
    "Welcome to the Kabir Ke Dohe API! Explore our endpoints to retrieve and filter couplets."
)
NOT_FOUND_MESSAGE = (
    "Oops! The requested resource could not be found. Please check the URL and try again."
)

LooseValue = str | int | float | bool | None


class CoupletQuery(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    s: LooseValue = None
    exact_match: LooseValue = Field(default=None, alias="exactMatch")
    search_within: LooseValue = Field(default=None, alias="searchWithin")
    tags: LooseValue = None
    popular: LooseValue = None
    order_by: LooseValue = Field(default=None, alias="orderBy")
    order: LooseValue = None
    page: LooseValue = None
    per_page: LooseValue = Field(default=None, alias="perPage")
    pagination: LooseValue = None


@app.on_event("startup")
def startup() -> None:
    configure_logging(get_settings().log_level)


@lru_cache(maxsize=4)
def _cached_couplets(data_path: str) -> tuple[Couplet, ...]:
    return tuple(load_couplets(Path(data_path)))


def load_dataset() -> list[Couplet]:
    settings = get_settings()
    if settings.cache_dataset:
        return list(_cached_couplets(settings.data_path))
    return load_couplets(Path(settings.data_path))


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _handle_couplets_request(params: dict[str, Any]) -> JSONResponse:
    try:
        options = build_query_options(params)
        result = query_couplets(load_dataset(), options)
    except ValidationError as exc:
        return _failure(400, str(exc))
    except Exception as exc:
        logger.exception("couplets query failed")
        return _failure(500, str(exc))

    return JSONResponse(status_code=200, content={"success": True, "data": result.to_dict()})


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in {404, 405}:
        return _failure(404, NOT_FOUND_MESSAGE)
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.detail})


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _failure(400, "Bad Request: The request body could not be parsed.")


@app.get("/")
def welcome() -> str:
    return WELCOME_MESSAGE


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/couplets")
def list_couplets(
    s: str | None = Query(default=None),
    exact_match: str | None = Query(default=None, alias="exactMatch"),
    search_within: str | None = Query(default=None, alias="searchWithin"),
    tags: str | None = Query(default=None),
    popular: str | None = Query(default=None),
    order_by: str | None = Query(default=None, alias="orderBy"),
    order: str | None = Query(default=None),
    page: str | None = Query(default=None),
    per_page: str | None = Query(default=None, alias="perPage"),
    pagination: str | None = Query(default=None),
) -> JSONResponse:
    return _handle_couplets_request(
        {
            "s": s,
            "exactMatch": exact_match,
            "searchWithin": search_within,
            "tags": tags,
            "popular": popular,
            "orderBy": order_by,
            "order": order,
            "page": page,
            "perPage": per_page,
            "pagination": pagination,
        }
    )


@app.post("/api/couplets")
def search_couplets(request: CoupletQuery | None = None) -> JSONResponse:
    params = request.model_dump(by_alias=True) if request is not None else {}
    return _handle_couplets_request(params)


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run("kabir_api.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
