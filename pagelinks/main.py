import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pagelinks.api.v1.router import router as v1_router
from pagelinks.core.config import settings
from pagelinks.utils.exceptions import NotFoundError, QueryParseError, ValidationError


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    app = FastAPI(title=settings.APP_TITLE)
    app.include_router(v1_router)

    @app.exception_handler(ValidationError)
    async def validation_handler(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(QueryParseError)
    async def query_parse_handler(_: Request, exc: QueryParseError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    return app


app = create_app()
