# testimonials_api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from testimonials_api.api.home import router as home_router
from testimonials_api.api.testimonials import router as testimonials_router
from testimonials_api.config import API_VERSION, APP_NAME, APP_VERSION, configure_logging
from testimonials_api.db.engine import get_engine
from testimonials_api.db.schema import metadata

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    metadata.create_all(get_engine())
    logger.info("%s %s ready (API v%s)", APP_NAME, APP_VERSION, API_VERSION)
    yield


app = FastAPI(
    title="Testimonials API",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(home_router, prefix=f"/v{API_VERSION}")
app.include_router(testimonials_router, prefix=f"/v{API_VERSION}")
