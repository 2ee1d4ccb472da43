"""WFS API - self-describing OGC API Features service documents.

The service serves its own API definition on ``/api``, so FastAPI's generated
OpenAPI and docs routes are switched off.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from wfsapi.startup import log_startup_configuration  # noqa: I001

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wfsapi.config import cors_origins
from wfsapi.endpoints.api import router as api_router
from wfsapi.endpoints.collections import router as collections_router
from wfsapi.endpoints.conformance import router as conformance_router
from wfsapi.endpoints.root import router as root_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log_startup_configuration()
    yield


app = FastAPI(lifespan=lifespan, openapi_url=None, docs_url=None, redoc_url=None)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(api_router)
app.include_router(conformance_router)
app.include_router(collections_router)
