from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api import health, resources
from app.core.dependencies import get_settings
from app.core.errors import ResourceQueryError
from app.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("kube-demo-ui listening on http://0.0.0.0:%s", settings.port)
    yield


app = FastAPI(title="kube-demo-ui", version="1.0.0", lifespan=lifespan)
app.include_router(health.router)
app.include_router(resources.router)


@app.exception_handler(ResourceQueryError)
async def resource_query_error_handler(
    request: Request, exc: ResourceQueryError
) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": exc.message})


# Mounted last so the API routes above take precedence over "/".
static_dir = Path(settings.static_dir)
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
else:
    logger.info("Static directory %s not found; serving API only", static_dir)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
