# main.py

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import os
import time
import uvicorn

# --- Core Application Imports ---
from omikuji.core.config import settings
from omikuji.core.logger import logger
from omikuji.routers import omikuji
from omikuji.routers.omikuji import envelope_to_response
from omikuji.services.render_service import render_not_found


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup and shutdown logic.
    """
    logger.info(f"おみくじアプリが http://localhost:{settings.PORT} で起動しました")
    logger.info(f"Fortune labels: {', '.join(settings.fortune_labels_list)}")
    yield
    logger.info("Application shutdown.")


# --- Plain-text error responses ---
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        logger.warning(f"Not found: {request.url.path}")
        return envelope_to_response(render_not_found())
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

# --- Logging Middleware ---
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000
    ip_address = request.client.host if request.client else "unknown"

    log_message = (
        f'ip="{ip_address}" '
        f'method="{request.method}" '
        f'path="{request.url.path}" '
        f'status={response.status_code} '
        f'duration={process_time:.2f}ms'
    )
    logger.info(log_message)
    return response


def create_app(static_dir: str = settings.STATIC_DIR) -> FastAPI:
    """
    Builds the omikuji app, serving static assets from `static_dir` when it exists.
    """
    # Trailing-slash variants of the routes are misses, not redirects.
    app = FastAPI(
        title="Omikuji",
        description="Draws a random omikuji as an HTML page or a JSON document.",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(log_requests)

    # --- Routers ---
    app.include_router(omikuji.router)

    # --- Static Files ---
    # Mounted last so the omikuji routes win; missing assets fall through to the 404 handler.
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.info(f"Static directory '{static_dir}' not found; static serving disabled.")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
