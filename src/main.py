"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, todos
from src.config import get_settings
from src.database import init_db
from src.errors import register_exception_handlers

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    yield


app = FastAPI(
    title="Todo API",
    description="Personal todo lists with email/password accounts",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def access_log(request: Request, call_next):
    """Log one line per request."""
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    try:
        response = await call_next(request)
    except Exception:
        # Rendered as a 500 by the outermost error handler
        elapsed = time.perf_counter() - start
        logger.info(f'{client} "{request.method} {request.url.path}" 500 {elapsed:.3f}s')
        raise
    elapsed = time.perf_counter() - start
    logger.info(
        f'{client} "{request.method} {request.url.path}" {response.status_code} {elapsed:.3f}s'
    )
    return response


register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(todos.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104
