"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing) and Logfire instrumentation, registers the exception
handlers and includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookcase import __version__
from bookcase.core.database.session import init_db
from bookcase.core.logging_config import get_logger, setup_logging
from bookcase.core.monitoring import initialize_logfire

from .api.v1 import anthologies, authors, books, health, members, series, stories
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the catalog tables on startup and, when ``BOOKCASE_SEED_DATA`` is
    set, loads the demo catalog into an empty database.
    """
    logger.info("Starting up Bookcase Server...")
    try:
        await init_db(seed=settings.seed_data)
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Bookcase Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Bookcase Server API

    Catalog a personal library: authors, their books, series and anthologies,
    the books that make up a series and the stories collected in an anthology.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

initialize_logfire(app)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(authors.router, prefix=f"{constant.API_V1_STR}/authors")
app.include_router(books.router, prefix=f"{constant.API_V1_STR}/books")
app.include_router(series.router, prefix=f"{constant.API_V1_STR}/series")
app.include_router(anthologies.router, prefix=f"{constant.API_V1_STR}/anthologies")
app.include_router(members.router, prefix=f"{constant.API_V1_STR}/members")
app.include_router(stories.router, prefix=f"{constant.API_V1_STR}/stories")
