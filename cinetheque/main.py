"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinetheque.config import configure_logging, get_settings
from cinetheque.database import create_schema, dispose_engine, initialize_database
from cinetheque.infrastructure.common.middleware import RequestIdMiddleware, TimeoutMiddleware
from cinetheque.infrastructure.common.problem_details import register_exception_handlers
from cinetheque.infrastructure.common.routers import home
from cinetheque.infrastructure.identity import security_chain
from cinetheque.infrastructure.identity.routers import auth
from cinetheque.infrastructure.movies.routers import directors, movies, studios

settings = get_settings()

# Configure logging before anything else logs
configure_logging(settings.ENVIRONMENT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and release it on shutdown."""
    initialize_database(settings)
    create_schema()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")
    yield
    dispose_engine()
    logger.info(f"{settings.PROJECT_NAME} stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="CRUD API over directors, movies and studios",
    lifespan=lifespan,
    dependencies=[Depends(security_chain)],
)

# Rate limiting for the public OAuth endpoints
app.state.limiter = auth.limiter

# Error handling: every failure is an application/problem+json body
register_exception_handlers(app)

# Middleware, innermost first
app.add_middleware(TimeoutMiddleware)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(home.router)
app.include_router(auth.router)
app.include_router(directors.router)
app.include_router(movies.router)
app.include_router(studios.router)
