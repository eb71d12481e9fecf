"""FastAPI application entry point.

This module wires together the API routers, configures middleware and
startup tasks, and exposes the ASGI application object used by the
server.  The single-page front end talks to these endpoints for all of
its calculations, the quiz and the saved progress.
"""

import os
import logging
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fingram.routes import (
    budget,
    investment,
    tips,
    quiz,
    progress,
    settings,
)
from sqlalchemy.ext.asyncio import AsyncSession
from fingram.database import create_db_and_tables, async_session, get_session
from fingram.crud import get_settings
from fingram.workspace import get_workspace

# Basic logging configuration.  The log level can be controlled with an
# environment variable so deployments can adjust verbosity without code
# changes.
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL))
logger = logging.getLogger(__name__)

app = FastAPI(title="fingram")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    """Create tables, make sure settings exist and restore saved progress."""

    await create_db_and_tables()
    async with async_session() as session:
        await get_settings(session)
    await get_workspace().load_progress()


@app.on_event("shutdown")
async def on_shutdown():
    # Let a progress write triggered by a just-finished quiz complete.
    await get_workspace().flush()


app.include_router(budget.router)
app.include_router(investment.router)
app.include_router(tips.router)
app.include_router(quiz.router)
app.include_router(progress.router)
app.include_router(settings.router)


@app.get("/")
async def read_root(db: AsyncSession = Depends(get_session)):
    s = await get_settings(db)
    return {"message": f"Welcome to {s.site_name} API"}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler that logs the stack trace once."""
    logger.exception("Unhandled error during request %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "code": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )
