# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
SyncUp Kick-off Service
=======================
Group-project kick-off: members join a group by code, submit a
questionnaire (goals, availability, skills), and the admin reviews the
availability heatmap and goal alignment before locking in a weekly
meeting time and final roles.

Port: 8000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from syncup.controllers import (
    alignment_controller,
    group_controller,
    project_controller,
    questionnaire_controller,
    system_controller,
)
from syncup.core.config import settings
from syncup.core.logging import get_logger
from syncup.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log startup and shutdown."""
    logger.info("%s v%s starting", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="SyncUp Kick-off Service",
    description="Join groups by code, collect questionnaires, and align availability and goals.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(group_controller.router)
app.include_router(questionnaire_controller.router)
app.include_router(alignment_controller.router)
app.include_router(project_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
