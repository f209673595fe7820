# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import health_advisor.config
health_advisor.config.load_env()

from health_advisor.api.ask import router as ask_router
from health_advisor.api.history import router as history_router

app = FastAPI(title="Health Advisor API", version="0.1.0")
app.include_router(ask_router)
app.include_router(history_router)


@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "Health Advisor API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
