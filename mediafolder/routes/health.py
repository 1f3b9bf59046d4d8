"""Health check endpoint."""
import sqlite3

from fastapi import APIRouter

from mediafolder.config import APP_VERSION
from mediafolder.dependencies import get_store

router = APIRouter()


@router.get("/health")
def health():
    checks = {"app": "ok"}

    try:
        get_store().ping()
        checks["database"] = "ok"
    except sqlite3.Error as e:
        checks["database"] = f"error: {e}"
        return {"status": "unhealthy", "version": APP_VERSION, "checks": checks}

    return {"status": "ok", "version": APP_VERSION, "checks": checks}
