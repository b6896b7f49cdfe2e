"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import check_router

app = FastAPI(
    title="sqltips",
    description="Check and maintain the SQL tips document",
)
app.include_router(check_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
