"""Compass Badges - FastAPI app entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from compass_badges.core.config import get_settings
from compass_badges.core.logging_config import configure_logging
from compass_badges.db.base import Base
from compass_badges.db.session import engine
from compass_badges.routers import api

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)

    # create tables for local runs; deployed databases go through alembic
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Axis scoring and tiered badge progression for interactive stories",
    lifespan=lifespan,
)

app.include_router(api.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
