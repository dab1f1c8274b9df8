import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette import status
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from cardleague.config import Environment, config, environment
from cardleague.database import database
from cardleague.routes import brackets, games, results, schedules, teams
from cardleague.utils.alembic import alembic_run_migrations
from cardleague.utils.errors import ValidationError
from cardleague.utils.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    await database.connect()
    if environment is not Environment.PRODUCTION:
        # env.py drives its own event loop, so migrations run on a worker thread.
        await asyncio.to_thread(alembic_run_migrations)

    logger.info(f"Started card league API ({environment.value})")
    yield

    await database.disconnect()


app = FastAPI(
    title="Card League API",
    summary="Team registration, scheduling, score entry and standings for card-game leagues",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in config.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


routers = {
    "Teams": teams.router,
    "Schedules": schedules.router,
    "Games": games.router,
    "Results": results.router,
    "Brackets": brackets.router,
}

for tag, router in routers.items():
    app.include_router(router, tags=[tag])
