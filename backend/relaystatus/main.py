import sys

from fastapi import FastAPI
from loguru import logger

from relaystatus.api.routes import router
from relaystatus.config.settings import settings


def create_app() -> FastAPI:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())

    app = FastAPI(title="Relayer Status")
    app.include_router(router)
    return app


app = create_app()
