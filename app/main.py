from __future__ import annotations
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.config import settings
from app.data.user_repo import UserRepo
from app.logging_config import setup_logging
from app.service.user_service import UserService
from app.web.middleware import install_middleware
from app.web.routers import users

logger = logging.getLogger(__name__)

def create_app(user_repo: Optional[UserRepo] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_TITLE)
    app.state.user_service = UserService(user_repo if user_repo is not None else UserRepo())

    install_middleware(app)
    app.include_router(users.router)
    return app

app = create_app()

def run() -> None:
    logger.info("listening on %s:%d", settings.HOST, settings.PORT)
    try:
        uvicorn.run(app, host=settings.HOST, port=settings.PORT, timeout_keep_alive=settings.TIMEOUT_KEEP_ALIVE)
    finally:
        logger.info("all systems offline")

if __name__ == "__main__":
    run()
