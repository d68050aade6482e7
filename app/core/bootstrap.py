import logging

from fastapi import FastAPI

from app.api.v1.routers import users
from app.core.config import settings

logger = logging.getLogger(__name__)


def bootstrap_app(app: FastAPI):
    prefix = settings.API_PREFIX

    app.include_router(users.router, prefix=prefix, tags=["Users"])
    logger.info("Routers registered under %s", prefix)
