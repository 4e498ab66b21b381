from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from gst_billing.api.routes import router as health_router
from gst_billing.api.v1 import v1_router
from gst_billing.config.settings import settings
from gst_billing.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting {} ({})", settings.APP_NAME, settings.ENVIRONMENT)
    yield


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(v1_router)
