import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from country_admin import pages, routes
from country_admin.config import settings
from country_admin.database import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def life_span(app: FastAPI):
    logger.info("%s %s is starting ...", settings.APP_NAME, settings.VERSION)
    await init_db()
    yield
    logger.info("%s has been stopped ...", settings.APP_NAME)


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=life_span,
)

# Include routers
app.include_router(routes.router)
app.include_router(pages.router)
