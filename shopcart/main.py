# shopcart/main.py
from contextlib import asynccontextmanager

import uvicorn

from shopcart.api import create_app
from shopcart.data.database import Base, engine
from shopcart.utils.logging import configure_logging, get_logger

# models must be imported before create_all so their tables are registered
import shopcart.data.models  # noqa: F401

configure_logging()
logger = get_logger(__name__)


def init_db():
    logger.info("Initializing database", tables=list(Base.metadata.tables.keys()))
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        raise
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app):
    init_db()
    yield


app = create_app(lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
