from loguru import logger

from langbuddy.db import models  # noqa: F401
from langbuddy.db.base import Base
from langbuddy.db.session import engine

if __name__ == "__main__":
    logger.info("Creating tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created.")
