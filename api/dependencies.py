"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request
from pymongo.database import Database

from adapters.mongo_adapter import MongoAdapter
from adapters.upload_adapter import UploadRelay
from app.config import settings
from app.exceptions import ServiceUnavailableError


def get_mongo(request: Request) -> MongoAdapter:
    """
    The storage adapter opened during startup.

    Acts as the readiness gate: until the lifespan has connected and created
    indexes, every storage-backed route answers 503.
    """
    adapter = getattr(request.app.state, "mongo", None)
    if adapter is None or not adapter.is_ready:
        raise ServiceUnavailableError()
    return adapter


def get_db(mongo: MongoAdapter = Depends(get_mongo)) -> Database:
    """
    Database handle dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_db)):
            # Use db here
            pass
    """
    return mongo.db


def get_upload_relay() -> UploadRelay:
    return UploadRelay(settings.upload_host, timeout=settings.upload_timeout_sec)
