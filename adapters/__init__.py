"""
Adapters package - External service connections.
MongoDB storage adapter and the file-host upload relay.
"""

from adapters import mongo_adapter, upload_adapter
from adapters.mongo_adapter import MongoAdapter
from adapters.upload_adapter import UploadRelay

__all__ = [
    "mongo_adapter",
    "upload_adapter",
    "MongoAdapter",
    "UploadRelay",
]
