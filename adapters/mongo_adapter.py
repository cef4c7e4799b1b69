"""MongoDB adapter owning the single process-wide client connection.
"""

from typing import Optional
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import StorageUnavailableError

logger = logging.getLogger("nutritrack.mongo")

# Collection names
PROFILE = "profile"
ALLERGENS = "allergens"
MEAL_PLANNER = "mealPlanner"
FOOD_LOG = "foodLog"


class MongoAdapter:
    """Opens, prepares and closes the shared MongoDB connection.

    One instance is created during application startup and handed to every
    request through dependency injection. ``MongoClient`` is thread-safe and
    pools its own sockets, so the same instance serves concurrent handlers.
    """

    def __init__(
        self, uri: str, db_name: str = "NutriTrack_db", timeout_ms: int = 5000
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    @property
    def is_ready(self) -> bool:
        return self._db is not None

    @property
    def db(self) -> Database:
        if self._db is None:
            raise StorageUnavailableError("MongoDB connection is not open")
        return self._db

    def collection(self, name: str) -> Collection:
        return self.db[name]

    # ------------------ Connection ------------------
    def connect(self) -> "MongoAdapter":
        """Open the client and verify the server answers a ping.

        Raises:
            StorageUnavailableError: if the server cannot be reached
        """
        client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            client.close()
            logger.error("Failed to connect to MongoDB (database: %s): %s", self.db_name, exc)
            raise StorageUnavailableError(f"Could not connect to MongoDB: {exc}") from exc

        self._client = client
        self._db = client[self.db_name]
        logger.info("Connected to MongoDB (database: %s)", self.db_name)
        return self

    def ensure_indexes(self) -> None:
        """Create the unique index on profile email.

        Must succeed before the service accepts traffic.
        """
        try:
            self.collection(PROFILE).create_index(
                [("email", ASCENDING)], unique=True
            )
        except PyMongoError as exc:
            logger.error("Failed to create unique index on %s.email: %s", PROFILE, exc)
            raise StorageUnavailableError(
                f"Could not create unique index on {PROFILE}.email: {exc}"
            ) from exc
        logger.info("Unique index ensured on email field in %s collection", PROFILE)

    def close(self) -> None:
        """Close MongoDB connection."""
        try:
            if self._client is not None:
                self._client.close()
                logger.info("MongoDB client closed")
        finally:
            self._client = None
            self._db = None


def connect(uri: str, db_name: str, timeout_ms: int = 5000) -> MongoAdapter:
    """Open a connection and prepare indexes; raises if either step fails."""
    adapter = MongoAdapter(uri, db_name, timeout_ms).connect()
    try:
        adapter.ensure_indexes()
    except StorageUnavailableError:
        adapter.close()
        raise
    return adapter
