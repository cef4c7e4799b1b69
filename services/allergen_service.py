from typing import Any, Dict, List, Optional
import logging

from pymongo.database import Database
from pymongo.errors import PyMongoError, WriteError

from domain.mappers import DocumentMapper
from domain.schemas.allergen_schemas import AllergenCreate
from repositories import AllergenRepository
from services.validation import parse_object_id, require_email
from app.exceptions import NotFoundError, ServiceValidationError, UpstreamServiceError

logger = logging.getLogger("nutritrack.allergens")


class AllergenService:
    """Business logic for a user's allergen list"""

    @staticmethod
    def list_allergens(db: Database, email: Optional[str]) -> List[Dict[str, Any]]:
        email = require_email(email, "Email is required to fetch allergens.")
        allergens = AllergenRepository(db).find_by_email(email)
        return DocumentMapper.to_json(allergens)

    @staticmethod
    def add_allergen(db: Database, allergen: AllergenCreate) -> Dict[str, Any]:
        """Insert an allergen and echo it back with its new ``_id``"""
        try:
            document = AllergenRepository(db).insert(allergen.to_document())
        except WriteError as e:
            logger.warning(f"allergen_insert_rejected email={allergen.email}: {e}")
            raise ServiceValidationError(str(e)) from e

        logger.info(f"allergen_added email={allergen.email} id={document['_id']}")
        return DocumentMapper.to_json(document)

    @staticmethod
    def delete_allergen(db: Database, allergen_id: str) -> None:
        """
        Delete one allergen by identifier.

        Raises:
            ServiceValidationError: if the id is not a 24-hex ObjectId (no storage access)
            NotFoundError: if no allergen has that id
            UpstreamServiceError: if the delete itself fails
        """
        object_id = parse_object_id(allergen_id, "Invalid allergen ID.")
        try:
            deleted = AllergenRepository(db).delete_by_id(object_id)
        except PyMongoError as e:
            logger.exception(f"Error deleting allergen {allergen_id}: {e}")
            raise UpstreamServiceError(
                "Failed to delete allergen. Please try again later."
            ) from e

        if not deleted:
            logger.warning(f"allergen_not_found id={allergen_id}")
            raise NotFoundError("Allergen not found.")
        logger.info(f"allergen_deleted id={allergen_id}")
