from typing import Any, Dict, Optional
import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, WriteError

from domain.mappers import DocumentMapper
from domain.schemas.profile_schemas import ProfileDocument
from repositories import ProfileRepository
from services.validation import require_email
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError

logger = logging.getLogger("nutritrack.profile")


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def get_profile(db: Database, email: Optional[str]) -> Dict[str, Any]:
        """Return the profile stored for ``email``"""
        email = require_email(email)
        profile = ProfileRepository(db).find_one_by_email(email)

        if not profile:
            logger.warning(f"profile_not_found email={email}")
            raise NotFoundError("Profile not found.")

        logger.info(f"profile_fetched email={email}")
        return DocumentMapper.to_json(profile)

    @staticmethod
    def upsert_profile(db: Database, profile: ProfileDocument) -> Dict[str, Any]:
        """
        Insert the profile, or fully replace the one stored for the same email.

        Calling this twice for one email leaves a single document holding the
        second body. A duplicate-key error can only come from a concurrent
        upsert racing on the unique index; it is reported as a conflict.
        """
        document = profile.to_document()
        try:
            created = ProfileRepository(db).upsert(document)
        except DuplicateKeyError as e:
            logger.warning(f"profile_upsert_conflict email={profile.email}")
            raise ConflictError(
                "A profile with this email already exists.", code="DUPLICATE_EMAIL"
            ) from e
        except WriteError as e:
            logger.warning(f"profile_upsert_rejected email={profile.email}: {e}")
            raise ServiceValidationError(str(e)) from e

        logger.info(f"profile_upserted email={profile.email} created={created}")
        return DocumentMapper.to_json(document)

    @staticmethod
    def has_details(db: Database, email: Optional[str]) -> bool:
        """Whether any profile document exists for ``email``"""
        email = require_email(email)
        return ProfileRepository(db).exists_for_email(email)
