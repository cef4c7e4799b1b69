"""Profile routes (save, fetch, existence check)"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
import logging

from api.dependencies import get_db
from domain.schemas.profile_schemas import ProfileDocument, ProfileExistsResponse
from services import ProfileService

router = APIRouter(prefix="/api", tags=["Profile"])
logger = logging.getLogger("nutritrack.api.profiles")


@router.get("/profile")
def get_profile(
    email: Optional[str] = Query(None, description="Profile email"),
    db: Database = Depends(get_db),
):
    """Get the profile stored for an email"""
    return ProfileService.get_profile(db, email)


@router.post("/profile", status_code=status.HTTP_201_CREATED)
def save_profile(profile: ProfileDocument, db: Database = Depends(get_db)):
    """
    Save a profile.

    Inserts the profile when the email is new, otherwise replaces the stored
    document with this body. Returns 409 if a concurrent save for the same
    email wins the race on the unique index.
    """
    return ProfileService.upsert_profile(db, profile)


@router.get("/hasdetails", response_model=ProfileExistsResponse)
def has_details(
    email: Optional[str] = Query(None, description="Profile email"),
    db: Database = Depends(get_db),
):
    """Report whether a profile exists for an email"""
    exists = ProfileService.has_details(db, email)
    logger.info("Profile details for %s: exists=%s", email, exists)
    return ProfileExistsResponse(exists=exists)
