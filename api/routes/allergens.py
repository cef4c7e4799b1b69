"""Allergen list routes"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
import logging

from api.dependencies import get_db
from domain.schemas.allergen_schemas import AllergenCreate
from domain.schemas.common import MessageResponse
from services import AllergenService

router = APIRouter(prefix="/api/allergens", tags=["Allergens"])
logger = logging.getLogger("nutritrack.api.allergens")


@router.get("", response_model=List[Dict[str, Any]])
def list_allergens(
    email: Optional[str] = Query(None, description="Owner email"),
    db: Database = Depends(get_db),
):
    """Get all allergens recorded for a user"""
    allergens = AllergenService.list_allergens(db, email)
    logger.info("Found %d allergens for user %s", len(allergens), email)
    return allergens


@router.post("", status_code=status.HTTP_201_CREATED)
def add_allergen(allergen: AllergenCreate, db: Database = Depends(get_db)):
    """Add an allergen; the stored document is echoed back with its ``_id``"""
    return AllergenService.add_allergen(db, allergen)


@router.delete("/{allergen_id}", response_model=MessageResponse)
def delete_allergen(allergen_id: str, db: Database = Depends(get_db)):
    """
    Delete an allergen by its 24-character hex identifier.

    Raises:
        400: If the identifier is malformed
        404: If no allergen has that identifier
        500: If the delete fails
    """
    AllergenService.delete_allergen(db, allergen_id)
    logger.info("Deleted allergen %s", allergen_id)
    return MessageResponse(message="Allergen deleted successfully.")
