from domain.schemas.common import OwnedDocument


class AllergenCreate(OwnedDocument):
    """Allergen entry for a user (e.g. ``{"email": ..., "name": "peanut"}``)"""
