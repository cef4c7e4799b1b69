from pydantic import BaseModel

from domain.schemas.common import OwnedDocument


class ProfileDocument(OwnedDocument):
    """User profile; ``email`` is unique across the profile collection."""


class ProfileExistsResponse(BaseModel):
    exists: bool
