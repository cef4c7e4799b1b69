from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# The owner key shared by every collection. Presence is the only check.
OwnerEmail = Annotated[str, StringConstraints(min_length=1)]


class OwnedDocument(BaseModel):
    """A schemaless document that belongs to the user identified by ``email``.

    Any extra field sent by the client is kept and stored verbatim.
    """

    email: OwnerEmail

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict:
        return self.model_dump()


class MessageResponse(BaseModel):
    """Plain confirmation message"""

    message: str = Field(..., description="Human-readable message")
