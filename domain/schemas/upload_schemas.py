from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    url: str = Field(..., description="Public URL of the hosted file")
