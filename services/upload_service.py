from typing import Optional
import logging

from fastapi import UploadFile

from adapters.upload_adapter import UploadRelay
from app.exceptions import ServiceValidationError

logger = logging.getLogger("nutritrack.upload")


class UploadService:
    """Relays an uploaded image to the file host"""

    @staticmethod
    def upload(relay: UploadRelay, file: Optional[UploadFile]) -> str:
        """
        Forward ``file`` and return its public URL.

        Raises:
            ServiceValidationError: if no file was sent
            UpstreamServiceError: if the file host call fails
        """
        if file is None or not file.filename:
            raise ServiceValidationError("No file uploaded.", code="FILE_REQUIRED")

        content = file.file.read()
        return relay.relay(content, file.filename, file.content_type)
