"""Image upload routes relayed to the external file host"""

from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
import logging

from adapters.upload_adapter import UploadRelay
from api.dependencies import get_upload_relay
from domain.schemas.upload_schemas import UploadResponse
from services import UploadService

router = APIRouter(prefix="/api", tags=["Uploads"])
logger = logging.getLogger("nutritrack.api.uploads")


@router.post("/scanfood", response_model=UploadResponse)
def scan_food(
    file: Optional[UploadFile] = File(None),
    relay: UploadRelay = Depends(get_upload_relay),
):
    """Upload a photo of a dish for scanning; returns its hosted URL"""
    url = UploadService.upload(relay, file)
    logger.info("Dish photo ready for scanning at %s", url)
    return UploadResponse(url=url)


@router.post("/uploadImage", response_model=UploadResponse)
def upload_image(
    file: Optional[UploadFile] = File(None),
    relay: UploadRelay = Depends(get_upload_relay),
):
    """Upload an image; returns its hosted URL"""
    return UploadResponse(url=UploadService.upload(relay, file))
