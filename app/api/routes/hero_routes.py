"""
Hero Routes

GET /hero - Get hero content (created from defaults on first read)
PUT /hero - Update hero content (admin)
POST /hero/upload-image - Upload and replace the hero image (admin)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.core.auth import get_current_admin
from app.schemas.schemas import HeroUpdate
from app.services.content_service import HeroService
from app.services.mongo_service import serialize_doc
from app.utils.file_upload import save_image_upload
from app.utils.urls import get_base_url, normalize_image_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hero", tags=["Hero"])


@router.get("")
async def get_hero(request: Request):
    """Get hero content with an absolute image URL."""
    hero = serialize_doc(HeroService().get())
    hero["image"] = normalize_image_url(hero.get("image"), get_base_url(request))
    return {"success": True, "data": hero}


@router.put("")
async def update_hero(data: HeroUpdate, request: Request, admin: dict = Depends(get_current_admin)):
    """Update only the provided hero fields."""
    fields = data.to_document(partial=True)
    if fields.get("image"):
        fields["image"] = normalize_image_url(fields["image"], get_base_url(request))

    hero = HeroService().update(fields)
    return {
        "success": True,
        "message": "Hero content updated successfully",
        "data": serialize_doc(hero),
    }


@router.post("/upload-image")
async def upload_hero_image(
    request: Request,
    image: Optional[UploadFile] = File(None, description="Hero image (jpg, png, gif, webp)"),
    admin: dict = Depends(get_current_admin),
):
    """
    Upload a new hero image.

    The previous hero image file is deleted and the absolute URL of the new
    one is stored on the hero document.
    """
    stored = await save_image_upload(image, prefix="hero")
    relative_path = f"/images/{stored.filename}"
    full_image_url = f"{get_base_url(request)}{relative_path}"

    hero = HeroService().replace_image(stored, full_image_url)

    return {
        "success": True,
        "message": "Hero image uploaded successfully and saved to database",
        "data": {
            "imageUrl": relative_path,
            "fullImageUrl": full_image_url,
            "filename": stored.filename,
            "originalName": stored.original_name,
            "size": stored.size,
            "hero": {
                "id": str(hero["_id"]),
                "image": hero["image"],
                "imageInDB": True,
            },
        },
    }
