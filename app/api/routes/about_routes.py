"""
About Routes

GET /about - Get about content
PUT /about - Update about content (admin)
POST /about/upload-image - Upload and replace the about image (admin)
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from app.core.auth import get_current_admin
from app.schemas.schemas import AboutUpdate
from app.services.content_service import AboutService
from app.services.mongo_service import serialize_doc
from app.utils.file_upload import save_image_upload
from app.utils.urls import get_base_url, normalize_image_url

router = APIRouter(prefix="/about", tags=["About"])


@router.get("")
async def get_about(request: Request):
    about = AboutService().get()
    if not about:
        raise HTTPException(status_code=404, detail="About section not found")

    data = serialize_doc(about)
    if data.get("image"):
        data["image"] = normalize_image_url(data["image"], get_base_url(request))
    return {"success": True, "data": data}


@router.put("")
async def update_about(data: AboutUpdate, request: Request, admin: dict = Depends(get_current_admin)):
    """Update only the provided about fields; creates the section if missing."""
    fields = data.to_document(partial=True)
    if fields.get("image"):
        fields["image"] = normalize_image_url(fields["image"], get_base_url(request))

    about = AboutService().update(fields)
    return {
        "success": True,
        "message": "About content updated successfully",
        "data": serialize_doc(about),
    }


@router.post("/upload-image")
async def upload_about_image(
    request: Request,
    image: Optional[UploadFile] = File(None, description="About image (jpg, png, gif, webp)"),
    admin: dict = Depends(get_current_admin),
):
    stored = await save_image_upload(image, prefix="about")
    relative_path = f"/images/{stored.filename}"
    full_image_url = f"{get_base_url(request)}{relative_path}"

    about = AboutService().replace_image(stored, full_image_url)

    return {
        "success": True,
        "message": "About image uploaded successfully and saved to database",
        "data": {
            "imageUrl": relative_path,
            "fullImageUrl": full_image_url,
            "filename": stored.filename,
            "originalName": stored.original_name,
            "size": stored.size,
            "about": {
                "id": str(about["_id"]),
                "image": about["image"],
                "imageInDB": True,
            },
        },
    }
