"""
Education Routes

GET /education - Get the education section
PUT /education - Update the education section (admin)
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import get_current_admin
from app.schemas.schemas import EducationUpdate
from app.services.content_service import EducationService
from app.services.mongo_service import serialize_doc

router = APIRouter(prefix="/education", tags=["Education"])


@router.get("")
async def get_education():
    education = EducationService().get()
    if not education:
        raise HTTPException(status_code=404, detail="Education section not found")
    return {"success": True, "data": serialize_doc(education)}


@router.put("")
async def update_education(data: EducationUpdate, admin: dict = Depends(get_current_admin)):
    education = EducationService().update(data.to_document(partial=True))
    return {
        "success": True,
        "message": "Education content updated successfully",
        "data": serialize_doc(education),
    }
