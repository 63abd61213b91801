"""
Service Routes

GET /services - Get the services section
GET /services/{slug} - Get one service entry
PUT /services - Update the services section (admin)
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import get_current_admin
from app.schemas.schemas import ServicesUpdate
from app.services.content_service import ServiceSectionService
from app.services.mongo_service import serialize_doc

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("")
async def get_services():
    section = ServiceSectionService().get()
    if not section:
        raise HTTPException(status_code=404, detail="Services section not found")
    return {"success": True, "data": serialize_doc(section)}


@router.get("/{slug}")
async def get_service_by_slug(slug: str):
    service = ServiceSectionService()
    if service.get() is None:
        raise HTTPException(status_code=404, detail="Services section not found")

    item = service.get_item(slug)
    if item is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return {"success": True, "data": serialize_doc(item)}


@router.put("")
async def update_services(data: ServicesUpdate, admin: dict = Depends(get_current_admin)):
    """Replace the provided section fields; the services list is replaced as a whole."""
    section = ServiceSectionService().update(data.to_document(partial=True))
    return {
        "success": True,
        "message": "Services content updated successfully",
        "data": serialize_doc(section),
    }
