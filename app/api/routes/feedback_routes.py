"""
Feedback Routes

POST /feedback - Submit feedback (public)
GET /feedback - List feedback (admin)
PUT /feedback/{id}/read - Mark feedback as read (admin)
DELETE /feedback/{id} - Delete feedback (admin)
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import get_current_admin
from app.schemas.schemas import FeedbackCreate, MessageResponse
from app.services.email_service import EmailService, get_email_service
from app.services.mongo_service import FeedbackService, serialize_doc, serialize_docs

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.post("", status_code=201)
async def submit_feedback(data: FeedbackCreate, email: EmailService = Depends(get_email_service)):
    feedback = FeedbackService().insert(data.model_dump())

    if email.is_configured:
        await email.notify_feedback(data.name, data.email, data.rating, data.feedback)

    return {
        "success": True,
        "message": "Feedback submitted successfully",
        "data": serialize_doc(feedback),
    }


@router.get("")
async def get_feedback(admin: dict = Depends(get_current_admin)):
    feedback = serialize_docs(FeedbackService().list())
    return {"success": True, "count": len(feedback), "data": feedback}


@router.put("/{feedback_id}/read")
async def mark_feedback_as_read(feedback_id: str, admin: dict = Depends(get_current_admin)):
    feedback = FeedbackService().mark_as_read(feedback_id)
    if not feedback:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return {"success": True, "data": serialize_doc(feedback)}


@router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(feedback_id: str, admin: dict = Depends(get_current_admin)):
    if not FeedbackService().delete(feedback_id):
        raise HTTPException(status_code=404, detail="Feedback not found")
    return MessageResponse(message="Feedback deleted successfully")
