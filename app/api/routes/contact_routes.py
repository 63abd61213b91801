"""
Contact Routes

POST /contact - Send a contact message (public)
GET /contact - List messages (admin)
PUT /contact/{id}/read - Mark message as read (admin)
DELETE /contact/{id} - Delete message (admin)
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.auth import get_current_admin
from app.schemas.schemas import ContactCreate, MessageResponse
from app.services.email_service import EmailService, get_email_service
from app.services.mongo_service import MessageService, serialize_doc, serialize_docs

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", status_code=201)
async def send_contact_message(data: ContactCreate, email: EmailService = Depends(get_email_service)):
    """
    Store a contact form message.

    The site owner is emailed when SMTP is configured; a failed email does
    not fail the request.
    """
    message = MessageService().insert(data.model_dump())

    if email.is_configured:
        await email.notify_contact_message(data.name, data.email, data.subject, data.message)

    return {
        "success": True,
        "message": "Message sent successfully",
        "data": serialize_doc(message),
    }


@router.get("")
async def get_messages(admin: dict = Depends(get_current_admin)):
    """All messages, newest first."""
    messages = serialize_docs(MessageService().list())
    return {"success": True, "count": len(messages), "data": messages}


@router.put("/{message_id}/read")
async def mark_message_as_read(message_id: str, admin: dict = Depends(get_current_admin)):
    message = MessageService().mark_as_read(message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return {"success": True, "data": serialize_doc(message)}


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(message_id: str, admin: dict = Depends(get_current_admin)):
    if not MessageService().delete(message_id):
        raise HTTPException(status_code=404, detail="Message not found")
    return MessageResponse(message="Message deleted successfully")
