"""
CV Routes

GET /cv - Download the current CV (public)
GET /cv/info - Current CV metadata (public)
GET /cv/formats - Accepted upload formats and size limits (public)
POST /cv/upload - Replace the CV (admin)
"""

import logging
import os
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse
from pymongo.errors import PyMongoError

from app.core.auth import get_current_admin
from app.core.config import get_settings
from app.services.mongo_service import CVService, serialize_value
from app.utils.file_upload import delete_file, get_file_extension, get_upload_limits, save_cv_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cv", tags=["CV"])

CV_CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def content_disposition(original_name: str) -> str:
    """Attachment header with an ASCII filename plus the RFC 5987 UTF-8 form."""
    ascii_name = original_name.encode("ascii", "ignore").decode("ascii").replace('"', "") or "CV.pdf"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(original_name)}"


@router.get("")
async def download_cv():
    cvs = CVService()
    record = cvs.get_current()
    if not record:
        raise HTTPException(status_code=404, detail="CV not found. Please upload a CV first.")

    file_path = record.get("filePath")
    if not file_path or not os.path.exists(file_path):
        # The public directory may have moved since upload
        candidate = os.path.join(get_settings().cv_dir, record["filename"])
        if os.path.exists(candidate):
            file_path = candidate
            cvs.update_path(record["_id"], file_path)
        else:
            logger.error("CV file not found at path: %s", file_path)
            cvs.delete(record["_id"])
            raise HTTPException(status_code=404, detail="CV file not found on server. Please upload a new CV.")

    ext = get_file_extension(record["filename"])
    media_type = CV_CONTENT_TYPES.get(ext) or record.get("mimeType") or "application/pdf"
    original_name = record.get("originalName") or "CV.pdf"

    return FileResponse(
        file_path,
        media_type=media_type,
        headers={"Content-Disposition": content_disposition(original_name)},
    )


@router.get("/info")
async def get_cv_info():
    record = CVService().get_current()
    if not record:
        return {"success": True, "hasCV": False, "message": "No CV uploaded yet"}
    return {
        "success": True,
        "hasCV": True,
        "filename": record["originalName"],
        "size": record["fileSize"],
        "uploadedAt": serialize_value(record.get("createdAt")),
    }


@router.get("/formats")
async def get_upload_formats():
    return {"success": True, "data": get_upload_limits()}


@router.post("/upload")
async def upload_cv(
    cv: Optional[UploadFile] = File(None, description="CV file (pdf, doc, docx)"),
    admin: dict = Depends(get_current_admin),
):
    """Store a new CV; every previous CV file and record is removed first."""
    stored = await save_cv_upload(cv)
    cvs = CVService()

    try:
        for old in cvs.list():
            delete_file(old.get("filePath"))
            cvs.delete(old["_id"])

        record = cvs.insert(
            filename=stored.filename,
            original_name=stored.original_name,
            file_path=stored.path,
            file_size=stored.size,
            mime_type=stored.mime_type,
        )
    except PyMongoError:
        logger.exception("Error saving CV record, removing %s", stored.path)
        delete_file(stored.path)
        raise

    logger.info("CV replaced by %s: %s", admin.get("username"), stored.filename)
    return {
        "success": True,
        "message": "CV uploaded successfully",
        "data": {
            "id": str(record["_id"]),
            "filename": record["filename"],
            "originalName": record["originalName"],
            "fileSize": record["fileSize"],
            "uploadedAt": serialize_value(record["createdAt"]),
        },
    }
