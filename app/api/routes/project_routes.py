"""
Project Routes

GET /projects - List projects (optional ?category=)
GET /projects/{id} - Get one project
GET /projects/images/{image_id} - Get uploaded image metadata
POST /projects/upload-image - Upload a project image (admin)
POST /projects - Create project (admin)
PUT /projects/{id} - Update project (admin)
DELETE /projects/{id} - Delete project (admin)
"""

import logging
import os
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, UploadFile
from pymongo.errors import PyMongoError

from app.core.auth import get_current_admin
from app.schemas.schemas import ProjectCreate, ProjectUpdate
from app.services.mongo_service import (
    ProjectImageService, ProjectService, serialize_doc, serialize_value
)
from app.utils.file_upload import delete_file, save_image_upload
from app.utils.urls import extract_image_filename, get_base_url, normalize_image_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


def present_project(doc: dict, base_url: str, images: ProjectImageService, detail: bool = False) -> dict:
    """
    Serialize a project with an absolute image URL and, when the image is a
    tracked upload, its metadata.

    In listings imageInfo is only attached if the file still exists; the
    detail view always attaches it along with a fileExists flag.
    """
    project = serialize_doc(doc)
    image = project.get("image")
    if not image:
        return project

    filename = extract_image_filename(image)
    project["image"] = normalize_image_url(image, base_url)
    if not filename:
        return project

    record = images.get_by_filename(filename)
    if not record:
        return project

    exists = os.path.exists(record["filePath"])
    info = {
        "id": str(record["_id"]),
        "originalName": record["originalName"],
        "fileSize": record["fileSize"],
        "uploadedAt": serialize_value(record.get("createdAt")),
    }
    if detail:
        info["fileExists"] = exists
        project["imageInfo"] = info
    elif exists:
        project["imageInfo"] = info
    else:
        logger.warning("Image file not found: %s", record["filePath"])
    return project


@router.get("")
async def get_projects(request: Request, category: Optional[str] = Query(None)):
    """List projects newest first. category=All (or none) returns everything."""
    base_url = get_base_url(request)
    images = ProjectImageService()
    projects = [present_project(p, base_url, images) for p in ProjectService().list(category)]
    return {"success": True, "count": len(projects), "data": projects}


@router.get("/images/{image_id}")
async def get_project_image(image_id: str):
    image = ProjectImageService().get(image_id)
    if not image:
        raise HTTPException(status_code=404, detail="Image not found")
    return {"success": True, "data": serialize_doc(image)}


@router.get("/{project_id}")
async def get_project(project_id: str, request: Request):
    project = ProjectService().get(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    data = present_project(project, get_base_url(request), ProjectImageService(), detail=True)
    return {"success": True, "data": data}


@router.post("/upload-image")
async def upload_project_image(
    request: Request,
    image: Optional[UploadFile] = File(None, description="Project image (jpg, png, gif, webp)"),
    admin: dict = Depends(get_current_admin),
):
    """Store an image and record its metadata; the returned imageUrl goes on a project."""
    stored = await save_image_upload(image, prefix="project")
    relative_path = f"/images/{stored.filename}"
    full_image_url = f"{get_base_url(request)}{relative_path}"

    try:
        record = ProjectImageService().insert(
            filename=stored.filename,
            original_name=stored.original_name,
            file_path=stored.path,
            relative_path=relative_path,
            file_size=stored.size,
            mime_type=stored.mime_type,
            uploaded_by=admin.get("_id"),
        )
    except PyMongoError:
        logger.exception("Error saving project image record, removing %s", stored.path)
        delete_file(stored.path)
        raise

    return {
        "success": True,
        "message": "Image uploaded successfully and saved to database",
        "data": {
            "imageId": str(record["_id"]),
            "imageUrl": relative_path,
            "fullImageUrl": full_image_url,
            "filename": stored.filename,
            "originalName": stored.original_name,
            "size": stored.size,
            "mimeType": stored.mime_type,
            "uploadedAt": serialize_doc(record)["createdAt"],
        },
    }


@router.post("", status_code=201)
async def create_project(data: ProjectCreate, request: Request, admin: dict = Depends(get_current_admin)):
    doc = data.to_document()
    doc["image"] = normalize_image_url(doc["image"], get_base_url(request))

    filename = extract_image_filename(doc["image"])
    if filename:
        record = ProjectImageService().get_by_filename(filename)
        if record and not os.path.exists(record["filePath"]):
            raise HTTPException(
                status_code=400,
                detail="Image file not found on server. Please upload the image again.",
            )

    project = ProjectService().create(doc)
    return {"success": True, "data": serialize_doc(project)}


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    request: Request,
    admin: dict = Depends(get_current_admin),
):
    fields = data.to_document(partial=True)
    # Required fields may be omitted but not cleared
    for required in ("title", "description", "category", "image"):
        if required in fields and fields[required] is None:
            raise HTTPException(status_code=400, detail=f"Project {required} cannot be empty")
    if fields.get("image"):
        fields["image"] = normalize_image_url(fields["image"], get_base_url(request))

    project = ProjectService().update(project_id, fields)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return {"success": True, "data": serialize_doc(project)}


@router.delete("/{project_id}")
async def delete_project(project_id: str, admin: dict = Depends(get_current_admin)):
    """Delete a project, dropping its image record when no other project uses it."""
    projects = ProjectService()
    project = projects.get(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    filename = extract_image_filename(project.get("image"))
    if filename:
        images = ProjectImageService()
        record = images.get_by_filename(filename)
        if record and projects.others_using_image(project["_id"], filename) == 0:
            images.delete(record["_id"])

    projects.delete(project_id)
    return {"success": True, "message": "Project deleted successfully"}

