"""
MongoDB Service - CRUD operations for collection-backed resources.

Collections handled here:
1. projects       - Portfolio entries
2. projectimages  - Metadata for uploaded project images
3. messages       - Contact form submissions
4. feedbacks      - Visitor feedback with a 1-5 rating
5. cvs            - Uploaded CV records (only the latest is kept)
6. adminusers     - Dashboard credentials

Singleton page content (hero, about, services, education) lives in
content_service.py.
"""

import re
from datetime import datetime, timezone
from typing import Any, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from app.core.auth import hash_password
from app.db.mongodb import COLLECTIONS, get_collection

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


# ============================================================
# HELPERS
# ============================================================

def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(id_str: Any) -> ObjectId:
    """Parse a path/body id, answering 400 for anything that is not an ObjectId."""
    if isinstance(id_str, ObjectId):
        return id_str
    try:
        return ObjectId(str(id_str))
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail="Invalid ID")


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    return serialize_value(dict(doc))


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def stamp_new(doc: dict) -> dict:
    now = utcnow()
    doc["createdAt"] = now
    doc["updatedAt"] = now
    return doc


# ============================================================
# PROJECTS
# ============================================================

class ProjectService:
    """Portfolio project entries."""

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["projects"])

    def list(self, category: Optional[str] = None) -> List[dict]:
        """All projects newest first; 'All' or empty category means no filter."""
        query = {"category": category} if category and category != "All" else {}
        return list(self.collection.find(query, sort=NEWEST_FIRST))

    def get(self, project_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": to_object_id(project_id)})

    def create(self, data: dict) -> dict:
        doc = stamp_new(dict(data))
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def update(self, project_id: str, data: dict) -> Optional[dict]:
        return self.collection.find_one_and_update(
            {"_id": to_object_id(project_id)},
            {"$set": {**data, "updatedAt": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, project_id: str) -> bool:
        result = self.collection.delete_one({"_id": to_object_id(project_id)})
        return result.deleted_count > 0

    def others_using_image(self, project_id: ObjectId, filename: str) -> int:
        """Count other projects whose image URL mentions this filename."""
        return self.collection.count_documents({
            "_id": {"$ne": project_id},
            "image": {"$regex": re.escape(filename)},
        })


# ============================================================
# PROJECT IMAGES
# ============================================================

class ProjectImageService:
    """
    Metadata for images uploaded through the dashboard.
    The file itself lives in the public images directory.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["project_images"])

    def insert(
        self,
        filename: str,
        original_name: str,
        file_path: str,
        relative_path: str,
        file_size: int,
        mime_type: str,
        uploaded_by: Optional[str] = None,
    ) -> dict:
        doc = stamp_new({
            "filename": filename,
            "originalName": original_name,
            "filePath": file_path,
            "relativePath": relative_path,
            "fileSize": file_size,
            "mimeType": mime_type,
            "width": None,
            "height": None,
            "uploadedBy": ObjectId(uploaded_by) if uploaded_by and ObjectId.is_valid(uploaded_by) else None,
        })
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def get(self, image_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": to_object_id(image_id)})

    def get_by_filename(self, filename: str) -> Optional[dict]:
        return self.collection.find_one({"filename": filename})

    def delete(self, image_id: ObjectId) -> bool:
        result = self.collection.delete_one({"_id": image_id})
        return result.deleted_count > 0


# ============================================================
# MESSAGES / FEEDBACK
# Both are visitor submissions the admin can read, mark and delete
# ============================================================

class SubmissionService:
    collection_key: str = ""

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS[self.collection_key])

    def insert(self, data: dict) -> dict:
        doc = stamp_new({**data, "read": False})
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def list(self) -> List[dict]:
        return list(self.collection.find({}, sort=NEWEST_FIRST))

    def mark_as_read(self, item_id: str) -> Optional[dict]:
        return self.collection.find_one_and_update(
            {"_id": to_object_id(item_id)},
            {"$set": {"read": True, "updatedAt": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, item_id: str) -> bool:
        result = self.collection.delete_one({"_id": to_object_id(item_id)})
        return result.deleted_count > 0


class MessageService(SubmissionService):
    """Contact form messages."""
    collection_key = "messages"


class FeedbackService(SubmissionService):
    """Visitor feedback."""
    collection_key = "feedback"


# ============================================================
# CV
# History collection: the newest record is the active CV
# ============================================================

class CVService:

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["cvs"])

    def get_current(self) -> Optional[dict]:
        """Most recent CV record, or None."""
        return self.collection.find_one({}, sort=NEWEST_FIRST)

    def list(self) -> List[dict]:
        return list(self.collection.find({}, sort=NEWEST_FIRST))

    def insert(self, filename: str, original_name: str, file_path: str, file_size: int, mime_type: str) -> dict:
        doc = stamp_new({
            "filename": filename,
            "originalName": original_name,
            "filePath": file_path,
            "fileSize": file_size,
            "mimeType": mime_type,
        })
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def update_path(self, cv_id: ObjectId, file_path: str) -> None:
        self.collection.update_one(
            {"_id": cv_id},
            {"$set": {"filePath": file_path, "updatedAt": utcnow()}},
        )

    def delete(self, cv_id: ObjectId) -> bool:
        result = self.collection.delete_one({"_id": cv_id})
        return result.deleted_count > 0


# ============================================================
# ADMIN USERS
# ============================================================

class AdminUserService:
    """
    Dashboard credentials. Usernames and emails are stored lower-cased and
    passwords are stored hashed.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["admin_users"])

    @staticmethod
    def public(doc: Optional[dict]) -> Optional[dict]:
        """Serialized admin without the password hash."""
        if doc is None:
            return None
        doc = serialize_doc(doc)
        doc.pop("password", None)
        return doc

    def count(self) -> int:
        return self.collection.count_documents({})

    def get_by_id(self, admin_id: str) -> Optional[dict]:
        if not ObjectId.is_valid(str(admin_id)):
            return None
        return self.collection.find_one({"_id": ObjectId(str(admin_id))})

    def get_public(self, admin_id: str) -> Optional[dict]:
        return self.public(self.get_by_id(admin_id))

    def get_by_username(self, username: str) -> Optional[dict]:
        return self.collection.find_one({"username": username.strip().lower()})

    def find_existing(self, username: str, email: str) -> Optional[dict]:
        return self.collection.find_one({
            "$or": [{"username": username.strip().lower()}, {"email": email.strip().lower()}]
        })

    def create(self, username: str, email: str, password: str) -> dict:
        if len(password) < 6:
            raise ValueError("Password must be at least 6 characters long")
        doc = stamp_new({
            "username": username.strip().lower(),
            "email": email.strip().lower(),
            "password": hash_password(password),
        })
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def set_password(self, admin_id: ObjectId, password: str) -> None:
        self.collection.update_one(
            {"_id": admin_id},
            {"$set": {"password": hash_password(password), "updatedAt": utcnow()}},
        )
