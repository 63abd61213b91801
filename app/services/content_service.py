"""
Content Service - singleton documents behind the page sections.

heroes, abouts, services and educations each hold at most one document.
Reads return that document; writes update it in place, or create it on first
write using the section's fallback values for fields the client left out.
"""

import logging
import os
from typing import Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection

from app.core.config import get_settings
from app.db.mongodb import COLLECTIONS, get_collection
from app.services.mongo_service import stamp_new, utcnow
from app.utils.defaults import (
    DEFAULT_ABOUT,
    DEFAULT_EDUCATION_DESCRIPTION,
    DEFAULT_HERO,
)
from app.utils.file_upload import StoredFile, delete_file
from app.utils.urls import extract_image_filename

logger = logging.getLogger(__name__)


class SingletonContentService:
    collection_key: str = ""
    # Values used for fields missing from the first write
    create_fallbacks: dict = {}
    # Document created on first read; None means reads of a missing doc return None
    read_defaults: Optional[dict] = None

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS[self.collection_key])

    def get(self) -> Optional[dict]:
        doc = self.collection.find_one({})
        if doc is None and self.read_defaults is not None:
            doc = self.collection.find_one_and_update(
                {},
                {"$setOnInsert": stamp_new(dict(self.read_defaults))},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            logger.info("Created default %s document", self.collection_key)
        return doc

    def update(self, fields: dict) -> dict:
        """Apply a partial update, creating the document if it does not exist yet."""
        now = utcnow()
        on_insert = {k: v for k, v in self.create_fallbacks.items() if k not in fields}
        on_insert["createdAt"] = now
        return self.collection.find_one_and_update(
            {},
            {"$set": {**fields, "updatedAt": now}, "$setOnInsert": on_insert},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    def replace(self, doc: dict) -> dict:
        """Drop whatever is stored and write doc as the only document."""
        self.collection.delete_many({})
        doc = stamp_new(dict(doc))
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc


class ImageContentService(SingletonContentService):
    """Singleton with an `image` field that can be replaced by an upload."""
    image_prefix: str = ""

    def replace_image(self, stored: StoredFile, full_image_url: str) -> dict:
        """
        Point the document at a freshly uploaded image.

        The previous image file is removed when it is one of ours
        (a <prefix>- file in the images directory). The saved URL is read back
        and verified.
        """
        current = self.collection.find_one({})
        if current and current.get("image"):
            old_filename = extract_image_filename(current["image"])
            if old_filename and old_filename.startswith(f"{self.image_prefix}-") and old_filename != stored.filename:
                old_path = os.path.join(get_settings().images_dir, old_filename)
                if delete_file(old_path):
                    logger.info("Deleted old %s image %s", self.image_prefix, old_filename)

        doc = self.update({"image": full_image_url})

        verified = self.collection.find_one({"_id": doc["_id"]})
        if verified is None:
            raise RuntimeError(f"Failed to retrieve {self.collection_key} from database after save")
        if verified.get("image") != full_image_url:
            logger.error(
                "Image URL mismatch in database: expected=%s actual=%s",
                full_image_url,
                verified.get("image"),
            )
            raise RuntimeError("Image URL was not saved correctly to database")
        return verified


class HeroService(ImageContentService):
    collection_key = "hero"
    image_prefix = "hero"
    create_fallbacks = DEFAULT_HERO
    read_defaults = DEFAULT_HERO


class AboutService(ImageContentService):
    collection_key = "about"
    image_prefix = "about"
    create_fallbacks = {
        "description": DEFAULT_ABOUT["description"],
        "skills": [],
        "highlights": [],
        "mission": "",
        "image": "",
    }


class ServiceSectionService(SingletonContentService):
    collection_key = "services"
    create_fallbacks = {"sectionTitle": "", "sectionDescription": "", "services": []}

    def get_item(self, slug: str) -> Optional[dict]:
        """A single service entry by slug; None if the section or entry is missing."""
        section = self.get()
        if section is None:
            return None
        for item in section.get("services", []):
            if item.get("slug") == slug:
                return item
        return None


class EducationService(SingletonContentService):
    collection_key = "education"
    create_fallbacks = {
        "sectionTitle": "Education",
        "sectionDescription": DEFAULT_EDUCATION_DESCRIPTION,
        "educationItems": [],
    }
