"""
MongoDB Connection Utility

Collections:
- heroes, abouts, services, educations: singleton page content
- projects, projectimages: portfolio entries and their uploaded images
- messages, feedbacks: visitor submissions
- cvs: uploaded CV records (latest wins)
- adminusers: dashboard credentials
"""
import logging
from typing import Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(settings.mongodb_uri, serverSelectionTimeoutMS=5000)
    return _client


def set_mongo_client(client: Optional[MongoClient]) -> None:
    """Replace the global client (used by scripts and tests). None resets it."""
    global _client, _db
    _client = client
    _db = None


def close_mongo_client() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
        logger.info("MongoDB connection closed")
    _client = None
    _db = None


def get_mongo_db() -> Database:
    """Get the portfolio database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by its COLLECTIONS key or raw name."""
    db = get_mongo_db()
    return db[COLLECTIONS.get(name, name)]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "hero": "heroes",
    "about": "abouts",
    "services": "services",
    "education": "educations",
    "projects": "projects",
    "project_images": "projectimages",
    "messages": "messages",
    "feedback": "feedbacks",
    "cvs": "cvs",
    "admin_users": "adminusers",
}


def init_mongo_indexes():
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # Admin credentials are unique per username and per email
    db[COLLECTIONS["admin_users"]].create_index([("username", ASCENDING)], unique=True)
    db[COLLECTIONS["admin_users"]].create_index([("email", ASCENDING)], unique=True)

    # Image lookups happen by filename extracted from a project's image URL
    db[COLLECTIONS["project_images"]].create_index([("filename", ASCENDING)])
    db[COLLECTIONS["project_images"]].create_index([("createdAt", DESCENDING)])

    # Listings are newest first
    for key in ("projects", "messages", "feedback", "cvs"):
        db[COLLECTIONS[key]].create_index([("createdAt", DESCENDING)])

    logger.info("MongoDB indexes created successfully")
