import logging
import re
from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from fastapi import HTTPException
from jose import ExpiredSignatureError
from pydantic import ValidationError

from app.core.auth import (
    create_access_token,
    decode_token,
    hash_password,
    is_password_hash,
    password_needs_rehash,
    verify_password,
)
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.schemas.schemas import ContactCreate, ProjectUpdate
from app.services.mongo_service import serialize_doc, to_object_id
from app.utils.file_upload import (
    get_file_extension,
    is_allowed_cv,
    is_allowed_image,
    make_stored_filename,
)
from app.utils.urls import extract_image_filename, normalize_image_url


class TestImageUrls:
    def test_normalize_relative_path(self):
        assert normalize_image_url("/images/a.png", "http://localhost:5000") == "http://localhost:5000/images/a.png"
        assert normalize_image_url("/images/a.png", "http://localhost:5000/") == "http://localhost:5000/images/a.png"

    def test_normalize_leaves_other_values(self):
        assert normalize_image_url("", "http://x") == ""
        assert normalize_image_url(None, "http://x") is None
        assert normalize_image_url("https://cdn.example.com/a.png", "http://x") == "https://cdn.example.com/a.png"
        assert normalize_image_url("images/a.png", "http://x") == "images/a.png"

    def test_extract_filename(self):
        assert extract_image_filename("http://x/images/project-1-2.png") == "project-1-2.png"
        assert extract_image_filename("/images/hero.png?v=3") == "hero.png"
        assert extract_image_filename("https://cdn.example.com/a.png") is None
        assert extract_image_filename("/images/") is None
        assert extract_image_filename(None) is None


class TestFileRules:
    def test_extension(self):
        assert get_file_extension("Photo.JPG") == ".jpg"
        assert get_file_extension("archive.tar.gz") == ".gz"
        assert get_file_extension("README") == ""

    def test_stored_filename(self):
        name = make_stored_filename("cv", "My Resume.pdf")
        assert re.fullmatch(r"cv-\d+-\d+\.pdf", name)

    def test_image_types(self):
        assert is_allowed_image("a.webp", "image/webp")
        assert is_allowed_image("a.png", "")
        assert is_allowed_image("blob", "image/jpeg")
        assert not is_allowed_image("a.svg", "image/svg+xml")
        assert not is_allowed_image("a.txt", "text/plain")

    def test_cv_types(self):
        assert is_allowed_cv("cv.pdf", "application/pdf")
        assert is_allowed_cv("cv.docx", "application/octet-stream")
        assert is_allowed_cv("blob", "application/msword")
        assert not is_allowed_cv("cv.txt", "text/plain")


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert is_password_hash(hashed)
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)
        assert not password_needs_rehash(hashed)

    def test_existing_hash_is_not_hashed_again(self):
        hashed = hash_password("secret123")
        assert hash_password(hashed) == hashed

    def test_verify_against_garbage(self):
        assert not verify_password("secret123", "not-a-hash")
        assert not verify_password("secret123", "")


class TestTokens:
    def test_round_trip(self):
        admin_id = str(ObjectId())
        payload = decode_token(create_access_token(admin_id))
        assert payload["id"] == admin_id
        assert payload["exp"] > datetime.now(timezone.utc).timestamp()

    def test_expired(self):
        token = create_access_token("abc", expires_delta=timedelta(seconds=-1))
        with pytest.raises(ExpiredSignatureError):
            decode_token(token)


class TestSchemasAndSerialization:
    def test_contact_escapes_html(self):
        contact = ContactCreate(name="<Ann>", email="ANN@Gmail.com", subject="Hi", message="a & b")
        assert contact.name == "&lt;Ann&gt;"
        assert contact.email == "ann@gmail.com"
        assert contact.message == "a &amp; b"

    def test_contact_rejects_long_message(self):
        with pytest.raises(ValidationError):
            ContactCreate(name="Ann", email="ann@gmail.com", subject="Hi", message="x" * 5001)

    def test_partial_document_keeps_only_sent_fields(self):
        update = ProjectUpdate.model_validate({"liveUrl": "https://x.dev", "featured": True})
        assert update.to_document(partial=True) == {"liveUrl": "https://x.dev", "featured": True}

    def test_serialize_doc(self):
        oid = ObjectId()
        created = datetime(2024, 1, 2, 3, 4, 5)
        doc = serialize_doc({"_id": oid, "createdAt": created, "items": [{"ref": oid}]})
        assert doc == {
            "_id": str(oid),
            "createdAt": "2024-01-02T03:04:05+00:00",
            "items": [{"ref": str(oid)}],
        }

    def test_to_object_id(self):
        oid = ObjectId()
        assert to_object_id(str(oid)) == oid
        with pytest.raises(HTTPException) as exc:
            to_object_id("nope")
        assert exc.value.status_code == 400


def test_setup_logging_level_override_and_default():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG

        setup_logging()
        assert root.level == logging.getLevelName(get_settings().log_level.upper())

        handlers = [h for h in root.handlers if getattr(h, "_portfolio_handler", False)]
        assert len(handlers) == 1
    finally:
        root.setLevel(previous)
