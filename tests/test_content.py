import os

import pytest
from httpx import AsyncClient

from app.core.config import get_settings
from tests.conftest import PNG_BYTES


# ============================================================
# HERO
# ============================================================

@pytest.mark.asyncio
async def test_get_hero_creates_defaults(client: AsyncClient, mongo_db):
    assert mongo_db["heroes"].count_documents({}) == 0

    response = await client.get("/api/hero")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["greeting"] == "Hi I am"
    assert "linkedinUrl" in data
    assert "createdAt" in data
    assert mongo_db["heroes"].count_documents({}) == 1

    # Second read returns the same document
    again = await client.get("/api/hero")
    assert again.json()["data"]["_id"] == data["_id"]


@pytest.mark.asyncio
async def test_update_hero_requires_auth(client: AsyncClient):
    response = await client.put("/api/hero", json={"name": "Someone"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_hero_partial(client: AsyncClient, auth_headers, mongo_db):
    await client.get("/api/hero")

    response = await client.put(
        "/api/hero",
        json={"name": "Jane Doe", "githubUrl": "https://github.com/jane", "image": "/images/me.png"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Jane Doe"
    assert data["githubUrl"] == "https://github.com/jane"
    assert data["image"] == "http://test/images/me.png"
    # Untouched fields keep their values
    assert data["greeting"] == "Hi I am"
    assert mongo_db["heroes"].count_documents({}) == 1


@pytest.mark.asyncio
async def test_update_hero_rejects_cleared_required_fields(client: AsyncClient, auth_headers):
    await client.get("/api/hero")

    nulled = await client.put("/api/hero", json={"name": None}, headers=auth_headers)
    blank = await client.put("/api/hero", json={"designation": "   "}, headers=auth_headers)

    assert nulled.status_code == 400
    assert any(err["field"] == "name" for err in nulled.json()["errors"])
    assert blank.status_code == 400
    assert any(err["field"] == "designation" for err in blank.json()["errors"])

    hero = (await client.get("/api/hero")).json()["data"]
    assert hero["name"]
    assert hero["designation"]


@pytest.mark.asyncio
async def test_get_hero_normalizes_relative_image(client: AsyncClient, mongo_db):
    mongo_db["heroes"].insert_one({"name": "Jane", "image": "/images/hero-1.png"})

    response = await client.get("/api/hero", headers={"x-forwarded-proto": "https"})

    assert response.json()["data"]["image"] == "https://test/images/hero-1.png"


@pytest.mark.asyncio
async def test_upload_hero_image_replaces_previous_file(client: AsyncClient, auth_headers):
    first = await client.post(
        "/api/hero/upload-image",
        files={"image": ("me.png", PNG_BYTES, "image/png")},
        headers=auth_headers,
    )
    assert first.status_code == 200
    first_data = first.json()["data"]
    assert first_data["filename"].startswith("hero-")
    assert first_data["imageUrl"] == f"/images/{first_data['filename']}"
    assert first_data["fullImageUrl"] == f"http://test/images/{first_data['filename']}"
    assert first_data["hero"]["imageInDB"] is True

    images_dir = get_settings().images_dir
    first_path = os.path.join(images_dir, first_data["filename"])
    assert os.path.exists(first_path)

    second = await client.post(
        "/api/hero/upload-image",
        files={"image": ("me-again.png", PNG_BYTES, "image/png")},
        headers=auth_headers,
    )
    assert second.status_code == 200
    second_name = second.json()["data"]["filename"]

    assert not os.path.exists(first_path)
    assert os.path.exists(os.path.join(images_dir, second_name))

    hero = (await client.get("/api/hero")).json()["data"]
    assert hero["image"] == f"http://test/images/{second_name}"


@pytest.mark.asyncio
async def test_upload_hero_image_validation(client: AsyncClient, auth_headers):
    missing = await client.post("/api/hero/upload-image", headers=auth_headers)
    wrong_type = await client.post(
        "/api/hero/upload-image",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=auth_headers,
    )
    too_large = await client.post(
        "/api/hero/upload-image",
        files={"image": ("big.png", b"0" * (5 * 1024 * 1024 + 1), "image/png")},
        headers=auth_headers,
    )

    assert missing.status_code == 400
    assert missing.json()["message"] == "Please upload an image file"
    assert wrong_type.status_code == 400
    assert "Invalid file type" in wrong_type.json()["message"]
    assert too_large.status_code == 413


# ============================================================
# ABOUT
# ============================================================

@pytest.mark.asyncio
async def test_get_about_missing(client: AsyncClient):
    response = await client.get("/api/about")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "About section not found",
        "detail": "About section not found",
    }


@pytest.mark.asyncio
async def test_update_about_creates_section(client: AsyncClient, auth_headers):
    response = await client.put(
        "/api/about",
        json={
            "skills": [{"name": "Python", "progress": 95, "color": "bg-blue-600"}],
            "mission": "Build useful things",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["skills"] == [{"name": "Python", "progress": 95, "color": "bg-blue-600"}]
    assert data["mission"] == "Build useful things"
    # Fields left out of the first write get their fallback values
    assert data["description"]
    assert data["highlights"] == []

    fetched = await client.get("/api/about")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["_id"] == data["_id"]


@pytest.mark.asyncio
async def test_update_about_rejects_empty_description(client: AsyncClient, auth_headers):
    nulled = await client.put("/api/about", json={"description": None}, headers=auth_headers)
    blank = await client.put("/api/about", json={"description": ""}, headers=auth_headers)

    assert nulled.status_code == 400
    assert blank.status_code == 400
    assert (await client.get("/api/about")).status_code == 404


@pytest.mark.asyncio
async def test_update_about_rejects_bad_skill(client: AsyncClient, auth_headers):
    response = await client.put(
        "/api/about",
        json={"skills": [{"name": "Python", "progress": 150}]},
        headers=auth_headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["field"] == "skills.0.progress"


# ============================================================
# SERVICES
# ============================================================

SERVICES_PAYLOAD = {
    "sectionTitle": "Services",
    "sectionDescription": "What I do",
    "services": [
        {
            "slug": "web-development",
            "title": "Web Development",
            "icon": "Monitor",
            "shortDescription": "Sites and web apps",
            "fullDescription": "Full stack web development",
            "features": ["Responsive design"],
            "process": [{"step": "01", "title": "Plan", "description": "Gather requirements"}],
            "color": "green",
            "order": 1,
        },
        {
            "slug": "app-development",
            "title": "App Development",
            "icon": "Smartphone",
            "shortDescription": "Mobile apps",
            "fullDescription": "Native and cross-platform apps",
        },
    ],
}


@pytest.mark.asyncio
async def test_get_services_missing(client: AsyncClient):
    assert (await client.get("/api/services")).status_code == 404
    assert (await client.get("/api/services/web-development")).status_code == 404


@pytest.mark.asyncio
async def test_update_and_get_services(client: AsyncClient, auth_headers):
    response = await client.put("/api/services", json=SERVICES_PAYLOAD, headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()["data"]["services"]) == 2

    section = await client.get("/api/services")
    assert section.status_code == 200
    assert section.json()["data"]["sectionDescription"] == "What I do"

    item = await client.get("/api/services/web-development")
    assert item.status_code == 200
    assert item.json()["data"]["process"][0]["title"] == "Plan"

    defaults_filled = (await client.get("/api/services/app-development")).json()["data"]
    assert defaults_filled["features"] == []

    missing = await client.get("/api/services/unknown-slug")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Service not found"


@pytest.mark.asyncio
async def test_update_services_rejects_duplicate_slugs(client: AsyncClient, auth_headers):
    payload = dict(SERVICES_PAYLOAD)
    payload["services"] = [SERVICES_PAYLOAD["services"][0], SERVICES_PAYLOAD["services"][0]]

    response = await client.put("/api/services", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert "web-development" in response.json()["errors"][0]["message"]


@pytest.mark.asyncio
async def test_update_services_rejects_unknown_icon(client: AsyncClient, auth_headers):
    payload = dict(SERVICES_PAYLOAD)
    payload["services"] = [dict(SERVICES_PAYLOAD["services"][0], icon="Rocket")]

    response = await client.put("/api/services", json=payload, headers=auth_headers)

    assert response.status_code == 400


# ============================================================
# EDUCATION
# ============================================================

@pytest.mark.asyncio
async def test_education_lifecycle(client: AsyncClient, auth_headers):
    assert (await client.get("/api/education")).status_code == 404

    response = await client.put(
        "/api/education",
        json={
            "educationItems": [
                {"degree": "B.Sc.", "collegeName": "City College", "year": "2019 - 2022"},
            ]
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sectionTitle"] == "Education"
    assert data["sectionDescription"]
    item = data["educationItems"][0]
    assert item["collegeName"] == "City College"
    assert item["institution"] == ""
    assert item["order"] == 0

    assert (await client.get("/api/education")).status_code == 200


@pytest.mark.asyncio
async def test_update_education_rejects_cleared_section_text(client: AsyncClient, auth_headers):
    nulled = await client.put("/api/education", json={"sectionTitle": None}, headers=auth_headers)
    blank = await client.put("/api/education", json={"sectionDescription": ""}, headers=auth_headers)

    assert nulled.status_code == 400
    assert any(err["field"] == "sectionTitle" for err in nulled.json()["errors"])
    assert blank.status_code == 400
    assert any(err["field"] == "sectionDescription" for err in blank.json()["errors"])


@pytest.mark.asyncio
async def test_education_item_requires_college_name(client: AsyncClient, auth_headers):
    response = await client.put(
        "/api/education",
        json={"educationItems": [{"degree": "B.Sc.", "year": "2022"}]},
        headers=auth_headers,
    )

    assert response.status_code == 400
