"""
Portfolio API - Test Configuration and Fixtures
"""
import os
import shutil
import tempfile
from typing import AsyncGenerator

import mongomock
import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient

# Set testing environment before the app reads its settings
TEST_PUBLIC_DIR = tempfile.mkdtemp(prefix="portfolio-test-")
os.environ['ENVIRONMENT'] = 'testing'
os.environ['MONGODB_DB'] = 'portfolio_test'
os.environ['JWT_SECRET'] = 'test-jwt-secret-key-for-testing-only'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['PUBLIC_DIR'] = TEST_PUBLIC_DIR
os.environ['EMAIL_USER'] = ''
os.environ['EMAIL_PASS'] = ''

from app.main import app
from app.core.auth import create_access_token
from app.core.config import get_settings
from app.db.mongodb import init_mongo_indexes, set_mongo_client
from app.services.mongo_service import AdminUserService

fake = Faker()

ADMIN_PASSWORD = 'adminpassword123'

# Smallest valid images/documents are not needed; the server only checks type and size
PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64
PDF_BYTES = b'%PDF-1.4\n%test\n' + b'0' * 64


@pytest.fixture(autouse=True)
def mongo_db():
    """Fresh in-memory MongoDB for every test"""
    client = mongomock.MongoClient()
    set_mongo_client(client)
    init_mongo_indexes()
    yield client[get_settings().mongodb_db]
    set_mongo_client(None)


@pytest.fixture(autouse=True)
def clean_public_dir():
    """Empty the upload directories after each test"""
    yield
    settings = get_settings()
    for directory in (settings.images_dir, settings.cv_dir):
        shutil.rmtree(directory, ignore_errors=True)
        os.makedirs(directory, exist_ok=True)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac


@pytest.fixture
def admin_user() -> dict:
    """Create the admin account"""
    return AdminUserService().create('admin', 'admin@gmail.com', ADMIN_PASSWORD)


@pytest.fixture
def auth_headers(admin_user: dict) -> dict:
    """Generate authentication headers for the admin"""
    token = create_access_token(str(admin_user['_id']))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def contact_data() -> dict:
    return {
        'name': fake.name(),
        'email': 'Visitor.Test@gmail.com',
        'subject': 'Project inquiry',
        'message': 'I would like to discuss a new website.',
    }


@pytest.fixture
def feedback_data() -> dict:
    return {
        'name': fake.name(),
        'email': 'Happy.Client@gmail.com',
        'rating': 5,
        'feedback': 'Great work on the site!',
    }


@pytest.fixture
def project_data() -> dict:
    return {
        'title': 'Weather Dashboard',
        'description': 'A dashboard showing forecasts for saved cities.',
        'category': 'Website Design',
        'image': 'https://example.com/weather.png',
        'technologies': ['React', 'FastAPI'],
        'liveUrl': 'https://weather.example.com',
        'githubUrl': '',
        'featured': True,
    }
