"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.admin_routes import router as admin_router
from app.api.routes.hero_routes import router as hero_router
from app.api.routes.about_routes import router as about_router
from app.api.routes.service_routes import router as service_router
from app.api.routes.education_routes import router as education_router
from app.api.routes.project_routes import router as project_router
from app.api.routes.contact_routes import router as contact_router
from app.api.routes.feedback_routes import router as feedback_router
from app.api.routes.cv_routes import router as cv_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(admin_router)
api_router.include_router(hero_router)
api_router.include_router(about_router)
api_router.include_router(service_router)
api_router.include_router(education_router)
api_router.include_router(project_router)
api_router.include_router(contact_router)
api_router.include_router(feedback_router)
api_router.include_router(cv_router)
