"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Python attributes are snake_case; the wire format (and the stored MongoDB
documents) use camelCase, e.g. ``linkedin_url`` <-> ``linkedinUrl``.
"""

import html
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_document(self, partial: bool = False) -> dict:
        """
        Dump with camelCase keys.

        partial=True keeps only the top-level fields the client sent; nested
        models are always dumped whole so their defaults are stored.
        """
        if partial:
            return self.model_dump(by_alias=True, mode="json", include=set(self.model_fields_set))
        return self.model_dump(by_alias=True, mode="json")


def not_null(v: Optional[str], info: ValidationInfo) -> str:
    """Required fields may be left out of a partial update but not sent as null."""
    if v is None:
        raise ValueError(f"{to_camel(info.field_name)} cannot be empty")
    return v


# ============================================================
# ENUMS
# ============================================================

class ProjectCategory(str, Enum):
    website_design = "Website Design"
    app_design = "App Design"


ServiceIcon = Literal["Smartphone", "Monitor", "Code"]
ServiceColor = Literal["purple", "green", "blue", "red", "orange"]


# ============================================================
# ADMIN / AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    # Checked by hand in the route so blank values get the same 400 message
    username: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=200)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Please provide a username")
        return v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class ResetPasswordRequest(CamelModel):
    username: str = ""
    new_password: str = ""


class AdminUserOut(BaseModel):
    id: str
    username: str
    email: str


class TokenResponse(BaseModel):
    success: bool = True
    token: str
    user: AdminUserOut


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ============================================================
# HERO / ABOUT
# ============================================================

class HeroUpdate(CamelModel):
    greeting: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    designation: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    image: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name", "designation", "description")
    @classmethod
    def required_if_sent(cls, v: Optional[str], info: ValidationInfo) -> str:
        return not_null(v, info)


class AboutSkill(CamelModel):
    name: str = Field(..., min_length=1)
    progress: int = Field(..., ge=0, le=100)
    color: Optional[str] = None


class AboutHighlight(CamelModel):
    value: Optional[str] = None
    label: Optional[str] = None
    detail: Optional[str] = None


class AboutUpdate(CamelModel):
    description: Optional[str] = Field(None, min_length=1)
    skills: Optional[List[AboutSkill]] = None
    highlights: Optional[List[AboutHighlight]] = None
    mission: Optional[str] = None
    image: Optional[str] = None

    @field_validator("description")
    @classmethod
    def required_if_sent(cls, v: Optional[str], info: ValidationInfo) -> str:
        return not_null(v, info)


# ============================================================
# SERVICES
# ============================================================

class ServiceProcessStep(CamelModel):
    step: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class ServiceItem(CamelModel):
    slug: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    icon: Optional[ServiceIcon] = None
    short_description: str = Field(..., min_length=1)
    full_description: str = Field(..., min_length=1)
    features: List[str] = []
    process: List[ServiceProcessStep] = []
    color: Optional[ServiceColor] = None
    order: Optional[int] = None


class ServicesUpdate(CamelModel):
    section_title: Optional[str] = None
    section_description: Optional[str] = None
    services: Optional[List[ServiceItem]] = None

    @field_validator("services")
    @classmethod
    def unique_slugs(cls, v):
        if v is None:
            return v
        slugs = [item.slug for item in v]
        duplicates = sorted({s for s in slugs if slugs.count(s) > 1})
        if duplicates:
            raise ValueError(f"Duplicate service slug(s): {', '.join(duplicates)}")
        return v


# ============================================================
# EDUCATION
# ============================================================

class EducationItem(CamelModel):
    degree: str = Field(..., min_length=1)
    institution: str = ""
    college_name: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)
    percentage: str = ""
    description: str = ""
    order: int = 0


class EducationUpdate(CamelModel):
    section_title: Optional[str] = Field(None, min_length=1)
    section_description: Optional[str] = Field(None, min_length=1)
    education_items: Optional[List[EducationItem]] = None

    @field_validator("section_title", "section_description")
    @classmethod
    def required_if_sent(cls, v: Optional[str], info: ValidationInfo) -> str:
        return not_null(v, info)


# ============================================================
# PROJECTS
# ============================================================

class ProjectCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: ProjectCategory = ProjectCategory.website_design
    image: str = Field(..., min_length=1)
    technologies: List[str] = []
    live_url: str = ""
    github_url: str = ""
    featured: bool = False


class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[ProjectCategory] = None
    image: Optional[str] = Field(None, min_length=1)
    technologies: Optional[List[str]] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: Optional[bool] = None


# ============================================================
# CONTACT / FEEDBACK
# ============================================================

class ContactCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("name", "subject", "message")
    @classmethod
    def escape_html(cls, v: str) -> str:
        return html.escape(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("Email must be less than 255 characters")
        return v.lower()


class FeedbackCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: EmailStr
    rating: int = Field(..., ge=1, le=5)
    feedback: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()
