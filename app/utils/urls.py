"""
URL helpers for files served from /images.

Uploaded images are referenced either by a relative path (/images/<file>) or by
the absolute URL the server handed out at upload time.
"""

from typing import Optional

from fastapi import Request

from app.core.config import get_settings

IMAGES_PREFIX = "/images/"


def get_base_url(request: Request) -> str:
    """scheme://host of the incoming request, honouring proxy headers if trusted."""
    scheme = request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    if get_settings().trust_proxy:
        scheme = request.headers.get("x-forwarded-proto", scheme).split(",")[0].strip()
        host = request.headers.get("x-forwarded-host", host).split(",")[0].strip()
    return f"{scheme}://{host}"


def normalize_image_url(image_url: Optional[str], base_url: str) -> Optional[str]:
    """
    Turn a relative /images/ path into an absolute URL.

    Absolute http(s) URLs and anything else are returned unchanged.
    """
    if not image_url:
        return image_url
    if image_url.startswith(("http://", "https://")):
        return image_url
    if image_url.startswith(IMAGES_PREFIX):
        return f"{base_url.rstrip('/')}{image_url}"
    return image_url


def extract_image_filename(image_url: Optional[str]) -> Optional[str]:
    """Filename of a served image, from a relative path or absolute URL; None otherwise."""
    if not image_url or IMAGES_PREFIX not in image_url:
        return None
    filename = image_url.split(IMAGES_PREFIX, 1)[1].split("?", 1)[0]
    return filename or None
