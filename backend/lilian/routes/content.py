"""Content routes.

Public read endpoints used by the site, plus admin CRUD under /admin/content.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile

from lilian.dependencies import get_content_service
from lilian.models.content import ContentCreate, ContentRead
from lilian.services.content_service import ContentService
from lilian.services.errors import (
    ImageTooLargeError,
    InvalidInputError,
    NotFoundError,
    UnprocessableImageError,
)
from lilian.services.image_service import OUTPUT_MIME_TYPE

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------


@router.get("/content/published", response_model=List[ContentRead])
def list_published_content(service: ContentService = Depends(get_content_service)):
    return service.get_published()


@router.get("/content/section/{section}", response_model=List[ContentRead])
def list_section_content(section: str, service: ContentService = Depends(get_content_service)):
    """Published content of one section"""
    return service.get_by_section(section)


@router.get("/content/single/{section}", response_model=ContentRead)
def get_single_section_content(section: str, service: ContentService = Depends(get_content_service)):
    """Most recent published content of a section; 204 when there is none"""
    content = service.get_single_by_section(section)
    if content is None:
        return Response(status_code=204)
    return content


@router.get("/content/upcoming", response_model=List[ContentRead])
def list_upcoming_content(service: ContentService = Depends(get_content_service)):
    """Newest events, talks and social posts (max 8)"""
    return service.get_upcoming()


@router.get("/content/image/{content_id}")
def get_content_image(content_id: int, service: ContentService = Depends(get_content_service)):
    content = service.get_by_id(content_id)
    if content is None or content.image_data is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return Response(
        content=content.image_data,
        media_type=content.image_type or OUTPUT_MIME_TYPE,
        headers={"Content-Disposition": "inline"},
    )


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------


@router.get("/admin/content", response_model=List[ContentRead])
def list_all_content(service: ContentService = Depends(get_content_service)):
    return service.get_all()


@router.get("/admin/content/{content_id}", response_model=ContentRead)
def get_content(content_id: int, service: ContentService = Depends(get_content_service)):
    content = service.get_by_id(content_id)
    if content is None:
        raise HTTPException(status_code=404, detail="Content not found")
    return content


@router.post("/admin/content", response_model=ContentRead, status_code=201)
def create_content(content_data: ContentCreate, service: ContentService = Depends(get_content_service)):
    try:
        return service.create(content_data)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/admin/content/with-image", response_model=ContentRead, status_code=201)
def create_content_with_image(
    section: str = Form(...),
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    subtitle: Optional[str] = Form(None),
    button_text1: Optional[str] = Form(None),
    button_url1: Optional[str] = Form(None),
    published: Optional[bool] = Form(None),
    image_file: Optional[UploadFile] = File(None),
    service: ContentService = Depends(get_content_service),
):
    """Create content from the admin form, compressing the optional image"""
    raw = image_file.file.read() if image_file is not None else None
    try:
        return service.create_with_image(
            section=section,
            title=title,
            content=content,
            subtitle=subtitle,
            button_text1=button_text1,
            button_url1=button_url1,
            published=published,
            image_file=raw,
        )
    except (InvalidInputError, ImageTooLargeError, UnprocessableImageError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/admin/content/{content_id}", response_model=ContentRead)
def update_content(
    content_id: int,
    content_data: ContentCreate,
    service: ContentService = Depends(get_content_service),
):
    """Replace every editable field; the image is kept unless new image_data is sent"""
    try:
        return service.update(content_id, content_data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/admin/content/{content_id}", status_code=204)
def delete_content(content_id: int, service: ContentService = Depends(get_content_service)):
    service.delete(content_id)
    return Response(status_code=204)


@router.post("/admin/content/upload-image")
def upload_image(file: UploadFile = File(...), service: ContentService = Depends(get_content_service)):
    """Compress an image and return it without storing anything"""
    try:
        compressed = service.process_image(file.file.read())
    except (ImageTooLargeError, UnprocessableImageError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(content=compressed, media_type=OUTPUT_MIME_TYPE)
