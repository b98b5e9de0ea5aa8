from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from database import get_db
from schemas.url import ShortenRequest, ShortenResponse
from services.url_service import build_short_url, create_mapping, get_original_url


router = APIRouter(tags=["urls"])


@router.post("/shorten", response_model=ShortenResponse, status_code=status.HTTP_201_CREATED)
def shorten_url(request: ShortenRequest, db: Session = Depends(get_db)):
    """
    Create a shortened URL.

    - **url**: The absolute URL to shorten (required)
    - **custom_id**: Optional identifier to use instead of a random one
      (letters, digits, _ and -)
    """
    mapping = create_mapping(db, request)
    return ShortenResponse(url=build_short_url(mapping.id))


# Redirect router - catches every single-segment path, include it last
redirect_router = APIRouter(tags=["redirect"])


@redirect_router.get("/{mapping_id}")
def redirect_to_url(mapping_id: str, db: Session = Depends(get_db)):
    """
    Redirect to the original URL.

    - **mapping_id**: The short identifier
    """
    original_url = get_original_url(db, mapping_id)
    return RedirectResponse(url=original_url, status_code=status.HTTP_303_SEE_OTHER)
