import secrets
import string
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import settings
from logging_config import get_logger
from models.url import UrlMapping
from schemas.url import ShortenRequest


logger = get_logger("service")

ID_ALPHABET = string.ascii_letters + string.digits


def generate_id(length: int = 10) -> str:
    """
    Generate a random short identifier

    Args:
        length: Number of characters

    Returns:
        str: Identifier drawn from a-z, A-Z and 0-9
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def build_short_url(mapping_id: str) -> str:
    """
    Build the public short URL for an identifier

    Uses BASE_URL when it is configured, otherwise http://HOST:PORT.
    """
    base_url = settings.BASE_URL or f"http://{settings.HOST}:{settings.PORT}"
    return f"{base_url.rstrip('/')}/{mapping_id}"


def _insert(db: Session, mapping_id: str, original_url: str) -> Optional[UrlMapping]:
    """
    Insert a mapping, returning None if the id is already taken.

    The primary key decides uniqueness, there is no lookup before the insert.
    """
    mapping = UrlMapping(id=mapping_id, original_url=original_url)
    db.add(mapping)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(mapping)
    return mapping


def get_mapping_by_url(db: Session, original_url: str) -> Optional[UrlMapping]:
    """Get the first mapping that points at original_url"""
    return db.query(UrlMapping).filter(UrlMapping.original_url == original_url).first()


def create_mapping(db: Session, request: ShortenRequest) -> UrlMapping:
    """
    Create a new mapping

    Args:
        db: Database session
        request: Validated shorten request

    Returns:
        UrlMapping: The stored mapping

    Raises:
        HTTPException: 409 if the custom id is taken, 500 if no free
            random id was found within ID_MAX_RETRIES attempts
    """
    if request.custom_id:
        mapping = _insert(db, request.custom_id, request.url)
        if mapping is None:
            logger.info(f"Custom id '{request.custom_id}' is already in use")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Custom id '{request.custom_id}' is already in use"
            )
        logger.info(f"Created mapping {mapping.id} -> {mapping.original_url}")
        return mapping

    if settings.DEDUPE_URLS:
        existing = get_mapping_by_url(db, request.url)
        if existing:
            logger.debug(f"Reusing mapping {existing.id} for {request.url}")
            return existing

    for attempt in range(1, settings.ID_MAX_RETRIES + 1):
        mapping = _insert(db, generate_id(settings.ID_LENGTH), request.url)
        if mapping is not None:
            logger.info(f"Created mapping {mapping.id} -> {mapping.original_url}")
            return mapping
        logger.warning(f"Generated id collided (attempt {attempt}/{settings.ID_MAX_RETRIES})")

    logger.error(f"Could not generate a unique id after {settings.ID_MAX_RETRIES} attempts")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Could not generate a unique id"
    )


def get_original_url(db: Session, mapping_id: str) -> str:
    """
    Resolve an identifier to its original URL

    Raises:
        HTTPException: 404 if no mapping has this id
    """
    mapping = db.query(UrlMapping).filter(UrlMapping.id == mapping_id).first()
    if not mapping:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return mapping.original_url
