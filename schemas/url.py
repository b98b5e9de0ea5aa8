import string

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator
from typing import Optional


# Paths served by other routes, a mapping with one of these ids could never be reached.
# Routing is case sensitive, so only exact matches are refused.
RESERVED_IDS = {"shorten", "health", "docs", "redoc", "openapi.json"}

# Characters RedirectResponse writes into Location without percent-encoding them
URL_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "-._~" + ":/%#?=@[]!$&'()*+,;")

_url_adapter = TypeAdapter(AnyUrl)


class ShortenRequest(BaseModel):
    """Schema for creating a new short URL"""
    url: str
    custom_id: Optional[str] = Field(None, min_length=1, max_length=64, pattern="^[a-zA-Z0-9_-]+$")

    @field_validator("url")
    @classmethod
    def check_absolute_url(cls, value: str) -> str:
        # Validate only, the redirect must hand back the exact string that was submitted.
        # AnyUrl drops surrounding spaces, tabs and newlines, so those are refused first.
        bad_chars = sorted({c for c in value if c not in URL_SAFE_CHARS})
        if bad_chars:
            raise ValueError(f"URL contains characters that must be percent-encoded: {bad_chars!r}")
        try:
            _url_adapter.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"'{value}' is not a valid absolute URL") from exc
        return value

    @field_validator("custom_id")
    @classmethod
    def check_not_reserved(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value in RESERVED_IDS:
            raise ValueError(f"'{value}' is reserved and cannot be used as an id")
        return value


class ShortenResponse(BaseModel):
    """Response after creating a short URL"""
    url: str
