"""Input models: landing page content and image metadata."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError


class PageContent(BaseModel):
    """Content extracted from a landing page that loaded successfully."""

    model_config = {"frozen": True, "populate_by_name": True}

    kind: Literal["success"] = "success"
    title: str = Field(default="", description="Document title")
    meta_description: str = Field(default="", alias="metaDescription", description="Meta description")
    headings: list[str] = Field(default_factory=list, description="h1-h3 texts in document order")
    body_text: str = Field(default="", alias="bodyText", description="Whitespace-collapsed body text")
    has_contact_form: bool = Field(default=False, alias="hasContactForm")
    has_phone_number: bool = Field(default=False, alias="hasPhoneNumber")
    has_email: bool = Field(default=False, alias="hasEmail")
    has_privacy_policy: bool = Field(default=False, alias="hasPrivacyPolicy")
    has_terms: bool = Field(default=False, alias="hasTerms")
    images: int = Field(default=0, ge=0, description="Number of img elements")
    forms: int = Field(default=0, ge=0, description="Number of form elements")
    links: int = Field(default=0, ge=0, description="Number of anchor elements")
    protocol: str = Field(default="", description="URL protocol, e.g. 'https:'")


class PageTimeout(BaseModel):
    """The landing page did not load within the fetch timeout."""

    model_config = {"frozen": True}

    kind: Literal["timeout"] = "timeout"
    message: str = Field(default="Page took too long to load", description="Failure message")


class PageFetchError(BaseModel):
    """The landing page could not be loaded."""

    model_config = {"frozen": True, "populate_by_name": True}

    kind: Literal["error"] = "error"
    message: str = Field(default="Failed to fetch landing page", description="Failure message")
    status_code: int | None = Field(default=None, alias="statusCode", description="HTTP status")


LandingPageContent = Annotated[
    Union[PageContent, PageTimeout, PageFetchError],
    Field(discriminator="kind"),
]


class ImageInfo(BaseModel):
    """Metadata of an ad image."""

    model_config = {"frozen": True}

    size: int = Field(ge=0, description="File size in bytes")
    type: str = Field(description="MIME type, e.g. image/png")


def parse_landing_page_content(data: Any) -> PageContent | PageTimeout | PageFetchError | None:
    """Parse landing page content from the scraper's JSON shape.

    Accepts an existing variant unchanged, a dict with a ``kind`` key, or the
    loose shape with ``success`` / ``timeout`` / ``error`` flags. A dict with
    no kind and none of the flags set carries no content and yields None.

    Raises:
        ValidationError: If the data is not an object, names an unknown kind
            or has invalid fields
    """
    from adcheck.utils.errors import ValidationError

    if isinstance(data, (PageContent, PageTimeout, PageFetchError)):
        return data

    if not isinstance(data, dict):
        raise ValidationError(
            f"Landing page content must be an object, got {type(data).__name__}",
            field="landing_page_content",
        )

    fields = {k: v for k, v in data.items() if k not in ("kind", "success", "timeout", "error")}
    kind = data.get("kind")

    if kind is None:
        if data.get("success"):
            kind = "success"
        elif data.get("timeout"):
            kind = "timeout"
        elif data.get("error"):
            kind = "error"
        else:
            return None

    models = {"success": PageContent, "timeout": PageTimeout, "error": PageFetchError}
    model = models.get(kind)
    if model is None:
        raise ValidationError(f"Unknown landing page content kind: {kind}", field="kind")

    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid landing page content: {e}", field="landing_page_content") from e


def parse_image_info(data: Any) -> ImageInfo:
    """Parse image metadata from an ImageInfo or a dict.

    Raises:
        ValidationError: If size or type are missing or invalid
    """
    from adcheck.utils.errors import ValidationError

    if isinstance(data, ImageInfo):
        return data

    try:
        return ImageInfo.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid image info: {e}", field="image_info") from e
