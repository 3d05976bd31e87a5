"""Client-side form state and validation."""

import mimetypes
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

from boardadmin.models.blog import BlogPost
from boardadmin.models.enums import BlogStatus

MAX_IMAGE_SIZE = 5 * 1024 * 1024
ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif")

IMAGE_TOO_LARGE = "L'image ne doit pas dépasser 5MB"
IMAGE_BAD_TYPE = "Format d'image non supporté. Utilisez JPEG, PNG ou GIF."
TITLE_REQUIRED = "Le titre est requis"
CONTENT_REQUIRED = "Le contenu est requis"

PUBLISH_DATE_FORMAT = "%Y-%m-%dT%H:%M"


class ValidationError(Exception):
    """Client-side validation failure, keyed by form field."""

    def __init__(self, field_errors: dict[str, str]):
        super().__init__("; ".join(field_errors.values()))
        self.field_errors = field_errors


class ImageUpload(BaseModel):
    """A picked image file, held in memory until submission."""

    filename: str
    content_type: str
    size: int
    content: bytes = b""

    @classmethod
    def from_path(cls, path: Path) -> "ImageUpload":
        content = path.read_bytes()
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(
            filename=path.name,
            content_type=content_type,
            size=len(content),
            content=content,
        )

    def as_file_part(self) -> tuple[str, bytes, str]:
        return (self.filename, self.content, self.content_type)


def validate_image(upload: ImageUpload) -> str | None:
    """Return the error message for an unacceptable image, or None."""
    if upload.size > MAX_IMAGE_SIZE:
        return IMAGE_TOO_LARGE
    if upload.content_type not in ALLOWED_IMAGE_TYPES:
        return IMAGE_BAD_TYPE
    return None


def normalize_tags(raw: str | None) -> list[str]:
    """Split a comma-separated tag string into clean, non-empty tags."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def format_publish_date(value: datetime) -> str:
    return value.strftime(PUBLISH_DATE_FORMAT)


class BlogPostForm(BaseModel):
    """Editable fields of a blog post, as typed by the admin."""

    title: str = ""
    excerpt: str = ""
    content: str = ""
    category: str = ""
    tags: str = ""
    status: BlogStatus = BlogStatus.DRAFT
    is_featured: bool = False
    featured_image: ImageUpload | None = None
    meta_description: str = ""
    publish_date: str = ""

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostForm":
        """Prefill the form from an existing post."""
        category = post.category_id
        try:
            status = BlogStatus(post.status)
        except ValueError:
            status = BlogStatus.DRAFT
        return cls(
            title=post.title or "",
            excerpt=post.excerpt or "",
            content=post.content or "",
            category="" if category is None else str(category),
            tags=", ".join(post.tags),
            status=status,
            is_featured=post.is_featured,
            meta_description=post.meta_description or "",
            publish_date=format_publish_date(post.publish_date) if post.publish_date else "",
        )

    def validate_required(self) -> dict[str, str]:
        errors = {}
        if not self.title.strip():
            errors["title"] = TITLE_REQUIRED
        if not self.content.strip():
            errors["content"] = CONTENT_REQUIRED
        return errors

    def to_fields(self, publish_date: str | None) -> dict[str, str]:
        """Multipart text fields; ``publish_date`` is decided by the page."""
        fields = {
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "category": self.category,
            "status": self.status.value,
            "is_featured": "true" if self.is_featured else "false",
            "meta_description": self.meta_description,
        }
        tags = normalize_tags(self.tags)
        if tags:
            fields["tags"] = ", ".join(tags)
        if publish_date:
            fields["publish_date"] = publish_date
        return fields

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        if self.featured_image is None:
            return {}
        return {"featured_image": self.featured_image.as_file_part()}


MIN_PASSWORD_LENGTH = 8


def validate_password_change(new_password: str, confirm_password: str) -> str | None:
    """Return the error message for a rejected password change, or None."""
    if new_password != confirm_password:
        return "Les nouveaux mots de passe ne correspondent pas"
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return "Le nouveau mot de passe doit contenir au moins 8 caractères"
    return None
