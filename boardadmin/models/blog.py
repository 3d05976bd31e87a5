"""Blog data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boardadmin.models.enums import BlogStatus


class BlogCategory(BaseModel):
    """Blog category as listed by the backend."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    name: str = ""


class BlogAuthor(BaseModel):
    """Author summary embedded in a blog post."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.username or "Inconnu"


class BlogPost(BaseModel):
    """Blog post mirrored from the backend."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    slug: str = ""
    title: str = ""
    excerpt: str | None = None
    content: str | None = None
    category: BlogCategory | int | str | None = None
    tags: list[str] = Field(default_factory=list)
    # Kept as a raw string so unknown values survive and fall back at display time
    status: str = BlogStatus.DRAFT.value
    is_featured: bool = False
    featured_image: str | None = None
    meta_description: str | None = None
    publish_date: datetime | None = None
    views_count: int = 0
    author: BlogAuthor | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [t.strip() for t in value.split(",") if t.strip()]
        # Tag objects come back as {"name": ...} on some endpoints
        return [t["name"] if isinstance(t, dict) else str(t) for t in value]

    @field_validator("views_count", mode="before")
    @classmethod
    def _none_views(cls, value: Any) -> int:
        return value or 0

    @field_validator("is_featured", mode="before")
    @classmethod
    def _none_featured(cls, value: Any) -> bool:
        return False if value is None else value

    @property
    def category_name(self) -> str | None:
        if isinstance(self.category, BlogCategory):
            return self.category.name
        return None

    @property
    def category_id(self) -> int | str | None:
        if isinstance(self.category, BlogCategory):
            return self.category.id
        return self.category


class BlogStats(BaseModel):
    """Aggregate blog statistics."""

    model_config = ConfigDict(extra="allow")

    total_posts: int = 0
    total_views: int = 0


class BlogFilters(BaseModel):
    """Filter state of the blog list page."""

    status: str = ""
    category: str = ""
    author: str = ""
    is_featured: str = ""
    search: str = ""
    ordering: str = "-created_at"


ORDERING_CHOICES = {
    "-created_at": "Plus récent",
    "created_at": "Plus ancien",
    "-publish_date": "Date publication ↓",
    "publish_date": "Date publication ↑",
    "-views_count": "Plus vus",
}
