"""Blog administration endpoints."""

from typing import Any

from boardadmin.http.query import build_query
from boardadmin.models.blog import BlogCategory, BlogFilters, BlogPost, BlogStats
from boardadmin.models.enums import BlogStatus
from boardadmin.services.base import BaseService, service_call

BLOG_FILTER_KEYS = ["status", "category", "author", "is_featured", "search", "ordering"]


def _as_list(data: Any) -> list[dict]:
    """Accept both paginated and bare-list payloads."""
    if isinstance(data, dict):
        return data.get("results", [])
    return data or []


class BlogService(BaseService):
    """Posts, categories and statistics of the blog."""

    @service_call
    async def get_blog_posts(self, filters: BlogFilters | dict | None = None) -> list[BlogPost]:
        if isinstance(filters, BlogFilters):
            filters = filters.model_dump()
        params = build_query(filters, BLOG_FILTER_KEYS)
        data = await self.client.get("/api/blog/posts/", params=params)
        return [BlogPost.model_validate(raw) for raw in _as_list(data)]

    @service_call
    async def get_blog_post(self, slug: str) -> BlogPost:
        data = await self.client.get(f"/api/blog/posts/{slug}/")
        return BlogPost.model_validate(data or {})

    @service_call
    async def create_blog_post(self, fields: dict[str, str], files: dict | None = None) -> Any:
        """Create a post from multipart form fields and an optional image part."""
        return await self.client.post("/api/blog/posts/create/", data=fields, files=files or None)

    @service_call
    async def update_blog_post(self, slug: str, fields: dict[str, str], files: dict | None = None) -> Any:
        return await self.client.put(f"/api/blog/posts/{slug}/update/", data=fields, files=files or None)

    @service_call
    async def delete_blog_post(self, slug: str) -> Any:
        return await self.client.delete(f"/api/blog/posts/{slug}/delete/")

    @service_call
    async def change_post_status(self, slug: str, status: BlogStatus | str) -> Any:
        value = status.value if isinstance(status, BlogStatus) else status
        return await self.client.patch(f"/api/blog/posts/{slug}/update/", {"status": value})

    @service_call
    async def toggle_featured(self, slug: str, is_featured: bool) -> Any:
        return await self.client.patch(f"/api/blog/posts/{slug}/update/", {"is_featured": is_featured})

    @service_call
    async def get_blog_stats(self) -> BlogStats:
        data = await self.client.get("/api/blog/stats/")
        return BlogStats.model_validate(data or {})

    @service_call
    async def get_categories(self) -> list[BlogCategory]:
        data = await self.client.get("/api/blog/categories/")
        return [BlogCategory.model_validate(raw) for raw in _as_list(data)]

    @service_call
    async def search_posts(self, search_params: dict[str, Any]) -> list[BlogPost]:
        data = await self.client.post("/api/blog/search/", search_params)
        return [BlogPost.model_validate(raw) for raw in _as_list(data)]
