"""Blog list, create and edit pages."""

import logging
from datetime import datetime
from typing import Any

from boardadmin.models.blog import BlogCategory, BlogFilters, BlogPost, BlogStats
from boardadmin.models.enums import BlogStatus
from boardadmin.pages.base import BasePage, PageStatus
from boardadmin.pages.forms import (
    BlogPostForm,
    ImageUpload,
    ValidationError,
    format_publish_date,
    validate_image,
)
from boardadmin.services.base import ServiceError
from boardadmin.services.blog import BlogService

logger = logging.getLogger(__name__)

LOAD_ERROR = "Erreur lors du chargement des données"


class BlogListPage(BasePage):
    """Filterable list of posts with stats and moderation actions."""

    def __init__(self, blog_service: BlogService):
        super().__init__()
        self.blog_service = blog_service
        self.filters = BlogFilters()
        self.posts: list[BlogPost] = []
        self.categories: list[BlogCategory] = []
        self.stats: BlogStats | None = None

    async def load(self):
        seq = self._begin_load()
        try:
            posts = await self.blog_service.get_blog_posts(self.filters)
            categories = await self.blog_service.get_categories()
            stats = await self.blog_service.get_blog_stats()
        except ServiceError as e:
            if self._is_current(seq):
                logger.error("Failed to load blog data: %s", e)
                self._fail(LOAD_ERROR)
            return
        if not self._is_current(seq):
            logger.debug("Discarding stale blog load %s", seq)
            return
        self.posts = posts
        self.categories = categories
        self.stats = stats
        self.status = PageStatus.SUCCESS

    async def set_filter(self, key: str, value: Any):
        self.filters = self.filters.model_copy(update={key: value})
        await self.load()

    async def reset_filters(self):
        self.filters = BlogFilters()
        await self.load()

    def request_delete(self, post: BlogPost):
        self.show_confirm_dialog(
            "Supprimer l'article",
            f"Êtes-vous sûr de vouloir supprimer « {post.title} » ? Cette action est irréversible.",
            lambda: self.delete_post(post.slug),
        )

    def request_status_change(self, post: BlogPost, status: BlogStatus):
        self.show_confirm_dialog(
            "Changer le statut",
            f"Passer « {post.title} » au statut {status.value} ?",
            lambda: self.change_status(post.slug, status),
            variant="warning",
        )

    def request_toggle_featured(self, post: BlogPost):
        action = "Retirer de la vedette" if post.is_featured else "Mettre en vedette"
        self.show_confirm_dialog(
            action,
            f"{action} « {post.title} » ?",
            lambda: self.toggle_featured(post.slug, not post.is_featured),
            variant="primary",
        )

    async def _act(self, operation, *args) -> bool:
        try:
            await operation(*args)
        except ServiceError as e:
            self.error = str(e)
            return False
        self.close_confirm_dialog()
        await self.load()
        return True

    async def delete_post(self, slug: str) -> bool:
        return await self._act(self.blog_service.delete_blog_post, slug)

    async def change_status(self, slug: str, status: BlogStatus) -> bool:
        return await self._act(self.blog_service.change_post_status, slug, status)

    async def toggle_featured(self, slug: str, is_featured: bool) -> bool:
        return await self._act(self.blog_service.toggle_featured, slug, is_featured)


class _BlogFormPage(BasePage):
    """Shared form handling of the create and edit pages."""

    def __init__(self, blog_service: BlogService):
        super().__init__()
        self.blog_service = blog_service
        self.form = BlogPostForm()
        self.categories: list[BlogCategory] = []
        self.field_errors: dict[str, str] = {}

    async def _load_categories(self):
        try:
            self.categories = await self.blog_service.get_categories()
        except ServiceError as e:
            logger.error("Failed to load blog categories: %s", e)

    def set_field(self, name: str, value: Any):
        self.form = self.form.model_copy(update={name: value})
        self.field_errors.pop(name, None)

    def select_image(self, upload: ImageUpload) -> bool:
        """
        Accept a new featured image.

        A rejected file leaves the previously selected image in place.

        Returns:
            True if the image was accepted.
        """
        message = validate_image(upload)
        if message:
            self.field_errors["featured_image"] = message
            return False
        self.form = self.form.model_copy(update={"featured_image": upload})
        self.field_errors.pop("featured_image", None)
        return True

    def _validate(self):
        errors = self.form.validate_required()
        if errors:
            raise ValidationError(errors)

    def _check(self) -> bool:
        try:
            self._validate()
        except ValidationError as e:
            self.field_errors = e.field_errors
            return False
        self.field_errors = {}
        return True


class BlogCreatePage(_BlogFormPage):
    """New post form. Posts are published immediately unless told otherwise."""

    def __init__(self, blog_service: BlogService, now: datetime | None = None):
        super().__init__(blog_service)
        self.form = BlogPostForm(
            status=BlogStatus.PUBLISHED,
            publish_date=format_publish_date(now or datetime.now()),
        )
        self.created: Any = None

    async def mount(self):
        await self._load_categories()

    async def submit(self) -> bool:
        if not self._check():
            return False

        self.status = PageStatus.LOADING
        self.error = None
        publish_date = self.form.publish_date or format_publish_date(datetime.now())
        try:
            self.created = await self.blog_service.create_blog_post(
                self.form.to_fields(publish_date),
                self.form.to_files(),
            )
        except ServiceError as e:
            logger.error("Failed to create blog post: %s", e)
            self._fail(str(e) or "Erreur lors de la création de l'article")
            return False
        self.status = PageStatus.SUCCESS
        return True


class BlogEditPage(_BlogFormPage):
    """Edit form of an existing post, addressed by slug."""

    def __init__(self, blog_service: BlogService, slug: str):
        super().__init__(blog_service)
        self.slug = slug
        self.post: BlogPost | None = None

    @property
    def saving(self) -> bool:
        return self.status == PageStatus.SAVING

    async def mount(self):
        seq = self._begin_load()
        try:
            post = await self.blog_service.get_blog_post(self.slug)
        except ServiceError as e:
            if self._is_current(seq):
                logger.error("Failed to load blog post %s: %s", self.slug, e)
                self._fail("Erreur lors du chargement de l'article")
            return
        if not self._is_current(seq):
            return
        self.post = post
        self.form = BlogPostForm.from_post(post)
        await self._load_categories()
        self.status = PageStatus.SUCCESS

    async def submit(self) -> bool:
        if not self._check():
            return False

        self.status = PageStatus.SAVING
        self.error = None
        publish_date = None
        if self.form.status == BlogStatus.PUBLISHED and self.form.publish_date:
            publish_date = self.form.publish_date
        try:
            self.post = await self._save(publish_date)
        except ServiceError as e:
            logger.error("Failed to update blog post %s: %s", self.slug, e)
            self._fail(str(e) or "Erreur lors de la mise à jour de l'article")
            return False
        self.status = PageStatus.SUCCESS
        return True

    async def _save(self, publish_date: str | None) -> BlogPost | None:
        data = await self.blog_service.update_blog_post(
            self.slug,
            self.form.to_fields(publish_date),
            self.form.to_files(),
        )
        if isinstance(data, dict):
            return BlogPost.model_validate(data)
        return self.post
