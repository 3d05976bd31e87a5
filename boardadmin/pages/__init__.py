"""Page controllers: local UI state and service orchestration per screen."""

from boardadmin.pages.base import BasePage, PageStatus
from boardadmin.pages.blog import BlogCreatePage, BlogEditPage, BlogListPage
from boardadmin.pages.forms import BlogPostForm, ImageUpload, ValidationError, normalize_tags
from boardadmin.pages.recruiters import RecruiterDetailPage, RecruitersPage

__all__ = [
    "BasePage",
    "PageStatus",
    "BlogCreatePage",
    "BlogEditPage",
    "BlogListPage",
    "BlogPostForm",
    "ImageUpload",
    "ValidationError",
    "normalize_tags",
    "RecruiterDetailPage",
    "RecruitersPage",
]
