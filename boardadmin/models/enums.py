"""Enumeration types for boardadmin."""

from enum import Enum


class BlogStatus(str, Enum):
    """Publication state of a blog post."""
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class AccountStatus(str, Enum):
    """Recruiter moderation state."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CompanySize(str, Enum):
    """Company headcount bracket."""
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


class Sector(str, Enum):
    """Business sector of a recruiting company."""
    TECHNOLOGY = "TECHNOLOGY"
    HEALTHCARE = "HEALTHCARE"
    FINANCE = "FINANCE"
    EDUCATION = "EDUCATION"
    MANUFACTURING = "MANUFACTURING"
    RETAIL = "RETAIL"
    OTHER = "OTHER"


class ValidationAction(str, Enum):
    """Moderation action sent to the recruiter-validation endpoint."""
    APPROVE = "approve"
    REJECT = "reject"


class ApiErrorType(str, Enum):
    """Error types for API client operations."""
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    HTTP = "http"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    SERVER = "server"
    DECODE = "decode"
    UNKNOWN = "unknown"
