"""Display labels for closed enumerations.

Unknown values never raise: each lookup falls back to a safe default.
"""

from datetime import datetime

from boardadmin.models.enums import AccountStatus, BlogStatus

BLOG_STATUS_LABELS = {
    BlogStatus.DRAFT.value: ("Brouillon", "grey62"),
    BlogStatus.PENDING.value: ("En attente", "yellow"),
    BlogStatus.PUBLISHED.value: ("Publié", "green"),
    BlogStatus.ARCHIVED.value: ("Archivé", "red"),
}

ACCOUNT_STATUS_LABELS = {
    AccountStatus.PENDING.value: ("En attente", "yellow"),
    AccountStatus.APPROVED.value: ("Approuvé", "green"),
    AccountStatus.REJECTED.value: ("Rejeté", "red"),
}

SECTOR_LABELS = {
    "TECHNOLOGY": "Technologie",
    "HEALTHCARE": "Santé",
    "FINANCE": "Finance",
    "EDUCATION": "Éducation",
    "MANUFACTURING": "Manufacture",
    "RETAIL": "Commerce",
    "OTHER": "Autre",
}

COMPANY_SIZE_LABELS = {
    "SMALL": "Petite (< 50 employés)",
    "MEDIUM": "Moyenne (50-250 employés)",
    "LARGE": "Grande (250+ employés)",
}


def blog_status_label(status: str | None) -> tuple[str, str]:
    """Label and color for a blog status; unknown values show as a draft."""
    return BLOG_STATUS_LABELS.get(status or "", BLOG_STATUS_LABELS[BlogStatus.DRAFT.value])


def account_status_label(status: str | None) -> tuple[str, str]:
    """Label and color for a recruiter status; unknown values show as pending."""
    return ACCOUNT_STATUS_LABELS.get(status or "", ACCOUNT_STATUS_LABELS[AccountStatus.PENDING.value])


def sector_label(sector: str | None) -> str:
    return SECTOR_LABELS.get(sector or "", sector or "")


def company_size_label(size: str | None) -> str:
    return COMPANY_SIZE_LABELS.get(size or "", size or "")


def format_date(value: datetime | None, with_time: bool = True) -> str:
    if value is None:
        return "Non défini"
    if with_time:
        return value.strftime("%d/%m/%Y %H:%M")
    return value.strftime("%d/%m/%Y")
