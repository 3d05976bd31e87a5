"""Terminal UI widgets."""

from boardadmin.ui.dialog import ConfirmDialog, ConfirmDialogState
from boardadmin.ui.labels import (
    account_status_label,
    blog_status_label,
    company_size_label,
    sector_label,
)

__all__ = [
    "ConfirmDialog",
    "ConfirmDialogState",
    "account_status_label",
    "blog_status_label",
    "company_size_label",
    "sector_label",
]
