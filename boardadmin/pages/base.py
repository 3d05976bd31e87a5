"""Shared page-controller state."""

from enum import Enum

from boardadmin.ui.dialog import Callback, ConfirmDialog, ConfirmDialogState


class PageStatus(str, Enum):
    """Load state of a page."""
    IDLE = "idle"
    LOADING = "loading"
    SAVING = "saving"
    SUCCESS = "success"
    ERROR = "error"


class BasePage:
    """
    Local UI state of one screen.

    Every load is numbered. Only the most recently issued load may write
    its result, so a slow response to an old filter never replaces the
    data of a newer one.
    """

    def __init__(self):
        self.status = PageStatus.IDLE
        self.error: str | None = None
        self.confirm_dialog = ConfirmDialogState()
        self._load_seq = 0

    @property
    def loading(self) -> bool:
        return self.status == PageStatus.LOADING

    def _begin_load(self) -> int:
        self._load_seq += 1
        self.status = PageStatus.LOADING
        self.error = None
        return self._load_seq

    def _is_current(self, seq: int) -> bool:
        return seq == self._load_seq

    def _fail(self, message: str):
        self.error = message
        self.status = PageStatus.ERROR

    def show_confirm_dialog(
        self,
        title: str,
        message: str,
        on_confirm: Callback,
        variant: str = "danger",
    ):
        self.confirm_dialog = ConfirmDialogState(
            is_open=True,
            title=title,
            message=message,
            on_confirm=on_confirm,
            variant=variant,
        )

    def close_confirm_dialog(self):
        self.confirm_dialog = ConfirmDialogState()

    @property
    def dialog(self) -> ConfirmDialog:
        """Dialog built from the current state, closing back into this page."""
        return ConfirmDialog.from_state(self.confirm_dialog, on_close=self.close_confirm_dialog)
