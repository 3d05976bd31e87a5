"""Generic yes/no confirmation dialog."""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.text import Text

Callback = Callable[[], Any | Awaitable[Any]]

VARIANT_STYLES = {
    "danger": "red",
    "success": "green",
    "warning": "yellow",
    "primary": "blue",
}


class ConfirmDialogState(BaseModel):
    """What a page remembers about its confirmation dialog."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    is_open: bool = False
    title: str = ""
    message: str = ""
    on_confirm: Callback | None = None
    variant: str = "danger"


async def _invoke(callback: Callback | None) -> Any:
    if callback is None:
        return None
    result = callback()
    if inspect.isawaitable(result):
        return await result
    return result


class ConfirmDialog:
    """
    Presentational confirmation prompt.

    It holds nothing but the props it is built with. Confirming runs the
    caller's callback and leaves the dialog open; closing is up to the
    caller, usually from inside that callback.
    """

    def __init__(
        self,
        is_open: bool,
        title: str,
        message: str,
        on_confirm: Callback | None,
        on_close: Callback | None,
        confirm_variant: str = "danger",
        confirm_text: str = "Confirmer",
        cancel_text: str = "Annuler",
    ):
        self.is_open = is_open
        self.title = title
        self.message = message
        self.on_confirm = on_confirm
        self.on_close = on_close
        self.confirm_variant = confirm_variant
        self.confirm_text = confirm_text
        self.cancel_text = cancel_text

    @classmethod
    def from_state(
        cls,
        state: ConfirmDialogState,
        on_close: Callback | None,
        confirm_text: str = "Confirmer",
        cancel_text: str = "Annuler",
    ) -> "ConfirmDialog":
        return cls(
            is_open=state.is_open,
            title=state.title,
            message=state.message,
            on_confirm=state.on_confirm,
            on_close=on_close,
            confirm_variant=state.variant,
            confirm_text=confirm_text,
            cancel_text=cancel_text,
        )

    def render(self) -> Panel | None:
        """Panel showing the prompt, or None while closed."""
        if not self.is_open:
            return None
        style = VARIANT_STYLES.get(self.confirm_variant, "red")
        body = Text(self.message)
        body.append("\n\n")
        body.append(f"[{self.confirm_text}]", style=f"bold {style}")
        body.append("  ")
        body.append(f"[{self.cancel_text}]", style="dim")
        return Panel(body, title=self.title, border_style=style)

    async def confirm(self) -> Any:
        return await _invoke(self.on_confirm)

    async def cancel(self) -> Any:
        return await _invoke(self.on_close)

    async def ask(self, console: Console, prompt: Callable[..., bool] = Confirm.ask) -> bool:
        """Show the dialog and dispatch the answer. Returns True if confirmed."""
        panel = self.render()
        if panel is None:
            return False
        console.print(panel)
        if prompt(self.confirm_text + " ?", console=console, default=False):
            await self.confirm()
            return True
        await self.cancel()
        return False
