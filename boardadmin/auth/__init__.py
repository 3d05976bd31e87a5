"""Authentication state."""

from boardadmin.auth.context import AuthContext

__all__ = ["AuthContext"]
