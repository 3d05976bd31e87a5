"""Admin session endpoints."""

from typing import Any

from boardadmin.models.auth import Session
from boardadmin.services.base import BaseService, service_call


class SessionService(BaseService):

    @service_call
    async def get_sessions(self) -> list[Session]:
        data = await self.client.get("/api/auth/sessions/")
        if isinstance(data, dict):
            data = data.get("sessions", data.get("results", []))
        return [Session.model_validate(raw) for raw in data or []]

    @service_call
    async def logout_all_sessions(self) -> dict[str, Any]:
        return await self.client.post("/api/auth/sessions/logout-all/", {"confirm": True}) or {}

    @service_call
    async def invalidate_session(self, session_id: int | str) -> Any:
        return await self.client.post(f"/api/auth/sessions/{session_id}/invalidate/")

    @service_call
    async def force_logout(self) -> dict[str, Any]:
        return await self.client.post("/api/auth/sessions/force-logout/") or {}
