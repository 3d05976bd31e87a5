"""Admin profile endpoints."""

from typing import Any

from boardadmin.services.base import BaseService, service_call


class ProfileService(BaseService):
    """Profile, password and avatar of the logged-in admin."""

    @service_call
    async def get_profile(self) -> dict[str, Any]:
        return await self.client.get("/api/auth/profile/")

    @service_call
    async def update_profile(self, profile_data: dict[str, Any]) -> dict[str, Any]:
        return await self.client.put("/api/auth/profile/", profile_data)

    @service_call
    async def change_password(self, password_data: dict[str, Any]) -> Any:
        return await self.client.post("/api/auth/password/change/", password_data)

    @service_call
    async def get_profile_stats(self) -> dict[str, Any]:
        return await self.client.get("/api/auth/profile/stats/")

    @service_call
    async def update_avatar(self, image) -> Any:
        """Upload a new avatar as a multipart ``avatar`` part."""
        return await self.client.patch(
            "/api/auth/profile/avatar/",
            files={"avatar": image.as_file_part()},
        )
