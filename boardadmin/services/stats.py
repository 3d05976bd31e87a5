"""Read-only platform statistics."""

from typing import Any

from boardadmin.services.base import BaseService, ServiceError, service_call

STAT_ENDPOINTS: dict[str, str] = {
    # Core admin
    "system": "/api/core-admin/stats/system/",
    "users": "/api/core-admin/stats/users/",
    "content": "/api/core-admin/stats/content/",
    # Analytics
    "site": "/api/analytics/site-stats/",
    "analytics-summary": "/api/analytics/summary/",
    "activity": "/api/analytics/activity-stats/",
    "offer-performance": "/api/analytics/offer-performance/",
    "dashboard": "/api/analytics/dashboard/",
    "real-time": "/api/analytics/real-time/",
    # Common
    "common-system": "/api/common/stats/system/",
    "file-upload": "/api/common/stats/file-upload/",
    "contact-messages": "/api/common/stats/contact-messages/",
    "faq": "/api/common/stats/faq/",
    "hr": "/api/common/hr/stats/",
    "boost": "/api/common/boost/stats/",
    "public": "/api/common/stats/public/",
    # Per app
    "blog": "/api/blog/stats/",
    "job-diffusion": "/api/jobs/diffusion-stats/",
    "applications": "/api/applications/stats/",
    "notifications": "/api/notifications/stats/",
    "notification-analytics": "/api/notifications/analytics/",
    "subscriptions": "/api/subscriptions/stats/",
    "payments": "/api/subscriptions/payment-stats/",
    "ai-services": "/api/subscriptions/ai-services/stats/",
    "profile-visibility": "/api/auth/profile/visibility/stats/",
}


class StatsService(BaseService):
    """One getter per statistics endpoint, plus lookup by name."""

    async def get_stat(self, name: str) -> dict[str, Any]:
        path = STAT_ENDPOINTS.get(name)
        if path is None:
            raise ServiceError(f"Statistique inconnue : {name}")
        return await self._fetch(path)

    @service_call
    async def _fetch(self, path: str) -> dict[str, Any]:
        return await self.client.get(path) or {}

    async def get_system_stats(self):
        return await self.get_stat("system")

    async def get_user_stats(self):
        return await self.get_stat("users")

    async def get_content_stats(self):
        return await self.get_stat("content")

    async def get_site_stats(self):
        return await self.get_stat("site")

    async def get_analytics_summary(self):
        return await self.get_stat("analytics-summary")

    async def get_activity_stats(self):
        return await self.get_stat("activity")

    async def get_offer_performance(self):
        return await self.get_stat("offer-performance")

    async def get_dashboard_stats(self):
        return await self.get_stat("dashboard")

    async def get_real_time_stats(self):
        return await self.get_stat("real-time")

    async def get_common_system_stats(self):
        return await self.get_stat("common-system")

    async def get_file_upload_stats(self):
        return await self.get_stat("file-upload")

    async def get_contact_message_stats(self):
        return await self.get_stat("contact-messages")

    async def get_faq_stats(self):
        return await self.get_stat("faq")

    async def get_hr_stats(self):
        return await self.get_stat("hr")

    async def get_boost_stats(self):
        return await self.get_stat("boost")

    async def get_blog_stats(self):
        return await self.get_stat("blog")

    async def get_job_diffusion_stats(self):
        return await self.get_stat("job-diffusion")

    async def get_application_stats(self):
        return await self.get_stat("applications")

    async def get_notification_stats(self):
        return await self.get_stat("notifications")

    async def get_notification_analytics(self):
        return await self.get_stat("notification-analytics")

    async def get_subscription_stats(self):
        return await self.get_stat("subscriptions")

    async def get_payment_stats(self):
        return await self.get_stat("payments")

    async def get_ai_services_stats(self):
        return await self.get_stat("ai-services")

    async def get_profile_visibility_stats(self):
        return await self.get_stat("profile-visibility")

    async def get_public_stats(self):
        return await self.get_stat("public")
