"""
Dashboard statistics for the admin console.
"""
from app.database.collections import Collections
from app.schemas.user import StatsResponse
from app.services.base import CollectionService
from app.services.message_service import MessageService


class StatsService(CollectionService):

    async def get_stats(self) -> StatsResponse:
        users = await self._load(Collections.USERS)
        events = await self._load(Collections.EVENTS)
        gallery = await self._load(Collections.GALLERY)

        return StatsResponse(
            total_members=len(users),
            total_events=len(events),
            total_photos=len(gallery),
            unread_messages=await MessageService(self.store).count_unread(),
        )
