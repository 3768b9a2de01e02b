from lecturer_portal.controllers.base import Screen
from lecturer_portal.errors import PortalError
from lecturer_portal.repositories.dashboard import DashboardRepository
from lecturer_portal.schemas.dashboard import DashboardStats


class DashboardScreen(Screen):
    def __init__(self, client):
        super().__init__(client)
        self.repository = DashboardRepository(client)
        self.stats = DashboardStats()

    async def activate(self) -> bool:
        if await self.resolve_owner() is None:
            self.loading = False
            return False
        try:
            self.stats = await self.call(self.repository.stats, self.owner_id)
        except PortalError as e:
            self.fail("Error fetching dashboard", e)
        finally:
            self.loading = False
        return True
