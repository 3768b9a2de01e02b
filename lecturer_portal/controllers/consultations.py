from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.errors import PortalError
from lecturer_portal.repositories.consultations import ConsultationRepository


class ConsultationsScreen(ListScreen):
    repository_class = ConsultationRepository
    noun = "consultation"
    plural = "consultations"
    created_title = "Consultation added successfully"
    updated_title = "Consultation updated successfully"
    deleted_title = "Consultation deleted successfully"

    def __init__(self, client, status_filter=None):
        super().__init__(client)
        self.status_filter = status_filter

    def fetch(self):
        return self.repository.list(self.owner_id, status=self.status_filter)

    @property
    def pending(self) -> list:
        return [c for c in self.items if c.status == "pending"]

    async def approve(self, row_id):
        return await self._decide(row_id, "approved")

    async def decline(self, row_id):
        return await self._decide(row_id, "declined")

    async def _decide(self, row_id, status):
        action = ("status", row_id)
        if self.is_pending(action):
            return None
        with self.busy(action):
            try:
                row = await self.call(self.repository.set_status, row_id, status)
            except PortalError as e:
                self.fail("Error updating consultation", e)
                return None
            self.notify(f"Consultation {status}")
            await self.refresh()
            return row
