from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.repositories.reports import ReportRepository


class ReportsScreen(ListScreen):
    repository_class = ReportRepository
    noun = "report"
    plural = "reports"
    add_verb = "creating"
    created_title = "Report created successfully"
    deleted_title = "Report deleted successfully"
    editable = False  # reports cannot be changed once written

    def __init__(self, client, report_type=None):
        super().__init__(client)
        self.report_type = report_type

    def fetch(self):
        return self.repository.list(self.owner_id, report_type=self.report_type)

    @property
    def sent(self) -> list:
        return [r for r in self.items if r.report_type == "sent"]

    @property
    def received(self) -> list:
        return [r for r in self.items if r.report_type == "received"]
