from __future__ import annotations

from lecturer_portal.models.registry import Report
from lecturer_portal.repositories.base import OwnedRepository
from lecturer_portal.schemas.report import ReportCreate, ReportOut


class ReportRepository(OwnedRepository):
    """Reports are write-once: there is no update path."""

    model = Report
    out_schema = ReportOut
    create_schema = ReportCreate
    label = "Report"

    def list(self, owner_id, report_type: str | None = None):
        criteria = [Report.report_type == report_type] if report_type else []
        return super().list(owner_id, *criteria)
