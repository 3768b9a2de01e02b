import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.reports import ReportRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.report import ReportCreate, ReportOut, ReportType
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=list[ReportOut])
def list_reports(
    report_type: Optional[ReportType] = Query(None),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ReportRepository(client).list(me, report_type=report_type)


@router.post("", response_model=ReportOut, status_code=201)
def create_report(body: ReportCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return ReportRepository(client).create(me, body)


@router.get("/{report_id}", response_model=ReportOut)
def get_report(report_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return ReportRepository(client).get(report_id)


@router.delete("/{report_id}", response_model=DeletedOut)
def delete_report(report_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    ReportRepository(client).delete(report_id)
    return DeletedOut()
