import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.consultations import ConsultationRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.consultation import (
    ConsultationCreate,
    ConsultationOut,
    ConsultationStatus,
    ConsultationStatusIn,
    ConsultationUpdate,
)
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/consultations", tags=["Consultations"])


@router.get("", response_model=list[ConsultationOut])
def list_consultations(
    status: Optional[ConsultationStatus] = Query(None),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ConsultationRepository(client).list(me, status=status)


@router.post("", response_model=ConsultationOut, status_code=201)
def create_consultation(
    body: ConsultationCreate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ConsultationRepository(client).create(me, body)


@router.put("/{consultation_id}", response_model=ConsultationOut)
def update_consultation(
    consultation_id: uuid.UUID,
    body: ConsultationUpdate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ConsultationRepository(client).update(consultation_id, body)


@router.patch("/{consultation_id}/status", response_model=ConsultationOut)
def set_consultation_status(
    consultation_id: uuid.UUID,
    body: ConsultationStatusIn,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return ConsultationRepository(client).set_status(consultation_id, body.status)


@router.delete("/{consultation_id}", response_model=DeletedOut)
def delete_consultation(
    consultation_id: uuid.UUID,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    ConsultationRepository(client).delete(consultation_id)
    return DeletedOut()
