import uuid

from fastapi import APIRouter, Depends

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.timetable import TimetableRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.timetable import (
    TimetableSlotCreate,
    TimetableSlotOut,
    TimetableSlotUpdate,
    TimetableWeekOut,
)
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/timetable", tags=["Timetable"])


@router.get("", response_model=list[TimetableSlotOut])
def list_slots(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return TimetableRepository(client).list(me)


@router.get("/week", response_model=TimetableWeekOut)
def get_week(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return TimetableRepository(client).week(me)


@router.post("", response_model=TimetableSlotOut, status_code=201)
def create_slot(body: TimetableSlotCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return TimetableRepository(client).create(me, body)


@router.put("/{slot_id}", response_model=TimetableSlotOut)
def update_slot(
    slot_id: uuid.UUID,
    body: TimetableSlotUpdate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return TimetableRepository(client).update(slot_id, body)


@router.delete("/{slot_id}", response_model=DeletedOut)
def delete_slot(slot_id: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    TimetableRepository(client).delete(slot_id)
    return DeletedOut()
